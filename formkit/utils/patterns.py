"""
Utility functions for regular expression handling in field rules.

This module provides functions for compiling rule patterns, matching values
against them, and extracting file extensions from file names.
"""

import re
from pathlib import PurePath
from typing import TypeAlias

PatternLike: TypeAlias = str | re.Pattern[str]


def compile_pattern(pattern: PatternLike | None) -> re.Pattern[str] | None:
    """Compile a rule pattern, passing compiled patterns and None through.

    Args:
        pattern: Pattern string, compiled pattern, or None

    Returns:
        Compiled pattern, or None if no pattern was given

    Examples:
        >>> compile_pattern("[0-9]+").pattern
        '[0-9]+'
        >>> compile_pattern(None) is None
        True
    """
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def matches(pattern: re.Pattern[str], value: str) -> bool:
    """Check if the whole value matches the pattern.

    Args:
        pattern: Compiled pattern
        value: String to check

    Returns:
        True if the entire value matches

    Examples:
        >>> matches(re.compile("[0-9]+"), "123")
        True
        >>> matches(re.compile("[0-9]+"), "abc123")
        False
    """
    return pattern.fullmatch(value) is not None


def normalize_extension(extension: str) -> str:
    """Normalize an extension to lower case without a leading dot.

    Examples:
        >>> normalize_extension(".PDF")
        'pdf'
        >>> normalize_extension("tar.gz")
        'tar.gz'
    """
    return extension.strip().lstrip(".").lower()


def has_extension(file_name: str, extensions: list[str]) -> bool:
    """Check if a file name ends with one of the given extensions.

    Comparison is case-insensitive and works for multi-part extensions.

    Args:
        file_name: File name to check
        extensions: Normalized extensions (see normalize_extension)

    Examples:
        >>> has_extension("report.PDF", ["pdf"])
        True
        >>> has_extension("archive.tar.gz", ["gz"])
        True
        >>> has_extension("README", ["txt"])
        False
    """
    name = PurePath(file_name).name.lower()
    return any(name.endswith(f".{extension}") for extension in extensions)
