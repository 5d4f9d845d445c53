"""Shared fixtures for formkit tests."""

from collections.abc import Generator
from typing import Any

import pytest

from formkit import (
    BooleanField,
    EmailField,
    FileField,
    Form,
    PlainTextField,
    SingleSelectField,
)
from formkit.utils.logger import logger

LEVELS = ["basic", "intermediate", "advanced"]


@pytest.fixture
def form() -> Form:
    """Create an empty form."""
    return Form("Form API prototype", "Prototype of the form API")


@pytest.fixture
def name_field() -> PlainTextField:
    return PlainTextField("Name", required=True, min_length=2, max_length=40)


@pytest.fixture
def email_field() -> EmailField:
    return EmailField("Email", required=True)


@pytest.fixture
def subscribe_field() -> BooleanField:
    return BooleanField("Subscribe to newsletter")


@pytest.fixture
def level_field() -> SingleSelectField[str]:
    return SingleSelectField("Level", LEVELS, default="basic")


@pytest.fixture
def resume_field() -> FileField:
    return FileField("Resume", max_size=1024, file_name_regex=r"[\w\-]+\.\w+")


@pytest.fixture
def populated_form(
    form: Form,
    name_field: PlainTextField,
    email_field: EmailField,
    subscribe_field: BooleanField,
    level_field: SingleSelectField[str],
) -> Form:
    """Form with text, email, boolean and select fields appended in that order."""
    form.add_field(name_field)
    form.add_field(email_field)
    form.add_field(subscribe_field)
    form.add_field(level_field)
    return form


@pytest.fixture
def capture_logs() -> Generator[list[str]]:
    """Collect formkit log messages emitted while the test runs.

    formkit logging is enabled for the test and disabled again afterwards,
    together with removal of the loguru sink.
    """
    messages: list[str] = []

    def _sink(message: Any) -> None:
        messages.append(message.record["message"])

    logger.enable("formkit")
    sink_id = logger.add(_sink, level="DEBUG", format="{message}")
    yield messages
    logger.remove(sink_id)
    logger.disable("formkit")
