"""Unit tests for boolean and single-select fields."""

import pytest

from formkit import BooleanField, FieldKind, SingleSelectField
from formkit.models import EMPTY_VALUE_MESSAGE

LEVELS = ["basic", "intermediate", "advanced"]


class TestBooleanField:
    """Tests for BooleanField defaults and the required rule."""

    def test_defaults_to_false(self) -> None:
        field = BooleanField("Accept terms")

        assert field.value is False
        assert field.kind is FieldKind.BOOLEAN

    @pytest.mark.parametrize("value", [True, False])
    def test_required_with_value(self, value: bool) -> None:
        """False is a value, so a required boolean is never empty by default."""
        field = BooleanField("Accept terms", value, required=True)

        assert field.validate() == []

    def test_required_unset(self) -> None:
        field = BooleanField("Accept terms", None, required=True)

        assert field.validate() == [EMPTY_VALUE_MESSAGE]

    def test_optional_unset(self) -> None:
        assert BooleanField("Accept terms", None).validate() == []


class TestSingleSelectField:
    """Tests for SingleSelectField option membership."""

    def test_value_not_in_options(self) -> None:
        field = SingleSelectField("Level", LEVELS, "expert")

        assert field.validate() == ["value not in allowed choices"]

    def test_value_in_options(self) -> None:
        field = SingleSelectField("Level", LEVELS, "basic")

        assert field.validate() == []

    def test_first_option_is_accepted(self) -> None:
        """Membership, not index truthiness: index 0 must pass."""
        field = SingleSelectField("Priority", [0, 1, 2], 0)

        assert field.validate() == []

    def test_default_becomes_value(self) -> None:
        field = SingleSelectField("Level", LEVELS, default="intermediate")

        assert field.value == "intermediate"
        assert field.default == "intermediate"

    def test_explicit_value_wins_over_default(self) -> None:
        field = SingleSelectField("Level", LEVELS, "advanced", default="basic")

        assert field.value == "advanced"

    def test_options_are_copied_in_order(self) -> None:
        options = ("b", "a", "c")
        field = SingleSelectField("Letter", options)

        assert field.options == ["b", "a", "c"]

    def test_required_without_selection(self) -> None:
        field = SingleSelectField("Level", LEVELS, required=True)

        assert field.validate() == [EMPTY_VALUE_MESSAGE]

    def test_optional_without_selection(self) -> None:
        field = SingleSelectField("Level", LEVELS)

        assert field.value is None
        assert field.validate() == []

    def test_kind(self) -> None:
        assert SingleSelectField("Level", LEVELS).kind is FieldKind.SINGLE_SELECT
