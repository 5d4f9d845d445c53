"""Unit tests for conditional field visibility."""

from formkit import BooleanField, ConditionalLink, Form, PlainTextField, SingleSelectField

LEVELS = ["basic", "intermediate", "advanced"]


class TestConditionalVisibility:
    """Tests for add_conditional and the lazily evaluated visible property."""

    def test_visible_without_conditional(self) -> None:
        field = SingleSelectField("Level", LEVELS)

        assert field.conditional is None
        assert field.visible is True

    def test_visibility_follows_other_field(self) -> None:
        toggle = BooleanField("Beginner", True)
        level = SingleSelectField("Level", LEVELS)

        level.add_conditional(toggle, False)
        assert level.visible is False

        toggle.value = False
        assert level.visible is True

        toggle.value = True
        assert level.visible is False

    def test_reading_visible_has_no_side_effects(self) -> None:
        toggle = BooleanField("Beginner", True)
        level = SingleSelectField("Level", LEVELS, "expert")
        level.add_conditional(toggle, True)

        for _ in range(3):
            assert level.visible is True

        assert level.errors == []
        assert toggle.value is True
        assert level.value == "expert"

    def test_link_exposes_target(self) -> None:
        toggle = BooleanField("Beginner", field_id="toggle")
        level = SingleSelectField("Level", LEVELS)

        level.add_conditional(toggle, True)

        assert isinstance(level.conditional, ConditionalLink)
        assert level.conditional.field is toggle
        assert level.conditional.field_id == "toggle"
        assert level.conditional.expected_value is True

    def test_replace_and_remove_conditional(self) -> None:
        first = BooleanField("First", True)
        second = PlainTextField("Second", "yes")
        field = PlainTextField("Details")

        field.add_conditional(first, False)
        field.add_conditional(second, "yes")
        assert field.visible is True

        field.remove_conditional()
        assert field.conditional is None
        assert field.visible is True

    def test_equality_on_text_values(self) -> None:
        country = PlainTextField("Country", "NL")
        state = PlainTextField("State")
        state.add_conditional(country, "US")

        assert state.visible is False

        country.value = "US"
        assert state.visible is True

    def test_not_transitive(self) -> None:
        """A field depending on a hidden field is judged on the value alone."""
        root = BooleanField("Root", False)
        middle = BooleanField("Middle", True)
        leaf = PlainTextField("Leaf")
        middle.add_conditional(root, True)
        leaf.add_conditional(middle, True)

        assert middle.visible is False
        assert leaf.visible is True

    def test_cross_form_target(self) -> None:
        first, second = Form("First"), Form("Second")
        toggle = first.add_field(BooleanField("Toggle", True))
        details = second.add_field(PlainTextField("Details"))

        details.add_conditional(toggle, True)

        assert details.visible is True
        assert second.get_field(details.field_id) is details
        assert first.get_field(details.conditional.field_id) is toggle
