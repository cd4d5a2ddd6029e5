"""Tests for card validators."""

import pytest

from constants import CardName
from controller.validators import validate_conditional, validate_not_empty
from fakes import FakeCard, FakeToggleCard


class TestValidateNotEmpty:
    """Tests for validate_not_empty."""

    def test_empty_string_is_invalid(self):
        """An empty string fails."""
        card = FakeCard(CardName.TITLE)
        card.value = ""
        assert validate_not_empty(card) is False

    def test_none_is_invalid(self):
        """A card that was never filled in fails."""
        assert validate_not_empty(FakeCard(CardName.TITLE)) is False

    def test_text_is_valid(self):
        """Any text passes."""
        card = FakeCard(CardName.TITLE)
        card.value = "Campaign A"
        assert validate_not_empty(card) is True

    def test_whitespace_counts_as_value(self):
        """Whitespace isn't stripped."""
        card = FakeCard(CardName.TITLE)
        card.value = " "
        assert validate_not_empty(card) is True

    def test_zero_is_valid(self):
        """A numeric header row of 0 is still a value."""
        card = FakeCard(CardName.ROW)
        card.value = 0
        assert validate_not_empty(card) is True


class TestValidateConditional:
    """Tests for validate_conditional."""

    @pytest.mark.parametrize("value", [None, "", "<<Ready>>"])
    def test_disabled_is_always_valid(self, value):
        """An unchecked conditional passes regardless of its value."""
        card = FakeToggleCard(CardName.CONDITIONAL)
        card.value = value
        assert validate_conditional(card) is True

    def test_enabled_and_empty_is_invalid(self):
        """Checked with no value fails."""
        card = FakeToggleCard(CardName.CONDITIONAL)
        card.check()
        card.value = ""
        assert validate_conditional(card) is False

    def test_enabled_with_value_is_valid(self):
        """Checked with a value passes."""
        card = FakeToggleCard(CardName.CONDITIONAL)
        card.check()
        card.value = "<<Ready>>"
        assert validate_conditional(card) is True
