"""Tests for score-to-display lookups."""

import pytest

from core import (
    InvalidConfiguration,
    RuleVariant,
    StrengthColor,
    strength_label,
    strength_color_key,
    strength_percent,
)


class TestStandardTable:
    """Standard thresholds: 5 / 4 / 3 / 1 / 0."""

    @pytest.mark.parametrize("score,label,color", [
        (0, "Very Weak", StrengthColor.RED),
        (1, "Weak", StrengthColor.ORANGE),
        (2, "Weak", StrengthColor.ORANGE),
        (3, "Moderate", StrengthColor.YELLOW),
        (4, "Strong", StrengthColor.LIME),
        (5, "Very Strong", StrengthColor.GREEN),
    ])
    def test_thresholds(self, score, label, color):
        """Each score maps to its label and color."""
        assert strength_label(score, RuleVariant.STANDARD) == label
        assert strength_color_key(score, RuleVariant.STANDARD) is color

    def test_default_variant(self):
        """Helpers default to the standard table."""
        assert strength_label(5) == "Very Strong"
        assert strength_color_key(0) is StrengthColor.RED


class TestExtendedTable:
    """Extended thresholds: 4 / 3 / 2 / 0."""

    @pytest.mark.parametrize("score,label,color", [
        (0, "Very Weak", StrengthColor.RED),
        (1, "Very Weak", StrengthColor.RED),
        (2, "Weak", StrengthColor.ORANGE),
        (3, "Moderate", StrengthColor.YELLOW),
        (4, "Strong", StrengthColor.GREEN),
        (6, "Strong", StrengthColor.GREEN),
    ])
    def test_thresholds(self, score, label, color):
        """Each score maps to its label and color."""
        assert strength_label(score, "extended") == label
        assert strength_color_key(score, "extended") is color

    def test_no_very_strong(self):
        """Extended vocabulary tops out at Strong."""
        labels = {strength_label(score, RuleVariant.EXTENDED) for score in range(7)}
        assert labels == {"Very Weak", "Weak", "Moderate", "Strong"}


class TestStrengthPercent:
    """Bar fill is relative to the highest awardable score."""

    @pytest.mark.parametrize("score,expected", [(0, 0), (1, 20), (3, 60), (5, 100)])
    def test_standard(self, score, expected):
        """Standard bar fills in fifths."""
        assert strength_percent(score, RuleVariant.STANDARD) == expected

    @pytest.mark.parametrize("score,expected", [(0, 0), (2, 50), (4, 100), (6, 100)])
    def test_extended(self, score, expected):
        """Extended bar is full at four."""
        assert strength_percent(score, RuleVariant.EXTENDED) == expected

    def test_negative_clamped(self):
        """Scores below zero show an empty bar."""
        assert strength_percent(-3) == 0


class TestInvalidVariant:
    """Helpers reject unknown variants like the scorer does."""

    @pytest.mark.parametrize("helper", [strength_label, strength_color_key, strength_percent])
    def test_unknown_variant(self, helper):
        """Unknown variants raise InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration):
            helper(3, "legacy")
