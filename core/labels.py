"""Score-to-display lookups.

Threshold tables mapping a score to a strength label and a color token.
Rows are checked top to bottom and the first row whose threshold the score
reaches wins.
"""

from enum import Enum
from typing import Union

from core.rules import RuleVariant, get_rule_set


class StrengthColor(str, Enum):
    """Color tokens for a strength indicator."""

    GREEN = "green"
    LIME = "lime"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"


# (minimum score, label, color)
STRENGTH_TABLES: dict[RuleVariant, tuple[tuple[int, str, StrengthColor], ...]] = {
    RuleVariant.STANDARD: (
        (5, "Very Strong", StrengthColor.GREEN),
        (4, "Strong", StrengthColor.LIME),
        (3, "Moderate", StrengthColor.YELLOW),
        (1, "Weak", StrengthColor.ORANGE),
        (0, "Very Weak", StrengthColor.RED),
    ),
    RuleVariant.EXTENDED: (
        (4, "Strong", StrengthColor.GREEN),
        (3, "Moderate", StrengthColor.YELLOW),
        (2, "Weak", StrengthColor.ORANGE),
        (0, "Very Weak", StrengthColor.RED),
    ),
}


def _lookup(score: int, variant: Union[RuleVariant, str]) -> tuple[str, StrengthColor]:
    rules = get_rule_set(variant)
    table = STRENGTH_TABLES[rules.variant]
    for threshold, label, color in table:
        if score >= threshold:
            return label, color
    # Below zero falls through to the weakest row
    _, label, color = table[-1]
    return label, color


def strength_label(score: int, variant: Union[RuleVariant, str] = RuleVariant.STANDARD) -> str:
    """Return the human-readable strength category for a score."""
    return _lookup(score, variant)[0]


def strength_color_key(
    score: int, variant: Union[RuleVariant, str] = RuleVariant.STANDARD
) -> StrengthColor:
    """Return the color token for a score."""
    return _lookup(score, variant)[1]


def strength_percent(score: int, variant: Union[RuleVariant, str] = RuleVariant.STANDARD) -> int:
    """Return how full a strength bar should be, from 0 to 100.

    The bar is measured against the highest score the variant can award,
    not the clamp ceiling, so a perfect password fills it.
    """
    full = get_rule_set(variant).full_score
    if full <= 0:
        return 0
    clamped = min(max(score, 0), full)
    return round(clamped * 100 / full)
