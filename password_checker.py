"""Password strength checker.

Thin facade over the core scorer for the CLI and API consumers.
"""

from typing import Any, Union

from core import (
    RuleVariant,
    evaluate,
    strength_label,
    strength_color_key,
    strength_percent,
)


def check_password_strength(
    password: str,
    variant: Union[RuleVariant, str] = RuleVariant.STANDARD,
) -> tuple[str, list[str]]:
    """Return the strength label and the messages of unmet criteria.

    Args:
        password: Password to check
        variant: Rule variant to score against

    Returns:
        Tuple of (strength_label, feedback_list)
    """
    report = evaluate(password, variant)
    return strength_label(report.score, report.variant), report.unmet_messages


def analyze_password(
    password: str,
    variant: Union[RuleVariant, str] = RuleVariant.STANDARD,
) -> dict[str, Any]:
    """Score a password and attach everything a display needs.

    Returns:
        Report dictionary with label, color and bar percentage added
    """
    report = evaluate(password, variant)
    result = report.to_dict()
    result["label"] = strength_label(report.score, report.variant)
    result["color"] = strength_color_key(report.score, report.variant).value
    result["percent"] = strength_percent(report.score, report.variant)
    return result
