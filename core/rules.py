"""Rule-set tables for password scoring.

Each variant is a complete, named table of criteria and weights. The scorer
walks a table in order, so adding or reordering criteria here is the only
change needed to alter the feedback list.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from core.exceptions import InvalidConfiguration


class RuleVariant(str, Enum):
    """Named rule-set variants."""

    STANDARD = "standard"
    EXTENDED = "extended"


class CriterionId(str, Enum):
    """Identifiers for individual criteria."""

    LENGTH_MIN = "length_min"
    LENGTH_LONG = "length_long"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"
    COMMON_PATTERN = "common_pattern"


MIN_LENGTH = 8
LONG_LENGTH = 12

STANDARD_SPECIAL_CHARS = "!@#$%^&*()_+{}[]:;<>,.?~\\/-"
EXTENDED_SPECIAL_CHARS = "!@#$%^&*()_+-=[]{};'\"\\|,.<>/?"

# Matched case-insensitively anywhere in the password
COMMON_PATTERNS = ("123", "abc", "password", "qwerty")

_UPPERCASE_RE = re.compile(r"[A-Z]")
_LOWERCASE_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")
_STANDARD_SPECIAL_RE = re.compile(f"[{re.escape(STANDARD_SPECIAL_CHARS)}]")
_EXTENDED_SPECIAL_RE = re.compile(f"[{re.escape(EXTENDED_SPECIAL_CHARS)}]")


def _matches(pattern: re.Pattern) -> Callable[[str], bool]:
    return lambda password: pattern.search(password) is not None


def _min_length(target: int) -> Callable[[str], bool]:
    return lambda password: len(password) >= target


def has_common_pattern(password: str) -> bool:
    """Return True if the password contains any well-known weak sequence."""
    lowered = password.lower()
    return any(pattern in lowered for pattern in COMMON_PATTERNS)


@dataclass(frozen=True)
class Criterion:
    """A single row of a rule table.

    Attributes:
        id: Criterion identifier
        test: Predicate over the password; True means the criterion is met
        met_message: Feedback when met, formatted with ``length`` and ``target``
        unmet_message: Feedback when unmet, same placeholders
        points: Points added to the score when met
        character_class: Counts toward the character-type diversity bonus
        penalty: Points subtracted when the criterion is NOT met
        target: Value substituted for ``{target}`` in messages
    """

    id: CriterionId
    test: Callable[[str], bool]
    met_message: str
    unmet_message: str
    points: int = 0
    character_class: bool = False
    penalty: int = 0
    target: int = 0

    def message(self, met: bool, password: str) -> str:
        template = self.met_message if met else self.unmet_message
        return template.format(length=len(password), target=self.target)


@dataclass(frozen=True)
class RuleSet:
    """A complete scoring variant.

    Attributes:
        variant: Variant this table implements
        criteria: Criteria in evaluation (and display) order
        diversity_thresholds: One bonus point for each threshold the count of
            met character classes reaches; bonuses are cumulative
        max_score: Upper clamp for the final score
        full_score: Highest score the table can actually award
    """

    variant: RuleVariant
    criteria: tuple[Criterion, ...]
    diversity_thresholds: tuple[int, ...]
    max_score: int

    @property
    def full_score(self) -> int:
        points = sum(criterion.points for criterion in self.criteria)
        return min(points + len(self.diversity_thresholds), self.max_score)

    @property
    def criterion_ids(self) -> tuple[CriterionId, ...]:
        return tuple(criterion.id for criterion in self.criteria)


STANDARD_RULES = RuleSet(
    variant=RuleVariant.STANDARD,
    criteria=(
        Criterion(
            id=CriterionId.LENGTH_MIN,
            test=_min_length(MIN_LENGTH),
            met_message="Length: At least 8 characters - Met",
            unmet_message="Length: At least 8 characters - Not Met",
            points=1,
            target=MIN_LENGTH,
        ),
        Criterion(
            id=CriterionId.UPPERCASE,
            test=_matches(_UPPERCASE_RE),
            met_message="Uppercase: At least one uppercase letter - Met",
            unmet_message="Uppercase: At least one uppercase letter - Not Met",
            points=1,
        ),
        Criterion(
            id=CriterionId.LOWERCASE,
            test=_matches(_LOWERCASE_RE),
            met_message="Lowercase: At least one lowercase letter - Met",
            unmet_message="Lowercase: At least one lowercase letter - Not Met",
            points=1,
        ),
        Criterion(
            id=CriterionId.DIGIT,
            test=_matches(_DIGIT_RE),
            met_message="Numbers: At least one number - Met",
            unmet_message="Numbers: At least one number - Not Met",
            points=1,
        ),
        Criterion(
            id=CriterionId.SPECIAL,
            test=_matches(_STANDARD_SPECIAL_RE),
            met_message="Special Characters: At least one special character - Met",
            unmet_message="Special Characters: At least one special character - Not Met",
            points=1,
        ),
    ),
    diversity_thresholds=(),
    max_score=5,
)

EXTENDED_RULES = RuleSet(
    variant=RuleVariant.EXTENDED,
    criteria=(
        Criterion(
            id=CriterionId.LENGTH_MIN,
            test=_min_length(MIN_LENGTH),
            met_message="Length: {length} characters (minimum {target})",
            unmet_message="Length: {length}/{target} characters - use at least {target}",
            points=1,
            target=MIN_LENGTH,
        ),
        Criterion(
            id=CriterionId.LENGTH_LONG,
            test=_min_length(LONG_LENGTH),
            met_message="Long: {target}+ characters",
            unmet_message="Long: {length}/{target} characters - {target}+ earns a bonus",
            points=1,
            target=LONG_LENGTH,
        ),
        Criterion(
            id=CriterionId.LOWERCASE,
            test=_matches(_LOWERCASE_RE),
            met_message="Contains lowercase letters",
            unmet_message="Missing lowercase letters",
            character_class=True,
        ),
        Criterion(
            id=CriterionId.UPPERCASE,
            test=_matches(_UPPERCASE_RE),
            met_message="Contains uppercase letters",
            unmet_message="Missing uppercase letters",
            character_class=True,
        ),
        Criterion(
            id=CriterionId.DIGIT,
            test=_matches(_DIGIT_RE),
            met_message="Contains numbers",
            unmet_message="Missing numbers",
            character_class=True,
        ),
        Criterion(
            id=CriterionId.SPECIAL,
            test=_matches(_EXTENDED_SPECIAL_RE),
            met_message="Contains special characters",
            unmet_message="Missing special characters",
            character_class=True,
        ),
        Criterion(
            id=CriterionId.COMMON_PATTERN,
            test=lambda password: not has_common_pattern(password),
            met_message="No common patterns",
            unmet_message="Warning: Avoid common patterns like '123', 'abc', 'password' or 'qwerty'",
            penalty=1,
        ),
    ),
    diversity_thresholds=(3, 4),
    max_score=6,
)

RULE_SETS: dict[RuleVariant, RuleSet] = {
    RuleVariant.STANDARD: STANDARD_RULES,
    RuleVariant.EXTENDED: EXTENDED_RULES,
}


def resolve_variant(config: Any) -> RuleVariant:
    """Coerce a variant name or member to a RuleVariant.

    Raises:
        InvalidConfiguration: If the value does not name a known variant
    """
    if isinstance(config, RuleVariant):
        return config
    if isinstance(config, str):
        try:
            return RuleVariant(config)
        except ValueError:
            pass
    raise InvalidConfiguration(config)


def get_rule_set(config: Any = RuleVariant.STANDARD) -> RuleSet:
    """Look up the rule table for a variant."""
    return RULE_SETS[resolve_variant(config)]
