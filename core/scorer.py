"""Password strength scoring.

Scores a candidate password against a rule-set variant and returns the
score together with per-criterion feedback. Scoring is a pure function of
the password and the variant: it keeps no state, performs no I/O and is
safe to call from any number of threads.
"""

from dataclasses import dataclass
from typing import Any, Union

from core.rules import CriterionId, RuleSet, RuleVariant, get_rule_set


@dataclass(frozen=True)
class CriterionResult:
    """Outcome of a single criterion."""

    id: CriterionId
    met: bool
    message: str


@dataclass(frozen=True)
class ScoreReport:
    """Score and feedback for one evaluation.

    Attributes:
        score: Integer in [0, max_score]
        criteria: Criterion results in evaluation order
        variant: Variant that produced the report
        max_score: Upper bound of the score for this variant
    """

    score: int
    criteria: tuple[CriterionResult, ...]
    variant: RuleVariant
    max_score: int

    @property
    def met_count(self) -> int:
        return sum(1 for result in self.criteria if result.met)

    @property
    def unmet_messages(self) -> list[str]:
        return [result.message for result in self.criteria if not result.met]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            "score": self.score,
            "max_score": self.max_score,
            "variant": self.variant.value,
            "criteria": [
                {"id": result.id.value, "met": result.met, "message": result.message}
                for result in self.criteria
            ],
        }


def _apply_rules(password: str, rules: RuleSet) -> ScoreReport:
    # Every criterion is checked before any points are tallied
    outcomes = [(criterion, criterion.test(password)) for criterion in rules.criteria]

    score = 0
    class_count = 0
    penalty = 0
    for criterion, met in outcomes:
        if met:
            score += criterion.points
            if criterion.character_class:
                class_count += 1
        else:
            penalty += criterion.penalty

    score += sum(1 for threshold in rules.diversity_thresholds if class_count >= threshold)
    score = max(score - penalty, 0)
    score = min(score, rules.max_score)

    return ScoreReport(
        score=score,
        criteria=tuple(
            CriterionResult(criterion.id, met, criterion.message(met, password))
            for criterion, met in outcomes
        ),
        variant=rules.variant,
        max_score=rules.max_score,
    )


def evaluate(
    password: str,
    config: Union[RuleVariant, str] = RuleVariant.STANDARD,
) -> ScoreReport:
    """Score a password against a rule-set variant.

    Args:
        password: Candidate password; any string, including empty
        config: Variant member or name, "standard" when omitted

    Returns:
        ScoreReport with the clamped score and ordered criterion results

    Raises:
        InvalidConfiguration: If ``config`` does not name a known variant
    """
    rules = get_rule_set(config)
    return _apply_rules(password, rules)


def max_score(config: Union[RuleVariant, str] = RuleVariant.STANDARD) -> int:
    """Return the upper score bound for a variant."""
    return get_rule_set(config).max_score
