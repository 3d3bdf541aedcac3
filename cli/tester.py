"""Password testing CLI flows.

Allows users to score passwords and review the active rules.
"""

from core import RuleVariant, evaluate, get_rule_set, log_evaluation
from cli.display import print_report
from cli.prompts import prompt_for_password


def test_password_flow(variant: RuleVariant) -> None:
    """Score a password typed by the user and print the feedback."""
    print("\n--- Test a Password ---")

    user_pwd = prompt_for_password()
    if not user_pwd:
        print("No password entered, scoring an empty password.")

    report = evaluate(user_pwd, variant)
    label = print_report(report)
    log_evaluation(variant.value, report.score, label, report.met_count, source="cli")


def list_rules_flow(variant: RuleVariant) -> None:
    """Print the criteria of a rule variant in evaluation order."""
    rules = get_rule_set(variant)
    print(f"\n--- {variant.value.title()} Rules (max score {rules.max_score}) ---")
    for index, criterion in enumerate(rules.criteria, start=1):
        detail = []
        if criterion.points:
            detail.append(f"+{criterion.points}")
        if criterion.character_class:
            detail.append("character class")
        if criterion.penalty:
            detail.append(f"-{criterion.penalty} if found")
        suffix = f" ({', '.join(detail)})" if detail else ""
        print(f"  {index}. {criterion.id.value}{suffix}")

    if rules.diversity_thresholds:
        thresholds = ", ".join(str(t) for t in rules.diversity_thresholds)
        print(f"  +1 for each character-class count reached: {thresholds}")
