"""Terminal rendering of score reports."""

from core import ScoreReport, strength_label, strength_percent

BAR_WIDTH = 20
MET_MARK = "[x]"
UNMET_MARK = "[ ]"


def format_bar(percent: int, width: int = BAR_WIDTH) -> str:
    """Render a text strength bar like ``[########------------]``."""
    percent = min(max(percent, 0), 100)
    filled = round(width * percent / 100)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def print_report(report: ScoreReport) -> str:
    """Print a report and return its strength label."""
    label = strength_label(report.score, report.variant)
    percent = strength_percent(report.score, report.variant)

    print(f"\n{format_bar(percent)} {percent}%")
    print(f"Strength: {label} ({report.score}/{report.max_score}, {report.variant.value} rules)")
    print("Feedback:")
    for result in report.criteria:
        mark = MET_MARK if result.met else UNMET_MARK
        print(f"  {mark} {result.message}")

    return label
