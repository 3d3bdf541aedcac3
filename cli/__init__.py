"""CLI package for the password strength meter.

Provides interactive flows for scoring passwords.
"""

from cli.display import format_bar, print_report
from cli.tester import test_password_flow, list_rules_flow

__all__ = [
    "format_bar",
    "print_report",
    "test_password_flow",
    "list_rules_flow",
]
