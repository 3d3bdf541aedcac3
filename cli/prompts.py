"""Shared CLI prompt utilities.

Common input prompts and validation used across CLI flows.
"""

import getpass
from typing import Optional

from core import RuleVariant


def prompt_for_variant(current: RuleVariant) -> Optional[RuleVariant]:
    """Prompt user to pick a rule variant.

    Args:
        current: Variant in use, shown as the default

    Returns:
        Selected variant, or None to cancel
    """
    variants = list(RuleVariant)
    while True:
        print("\nAvailable rule variants:")
        for index, variant in enumerate(variants, start=1):
            marker = " (current)" if variant is current else ""
            print(f"  {index}. {variant.value}{marker}")

        val = input(f"Choose a variant (1-{len(variants)}, or 'q' to cancel): ").strip().lower()

        if val in ['q', 'exit']:
            return None

        if val in [variant.value for variant in variants]:
            return RuleVariant(val)

        try:
            choice = int(val)
            if 1 <= choice <= len(variants):
                return variants[choice - 1]
            print(f"Please enter a number between 1 and {len(variants)}.")
        except ValueError:
            print("Invalid input. Enter a number or a variant name.")


def prompt_for_password(prompt: str = "Enter the password you want to test: ") -> str:
    """Read a password without echoing it to the terminal.

    Returns:
        The entered password, possibly empty
    """
    return getpass.getpass(prompt)

