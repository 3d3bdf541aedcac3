# Password Strength Meter
# Purpose: Interactive terminal tool for scoring passwords against a rule variant.
# Passwords are read without echo and are never stored or logged.

import sys

from core import DEFAULT_RULE_VARIANT, InvalidConfiguration, RuleVariant, resolve_variant
from cli import test_password_flow, list_rules_flow
from cli.prompts import prompt_for_variant


# pick the starting variant from DEFAULT_RULE_VARIANT, refusing unknown names
def initial_variant():
    try:
        return resolve_variant(DEFAULT_RULE_VARIANT)
    except InvalidConfiguration as e:
        print(f"Configuration error: {e}")
        sys.exit(2)


# main app menu and selection options
def main_menu(variant=RuleVariant.STANDARD):
    while True:
        print(f"\n=== Password Strength Meter ({variant.value}) ===")
        print("1. Test a password")
        print("2. Switch rule variant")
        print("3. Show rules")
        print("4. Exit")

        choice = input("Choose an option (1-4): ").strip()
        if choice == '1':
            test_password_flow(variant)  # score a password
        elif choice == '2':
            selected = prompt_for_variant(variant)
            if selected is not None:
                variant = selected
                print(f"Using {variant.value} rules.")
        elif choice == '3':
            list_rules_flow(variant)  # show the active criteria
        elif choice == '4':
            print("Exiting the program. Goodbye.")
            break   # exit program
        else:
            print("Invalid choice. Please enter a number from 1 to 4.")


# console script entry
def main():
    main_menu(initial_variant())


# script entry
if __name__ == "__main__":
    main()
