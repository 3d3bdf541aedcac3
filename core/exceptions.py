"""Domain exceptions for password scoring."""

from typing import Any


class InvalidConfiguration(ValueError):
    """Raised when a rule-set variant is not recognized.

    This is the only input the scorer rejects. Every password string,
    including empty and non-ASCII input, is scored rather than refused.
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Unknown rule variant: {value!r}")
