"""Password Strength Core Package.

Provides modular components for password strength scoring:
- config: Centralized configuration constants
- exceptions: Domain errors
- rules: Rule-set variant tables
- scorer: Score evaluation
- labels: Score-to-label and color lookups
- siem: Security event logging
- storage: Log file helpers
"""

# Configuration constants
from core.config import (
    DEFAULT_RULE_VARIANT,
    LOG_DIR,
    SIEM_LOG_FILE,
    MAX_PASSWORD_INPUT_LENGTH,
)

# Errors
from core.exceptions import InvalidConfiguration

# Rule tables
from core.rules import (
    RuleVariant,
    CriterionId,
    RuleSet,
    Criterion,
    RULE_SETS,
    COMMON_PATTERNS,
    get_rule_set,
    resolve_variant,
    has_common_pattern,
)

# Scoring
from core.scorer import (
    CriterionResult,
    ScoreReport,
    evaluate,
    max_score,
)

# Display lookups
from core.labels import (
    StrengthColor,
    strength_label,
    strength_color_key,
    strength_percent,
)

# SIEM logging
from core.siem import (
    log_siem_event,
    log_evaluation,
    log_rejected_configuration,
    get_siem_events,
    count_events_by_status,
    shutdown_logging,
)

__all__ = [
    # Config
    "DEFAULT_RULE_VARIANT",
    "LOG_DIR",
    "SIEM_LOG_FILE",
    "MAX_PASSWORD_INPUT_LENGTH",
    # Errors
    "InvalidConfiguration",
    # Rules
    "RuleVariant",
    "CriterionId",
    "RuleSet",
    "Criterion",
    "RULE_SETS",
    "COMMON_PATTERNS",
    "get_rule_set",
    "resolve_variant",
    "has_common_pattern",
    # Scoring
    "CriterionResult",
    "ScoreReport",
    "evaluate",
    "max_score",
    # Labels
    "StrengthColor",
    "strength_label",
    "strength_color_key",
    "strength_percent",
    # SIEM
    "log_siem_event",
    "log_evaluation",
    "log_rejected_configuration",
    "get_siem_events",
    "count_events_by_status",
    "shutdown_logging",
]
