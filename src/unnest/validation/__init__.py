from unnest.validation.rules import ALL_RULES
from unnest.validation.validator import (
    FlatteningReport,
    ValidationError,
    report,
    validate,
    validate_or_raise,
)

__all__ = [
    "ALL_RULES",
    "FlatteningReport",
    "ValidationError",
    "report",
    "validate",
    "validate_or_raise",
]
