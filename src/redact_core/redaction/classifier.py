"""Field-name classification for redaction."""

from enum import Enum
from typing import Any

from .patterns import EXACT_SENSITIVE_FIELDS, SAFE_FIELD_PATTERNS, SENSITIVE_FIELD_PATTERNS


class Classification(str, Enum):
    """How a field's value is treated by the redactor."""

    EXACT_SENSITIVE = "exact_sensitive"
    SAFE = "safe"
    PATTERN_SENSITIVE = "pattern_sensitive"
    UNCLASSIFIED = "unclassified"

    @property
    def is_sensitive(self) -> bool:
        """True for both sensitive tiers."""
        return self in (Classification.EXACT_SENSITIVE, Classification.PATTERN_SENSITIVE)


def classify_field(field_name: Any) -> Classification:
    """Classify a field by its name alone.

    Checks run in order and the first hit wins: exact sensitive names,
    then safe names, then sensitive patterns.

    Args:
        field_name: Mapping key; non-string keys are classified by str()

    Returns:
        Classification for the field
    """
    name = str(field_name).lower()

    if name in EXACT_SENSITIVE_FIELDS:
        return Classification.EXACT_SENSITIVE

    if any(pattern.search(name) for pattern in SAFE_FIELD_PATTERNS):
        return Classification.SAFE

    if any(pattern.search(name) for pattern in SENSITIVE_FIELD_PATTERNS):
        return Classification.PATTERN_SENSITIVE

    return Classification.UNCLASSIFIED
