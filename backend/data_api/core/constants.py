"""Shared constants and enums used across the data API helpers."""

import string
from enum import StrEnum

# Fields that are always allowed on a record (not user-defined)
SYSTEM_FIELDS: frozenset[str] = frozenset({"id"})

# Short record IDs: 5 chars from a-z0-9
ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 5

UNKNOWN_FIELDS_MESSAGE = "Unknown field(s) not in schema: "


class ValidationStatus(StrEnum):
    """Outcome of validating a record against its collection schema."""

    PASSED = "PASSED"
    WARNING = "WARNING"
