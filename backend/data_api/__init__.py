"""
Shared utilities for data API endpoints.

Re-exports the record helpers so callers can do::

    from data_api import generate_id, validate_schema
"""

from data_api.core.ids import generate_id
from data_api.validation.schema_validator import SchemaValidationResult, validate_schema

__all__ = [
    "SchemaValidationResult",
    "generate_id",
    "validate_schema",
]
