"""
Record validation helpers.

    - schema_validator:  flag fields not declared by the collection schema
"""

from data_api.validation.schema_validator import (
    SchemaValidationResult,
    schema_field_names,
    validate_schema,
)

__all__ = ["SchemaValidationResult", "schema_field_names", "validate_schema"]
