"""
Schema validation — flag record fields not declared by the collection schema.

Collections come either as ORM/dataclass-style objects exposing a
``schema`` attribute or as plain dicts decoded from JSON.  Field
descriptors follow the same rule for ``name``.  A missing or malformed
schema never raises: it simply means no field is recognized.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from data_api.core.config import settings
from data_api.core.constants import SYSTEM_FIELDS, UNKNOWN_FIELDS_MESSAGE, ValidationStatus
from data_api.core.logging import get_logger

logger = get_logger(__name__)


class WarningLogger(Protocol):
    def warning(self, event: str, *args: Any, **kwargs: Any) -> Any: ...


@dataclass
class SchemaValidationResult:
    """Unknown fields found on a record, plus the warnings they produced."""

    unknown_fields: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def status(self) -> ValidationStatus:
        return ValidationStatus.WARNING if self.unknown_fields else ValidationStatus.PASSED

    def to_dict(self) -> dict[str, list[str]]:
        """Serialise for API responses."""
        return {
            "unknown_fields": list(self.unknown_fields),
            "warnings": list(self.warnings),
        }


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def schema_field_names(collection: Any) -> set[str]:
    """Names declared by ``collection``'s schema; empty if there is none."""
    if collection is None:
        return set()

    schema = _get(collection, "schema")
    if not isinstance(schema, (list, tuple)):
        return set()

    names = set()
    for descriptor in schema:
        name = _get(descriptor, "name")
        if isinstance(name, str):
            names.add(name)
    return names


def validate_schema(
    collection: Any,
    fields: Mapping[str, Any] | None,
    *,
    log: WarningLogger | None = None,
) -> SchemaValidationResult:
    """
    Validate ``fields`` against the collection schema.

    System fields (see SYSTEM_FIELDS) are always accepted.  Every other
    key missing from the schema is reported, in the order the mapping
    yields it, and a single warning is both returned and logged.

    Args:
        collection: Object or dict exposing ``schema`` (list of field
            descriptors with a ``name``).  May be None.
        fields: Mapping of field name to value, e.g. a request body.
        log: Anything with a ``warning(msg)`` method.  Defaults to
            this module's structlog logger.

    Returns:
        SchemaValidationResult with both lists always present.
    """
    result = SchemaValidationResult()
    if not isinstance(fields, Mapping):
        return result

    known = schema_field_names(collection)

    for key in fields:
        if key in SYSTEM_FIELDS:
            continue
        if key not in known:
            result.unknown_fields.append(key)

    if result.unknown_fields:
        msg = UNKNOWN_FIELDS_MESSAGE + ", ".join(str(k) for k in result.unknown_fields)
        result.warnings.append(msg)
        (log or logger).warning(f"{settings.DATA_API_LOG_TAG} {msg}")

    return result
