"""
Schema Validation Components for recsort

This module provides JSON schema-based validation for the loosely typed
values accepted by ``sort``:
- Options mappings (``{"direction": ..., "order": [...]}``)
- Descriptor mappings (``{"field": ..., "direction": ...}``)
- ``SortOptions`` and ``SortDescriptor`` instances

Validation never raises; problems are collected in a ValidationResult so the
caller decides whether to log them or fail.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ...core.constants import DESCRIPTOR_SCHEMA, OPTIONS_SCHEMA
from ...core.criteria import SortDescriptor, SortOptions
from .base import ValidationResult


def _plain(value: Any) -> Any:
    """Convert enums and tuples to the JSON-like values jsonschema expects."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


class SchemaValidator:
    """
    JSON Schema-based validator for sort options and descriptors.

    Attributes:
        options_schema (Dict[str, Any]): Schema for options mappings
        descriptor_schema (Dict[str, Any]): Schema for descriptor mappings
    """

    def __init__(
        self,
        options_schema: Optional[Dict[str, Any]] = None,
        descriptor_schema: Optional[Dict[str, Any]] = None,
    ):
        self.options_schema = options_schema or OPTIONS_SCHEMA
        self.descriptor_schema = descriptor_schema or DESCRIPTOR_SCHEMA

    def _validate(self, instance: Any, schema: Dict[str, Any], kind: str) -> ValidationResult:
        errors = []
        try:
            json_validate(instance=instance, schema=schema)
        except JsonSchemaError as e:
            errors.append(f"Invalid {kind}: {e.message}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=[],
            context={"kind": kind},
        )

    def validate_options(self, options: Any) -> ValidationResult:
        """
        Validate an options value against the options schema.

        Args:
            options: ``SortOptions`` instance or options mapping

        Returns:
            ValidationResult with one error per schema violation found

        Example:
            >>> SchemaValidator().validate_options({"direction": "up"}).is_valid
            False
        """
        if isinstance(options, SortOptions):
            instance = {"direction": options.direction}
            if options.order is not None:
                instance["order"] = options.order
        else:
            instance = dict(options)
        instance = {k: _plain(v) for k, v in instance.items()}
        return self._validate(instance, self.options_schema, "options")

    def validate_descriptor(self, descriptor: Any) -> ValidationResult:
        """
        Validate a descriptor value against the descriptor schema.

        Args:
            descriptor: ``SortDescriptor`` instance or descriptor mapping

        Returns:
            ValidationResult with one error per schema violation found
        """
        if isinstance(descriptor, SortDescriptor):
            instance = {"field": descriptor.field, "direction": descriptor.direction}
        else:
            instance = dict(descriptor)
        instance = {k: _plain(v) for k, v in instance.items()}
        return self._validate(instance, self.descriptor_schema, "descriptor")

    def validate_descriptors(self, candidates: Iterable[Any]) -> List[ValidationResult]:
        """Validate every descriptor among ``candidates``, skipping other criteria."""
        return [
            self.validate_descriptor(candidate)
            for candidate in candidates
            if isinstance(candidate, (SortDescriptor, Mapping))
        ]
