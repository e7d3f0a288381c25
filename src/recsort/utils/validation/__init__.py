"""
Validation utilities for sort arguments.

- ValidationResult: outcome of a validation check
- SchemaValidator: jsonschema-based checks for options and descriptors
"""

from .base import ValidationResult
from .schema import SchemaValidator

__all__ = ["ValidationResult", "SchemaValidator"]
