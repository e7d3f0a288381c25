"""
Constants for record sorting.

This module defines constants used by the sorting implementation:
- Direction names and the default direction
- The key that marks a mapping as a descriptor rather than options
- JSON schemas for options and descriptor mappings
"""

# Sort directions
ASC = "asc"
DESC = "desc"
DIRECTIONS = (ASC, DESC)
DEFAULT_DIRECTION = ASC

# A trailing mapping carrying this key is a descriptor, not options
DESCRIPTOR_FIELD_KEY = "field"

INVALID_SEQUENCE_MSG = "sort expects an array"

# JSON Schema Definitions

OPTIONS_SCHEMA = {
    "type": "object",
    "properties": {
        "direction": {"enum": list(DIRECTIONS)},
        "order": {"type": "array"},
    },
}

DESCRIPTOR_SCHEMA = {
    "type": "object",
    "properties": {
        "field": {"type": ["string", "integer", "null"]},
        "direction": {"enum": list(DIRECTIONS)},
    },
    "required": ["field"],
}
