"""
Custom exceptions for record sorting.

Only two conditions are ever raised by the library itself. Everything else
(unresolvable paths, unknown criteria, odd option values) degrades into a
comparison result instead of an exception.
"""


class ValidationError(Exception):
    """
    Raised when options or descriptor validation fails.

    This exception is raised by explicit ``validate()`` calls and by
    ``sort(..., strict=True)`` when an options or descriptor mapping does not
    match its schema.

    Examples:
        * Unknown sort direction
        * ``order`` given as something other than a list
        * Descriptor mapping without a ``field`` entry
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class InvalidSequenceError(TypeError):
    """
    Raised when the value passed to ``sort`` is not a list.

    ``None`` is not an error: it is treated as nothing to sort.
    """
