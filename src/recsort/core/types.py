"""Type definitions for record sorting."""


class _Missing:
    """Marker for a value that is absent, as opposed to one that is ``None``."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


# Result of resolving a path that does not exist in a record
MISSING = _Missing()
