"""Core types and protocols for pyfmt."""

from typing import Protocol


class ArgumentResolver(Protocol):
    """Protocol for sources of field values."""

    def resolve(self, name: str) -> object:
        """Return the value for an explicitly named or numbered field."""
        ...

    def resolve_index(self, index: int) -> object:
        """Return the value for the automatically numbered field ``index``."""
        ...
