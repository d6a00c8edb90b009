"""Argument resolvers: positional values, keyed mappings and records."""

from collections.abc import Mapping
from collections.abc import Sequence
import dataclasses
import re

from pydantic import BaseModel

from pyfmt.core.errors import NotARecordError
from pyfmt.core.errors import ResolutionError

_INDEX = re.compile(r"[0-9]+")


def _record_field_names(record: object) -> tuple[str, ...] | None:
    """Return declared field names, or None when ``record`` is not a record."""
    if isinstance(record, BaseModel):
        model = type(record)
        return (*model.model_fields, *model.model_computed_fields)
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return tuple(f.name for f in dataclasses.fields(record))
    if isinstance(record, tuple) and hasattr(record, "_fields"):
        return tuple(record._fields)
    return None


def record_fields(record: object) -> dict[str, object]:
    """Return a record's declared fields and their values.

    Args:
        record: Pydantic model, dataclass instance or named tuple

    Returns:
        Mapping of field name to value in declaration order

    Raises:
        NotARecordError: When ``record`` is not a supported record

    """
    names = _record_field_names(record)
    if names is None:
        raise NotARecordError(record)
    return {name: getattr(record, name) for name in names}


class SequenceResolver:
    """Resolve fields against positional values."""

    def __init__(self, values: Sequence[object]) -> None:
        """Initialize with the positional values."""
        self.values = values

    def resolve(self, name: str) -> object:
        """Resolve a numbered field such as ``{1}``."""
        if not _INDEX.fullmatch(name):
            msg = f"Invalid index {name!r}: positional arguments are numbered"
            raise ResolutionError(msg, name)
        return self.resolve_index(int(name))

    def resolve_index(self, index: int) -> object:
        """Return the value at ``index``."""
        if index >= len(self.values):
            msg = f"Format index ({index}) out of range ({len(self.values)})"
            raise ResolutionError(msg, index)
        return self.values[index]


class MappingResolver:
    """Resolve fields by key against a mapping."""

    def __init__(self, mapping: Mapping[str, object]) -> None:
        """Initialize with the keyed values."""
        self.mapping = mapping

    def resolve(self, name: str) -> object:
        """Return the value stored under ``name``."""
        try:
            return self.mapping[name]
        except KeyError as e:
            msg = f"Missing value for field {name!r}"
            raise ResolutionError(msg, name) from e

    def resolve_index(self, index: int) -> object:
        """Reject automatic numbering; mappings have no positions."""
        msg = f"Field {index} has no name; keyed arguments need named fields"
        raise ResolutionError(msg, index)


class RecordResolver:
    """Resolve fields against the declared fields of a record.

    Pydantic models (including computed fields), dataclass instances and
    named tuples are supported.
    """

    def __init__(self, record: object) -> None:
        """Initialize with the record.

        Raises:
            NotARecordError: When ``record`` is not a supported record

        """
        names = _record_field_names(record)
        if names is None:
            raise NotARecordError(record)
        self.record = record
        self.field_names = frozenset(names)

    def resolve(self, name: str) -> object:
        """Return the record's field ``name``."""
        if name not in self.field_names:
            msg = f"{type(self.record).__name__} has no field {name!r}"
            raise ResolutionError(msg, name)
        return getattr(self.record, name)

    def resolve_index(self, index: int) -> object:
        """Reject automatic numbering; record fields are looked up by name."""
        msg = f"Field {index} has no name; record fields must be named"
        raise ResolutionError(msg, index)
