"""Custom exceptions for pyfmt.

Every error raised while expanding a template derives from FormatError, so
callers can catch one type. The must_* entry points convert these into
FormatPanic instead.
"""


class FormatError(Exception):
    """Base exception for template expansion errors."""


class FormatSyntaxError(FormatError, ValueError):
    """Raised when a template or a format specification is malformed."""


class TemplateSyntaxError(FormatSyntaxError):
    """Raised when the brace structure of a template is invalid.

    This occurs when:
    - A single '}' appears outside a replacement field
    - A '{' opens a field that is never closed
    - Automatic and manual field numbering are mixed while disallowed
    """

    def __init__(self, message: str, template: str, position: int) -> None:
        """Initialize with message, template and offending position."""
        self.template = template
        self.position = position
        super().__init__(f"{message} at position {position}")


class SpecSyntaxError(FormatSyntaxError):
    """Raised when a field's format specification cannot be parsed."""

    def __init__(self, spec: str, reason: str = "unexpected trailing input") -> None:
        """Initialize with the offending specification string."""
        self.spec = spec
        self.reason = reason
        super().__init__(f"Invalid format specification {spec!r}: {reason}")


class ResolutionError(FormatError, LookupError):
    """Raised when a field name or index cannot be resolved to a value."""

    def __init__(self, message: str, key: str | int) -> None:
        """Initialize with message and the unresolved key."""
        self.key = key
        super().__init__(message)


class NotARecordError(ResolutionError, TypeError):
    """Raised when record-mode expansion is given a non-record value."""

    def __init__(self, value: object) -> None:
        """Initialize with the rejected value."""
        self.value_type = type(value).__name__
        super().__init__(
            "format_record requires a pydantic model, dataclass instance or "
            f"named tuple, got {self.value_type}",
            self.value_type,
        )


class ConversionError(FormatError, ValueError):
    """Raised when the host formatter rejects a value for a verb.

    For example a string value given the 'd' or 'f' verb.
    """

    def __init__(self, value: object, verb: str, detail: str) -> None:
        """Initialize with the value, verb and host error detail."""
        self.value_type = type(value).__name__
        self.verb = verb
        super().__init__(
            f"Cannot format {self.value_type} with verb {verb!r}: {detail}"
        )


class RenderError(FormatError):
    """Raised when rendered text cannot be post-processed."""


class FieldValidationError(FormatError, ValueError):
    """Raised when provided values do not match a template's fields."""


class FormatPanic(BaseException):  # noqa: N818
    """Abrupt failure raised by the must_* entry points.

    Derives from BaseException so that generic ``except Exception`` handlers
    let it propagate. The original FormatError is available as __cause__.
    """
