"""Public entry points for expanding templates.

Each call shape comes in two variants. ``format``, ``format_map`` and
``format_record`` raise FormatError subclasses for the caller to handle.
The ``must_*`` variants are meant for templates validated ahead of time and
turn any FormatError into FormatPanic.
"""

from collections.abc import Callable
from collections.abc import Mapping
import functools
from typing import ParamSpec

from pyfmt.core.config import FormatConfig
from pyfmt.core.errors import FormatError
from pyfmt.core.errors import FormatPanic
from pyfmt.engine.driver import TemplateDriver
from pyfmt.observability import traced_expand
from pyfmt.resolvers import MappingResolver
from pyfmt.resolvers import RecordResolver
from pyfmt.resolvers import SequenceResolver


def format(  # noqa: A001
    template: str, /, *args: object, config: FormatConfig | None = None
) -> str:
    """Expand ``{}`` and ``{0}`` style fields against positional values.

    Args:
        template: Template text
        *args: Positional values
        config: Expansion options

    Returns:
        Rendered string

    Raises:
        FormatError: When the template cannot be expanded

    Examples:
        format("{} and {}", "a", "b") -> "a and b"
        format("{:>6.2f}", 3.14159) -> "  3.14"

    """
    driver = TemplateDriver(SequenceResolver(args), config)
    return traced_expand(driver, template)


def format_map(
    template: str,
    mapping: Mapping[str, object],
    /,
    *,
    config: FormatConfig | None = None,
) -> str:
    """Expand ``{name}`` style fields against a mapping.

    Args:
        template: Template text
        mapping: Values keyed by field name
        config: Expansion options

    Returns:
        Rendered string

    Raises:
        FormatError: When the template cannot be expanded

    """
    driver = TemplateDriver(MappingResolver(mapping), config)
    return traced_expand(driver, template)


def format_record(
    template: str,
    record: object,
    /,
    *,
    config: FormatConfig | None = None,
) -> str:
    """Expand ``{field}`` style fields against a record's declared fields.

    Args:
        template: Template text
        record: Pydantic model, dataclass instance or named tuple
        config: Expansion options

    Returns:
        Rendered string

    Raises:
        NotARecordError: When ``record`` is not a supported record
        FormatError: When the template cannot be expanded

    """
    driver = TemplateDriver(RecordResolver(record), config)
    return traced_expand(driver, template)


P = ParamSpec("P")


def _must(func: Callable[P, str]) -> Callable[P, str]:
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> str:
        try:
            return func(*args, **kwargs)
        except FormatError as e:
            raise FormatPanic(str(e)) from e

    wrapper.__name__ = wrapper.__qualname__ = f"must_{func.__name__}"
    wrapper.__doc__ = f"Like {func.__name__}, but raises FormatPanic on error."
    return wrapper


must_format = _must(format)
must_format_map = _must(format_map)
must_format_record = _must(format_record)
