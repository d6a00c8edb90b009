"""Host formatting primitive built on the format() builtin."""

import numbers

from pyfmt.core.errors import ConversionError
from pyfmt.engine.enums import Sign
from pyfmt.engine.enums import Verb


def is_number(value: object) -> bool:
    """Return True for numeric values; bool counts as text."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def _truncate(text: str, precision: int | None) -> str:
    if precision is None:
        return text
    return text[:precision]


def format_value(
    value: object,
    *,
    verb: Verb,
    sign: Sign = Sign.MINUS,
    alternate: bool = False,
    width: int | None = None,
    precision: int | None = None,
) -> str:
    """Convert one value to text for a single verb.

    Args:
        value: Value to convert
        verb: Conversion kind; PERCENT must already be resolved to a base verb
        sign: Sign mode for numeric conversions
        alternate: Ask the host formatter for its alternate form ('#')
        width: Minimum width handed to the host formatter
        precision: Digits after the point, or maximum length for text

    Returns:
        Unaligned text for the value

    Raises:
        ConversionError: When the host formatter rejects the value

    """
    match verb:
        case Verb.REPR:
            return _truncate(repr(value), precision)
        case Verb.TYPE_NAME:
            return _truncate(type(value).__name__, precision)
        case Verb.STRING:
            return _truncate(str(value), precision)
        case Verb.DEFAULT if not is_number(value):
            return _truncate(str(value), precision)

    spec = "" if sign is Sign.MINUS else sign.value
    if alternate:
        spec += "#"
    if width:
        spec += str(width)
    if precision is not None:
        spec += f".{precision}"
    spec += verb.value

    try:
        return format(value, spec)
    except (TypeError, ValueError) as e:
        raise ConversionError(value, verb.value, str(e)) from e
