"""Render a single value according to its directive."""

from pyfmt.core.errors import RenderError
from pyfmt.engine.buffer import DEFAULT_FILL
from pyfmt.engine.buffer import AlignedBuffer
from pyfmt.engine.directive import Directive
from pyfmt.engine.enums import FLOAT_VERBS
from pyfmt.engine.enums import RADIX_VERBS
from pyfmt.engine.enums import TEXT_VERBS
from pyfmt.engine.enums import Align
from pyfmt.engine.enums import Sign
from pyfmt.engine.enums import Verb
from pyfmt.engine.primitives import format_value
from pyfmt.engine.primitives import is_number

# Precision used for percentages without one; two digits are consumed by the
# shift, leaving six decimals like str.format.
PERCENT_DEFAULT_PRECISION = 8

LITERAL_PREFIXES = {Verb.BINARY: "0b", Verb.OCTAL: "0o"}

SIGN_CHARS = ("-", "+", " ")


def shift_percent(text: str) -> str:
    """Multiply rendered fixed-point text by 100 and append '%'.

    The decimal point is moved on the string itself so no float rounding is
    reintroduced. Text must carry at least two fractional digits.

    Args:
        text: Fixed-point rendering, optionally led by a sign character

    Returns:
        Percentage text

    Raises:
        RenderError: When the integer part is not a digit run

    """
    sign = ""
    if text[:1] in SIGN_CHARS:
        sign, text = text[0], text[1:]

    whole, dot, fraction = text.partition(".")
    if not dot:
        if whole.isdigit():
            return f"{sign}{whole}00%"
        # inf and nan
        return f"{sign}{whole}%"

    if not whole.isdigit():
        msg = f"Couldn't parse percentage integer part from {text!r}"
        raise RenderError(msg)

    shifted, rest = fraction[:2], fraction[2:]
    suffix = f".{rest}" if rest else ""
    if int(whole) == 0:
        if shifted.startswith("0"):
            shifted = shifted[1:]
        return f"{sign}{shifted}{suffix}%"
    return f"{sign}{whole}{shifted}{suffix}%"


def _splice_prefix(text: str, prefix: str, sign: Sign) -> str:
    """Insert a literal radix prefix after any leading sign."""
    text = text.lstrip(" ")
    if text[:1] in ("-", "+"):
        return f"{text[0]}{prefix}{text[1:]}"
    if sign is Sign.SPACE:
        return f" {prefix}{text}"
    return f"{prefix}{text}"


class ValueRenderer:
    """Render values into a shared AlignedBuffer."""

    def __init__(self, buffer: AlignedBuffer, *, natural_alignment: bool = True):
        """Initialize the renderer.

        Args:
            buffer: Buffer receiving rendered fields
            natural_alignment: Resolve a missing alignment the way str.format
                does when a width is requested

        """
        self.buffer = buffer
        self.natural_alignment = natural_alignment

    def render(self, value: object, directive: Directive) -> None:
        """Render one value and append it to the buffer.

        Args:
            value: Value to render
            directive: Parsed format specification for the field

        Raises:
            ConversionError: When the value cannot be formatted with the verb
            RenderError: When the percent transform fails

        """
        verb = directive.base_verb
        precision = directive.precision
        if directive.percent:
            if directive.bare_point:
                msg = "Couldn't parse percentage precision: '.' has no digits"
                raise RenderError(msg)
            if precision is None:
                precision = PERCENT_DEFAULT_PRECISION
            else:
                precision += 2

        prefix = ""
        alternate = False
        radix_marked = directive.show_radix and verb in RADIX_VERBS
        if radix_marked:
            if verb in LITERAL_PREFIXES:
                prefix = LITERAL_PREFIXES[verb]
            else:
                alternate = True

        width = directive.min_width or 0
        is_float = verb in FLOAT_VERBS

        text = format_value(
            value,
            verb=verb,
            sign=directive.sign,
            alternate=alternate,
            width=width if is_float else None,
            precision=precision,
        )

        if prefix:
            text = _splice_prefix(text, prefix, directive.sign)

        if is_float:
            text = text.strip()
            if directive.sign is Sign.SPACE and not text.startswith("-"):
                text = f" {text}"

        if directive.percent:
            text = shift_percent(text)

        align = self._resolve_align(value, directive)
        fill = directive.fill or DEFAULT_FILL

        if text[:1] in SIGN_CHARS and align in (Align.LEFT, Align.PAD_AFTER_SIGN):
            self.buffer.write(text[0])
            text = text[1:]
            width -= 1

        if radix_marked and align is Align.PAD_AFTER_SIGN:
            self.buffer.write(text[:2])
            self.buffer.write_aligned(text[2:], align, width - 2, fill)
        else:
            self.buffer.write_aligned(text, align, width, fill)

    def _resolve_align(self, value: object, directive: Directive) -> Align:
        if directive.align is not Align.NONE or not self.natural_alignment:
            return directive.align
        if not directive.min_width:
            return Align.NONE
        if is_number(value) and directive.verb not in TEXT_VERBS:
            return Align.RIGHT
        return Align.LEFT
