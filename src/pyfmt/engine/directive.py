"""Format directives and the flag state machine that parses them.

A format specification follows the grammar::

    [[fill]align][sign]['#'][0][width]['.'precision][verb]

It is consumed in one left-to-right pass through ordered stages. Each stage
either consumes its token or is skipped, and no stage looks back.
"""

from pydantic import BaseModel
from pydantic import Field

from pyfmt.core.errors import SpecSyntaxError
from pyfmt.engine.enums import Align
from pyfmt.engine.enums import Sign
from pyfmt.engine.enums import Verb

ALIGN_TOKENS = frozenset("<>=^")
SIGN_TOKENS = frozenset("+- ")
VERB_TOKENS = frozenset("bdoxXeEfFgGrts%")
DIGITS = frozenset("0123456789")


class Directive(BaseModel):
    """Parsed form of a single field's format specification."""

    model_config = {"frozen": True}

    fill: str | None = Field(default=None, min_length=1, max_length=1)
    align: Align = Align.NONE
    sign: Sign = Sign.MINUS
    show_radix: bool = False
    min_width: int | None = Field(default=None, ge=0)
    precision: int | None = Field(default=None, ge=0)
    bare_point: bool = False
    """A '.' was given with no digits; precision is then 0."""
    verb: Verb = Verb.DEFAULT

    @property
    def percent(self) -> bool:
        """Whether the value is rendered as a percentage."""
        return self.verb is Verb.PERCENT

    @property
    def base_verb(self) -> Verb:
        """Verb handed to the host formatter; percent renders fixed-point."""
        if self.percent:
            return Verb.FIXED_LOWER
        return self.verb


def _scan_digits(spec: str, start: int) -> int:
    """Return the index just past the digit run starting at ``start``."""
    end = start
    while end < len(spec) and spec[end] in DIGITS:
        end += 1
    return end


def parse_spec(spec: str) -> Directive:
    """Parse a format specification into a Directive.

    Args:
        spec: Text after the first ':' of a replacement field

    Returns:
        Directive describing how to render the field

    Raises:
        SpecSyntaxError: When input remains after the verb stage

    """
    if not spec:
        return Directive()

    end = len(spec)
    pos = 0
    fill: str | None = None
    align = Align.NONE
    sign = Sign.MINUS
    show_radix = False
    min_width: int | None = None
    precision: int | None = None
    bare_point = False
    verb = Verb.DEFAULT

    # alignment, with an optional fill character in front
    if end > 1 and spec[1] in ALIGN_TOKENS:
        fill = spec[0]
        align = Align(spec[1])
        pos = 2
    elif spec[0] in ALIGN_TOKENS:
        align = Align(spec[0])
        pos = 1

    if pos < end and spec[pos] in SIGN_TOKENS:
        sign = Sign(spec[pos])
        pos += 1

    if pos < end and spec[pos] == "#":
        show_radix = True
        pos += 1

    if pos < end and spec[pos] == "0":
        # an explicit fill or alignment from the first stage wins
        if fill is None:
            fill = "0"
        if align is Align.NONE:
            align = Align.PAD_AFTER_SIGN
        pos += 1

    stop = _scan_digits(spec, pos)
    if stop > pos:
        min_width = int(spec[pos:stop])
        pos = stop

    if pos < end and spec[pos] == ".":
        stop = _scan_digits(spec, pos + 1)
        digits = spec[pos + 1 : stop]
        bare_point = not digits
        precision = int(digits or "0")
        pos = stop

    if pos < end and spec[pos] in VERB_TOKENS:
        verb = Verb(spec[pos])
        if verb is Verb.DECIMAL:
            show_radix = False
        pos += 1

    if pos < end:
        raise SpecSyntaxError(spec)

    return Directive(
        fill=fill,
        align=align,
        sign=sign,
        show_radix=show_radix,
        min_width=min_width,
        precision=precision,
        bare_point=bare_point,
        verb=verb,
    )
