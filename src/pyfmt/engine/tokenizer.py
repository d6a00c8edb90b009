"""Split templates into literal runs and replacement fields."""

from collections.abc import Iterator
import re
from typing import TypeAlias

from pydantic import BaseModel

from pyfmt.core.errors import TemplateSyntaxError

_BRACE = re.compile(r"[{}]")


class LiteralToken(BaseModel):
    """A run of literal text with escaped braces already collapsed."""

    model_config = {"frozen": True}

    text: str


class FieldToken(BaseModel):
    """A replacement field split into name and format specification."""

    model_config = {"frozen": True}

    name: str
    spec: str
    position: int

    @property
    def is_automatic(self) -> bool:
        """Whether the field takes the next positional argument."""
        return self.name == ""


Token: TypeAlias = LiteralToken | FieldToken


def tokenize(template: str) -> Iterator[Token]:
    """Yield the literal runs and fields of a template in order.

    Adjacent literal text, including collapsed ``{{`` and ``}}`` escapes, is
    merged into a single LiteralToken.

    Args:
        template: Template text

    Yields:
        LiteralToken and FieldToken instances

    Raises:
        TemplateSyntaxError: When a brace is unmatched

    """
    literal: list[str] = []
    pos = 0
    end = len(template)

    while pos < end:
        match = _BRACE.search(template, pos)
        if match is None:
            literal.append(template[pos:])
            break

        brace = match.start()
        literal.append(template[pos:brace])
        doubled = template.startswith(match.group() * 2, brace)

        if match.group() == "}":
            if not doubled:
                msg = "Unmatched closing brace '}'"
                raise TemplateSyntaxError(msg, template, brace)
            literal.append("}")
            pos = brace + 2
            continue

        if doubled:
            literal.append("{")
            pos = brace + 2
            continue

        close = template.find("}", brace + 1)
        if close == -1:
            msg = "Unmatched opening brace '{'"
            raise TemplateSyntaxError(msg, template, brace)

        if any(literal):
            yield LiteralToken(text="".join(literal))
        literal = []

        name, _, spec = template[brace + 1 : close].partition(":")
        yield FieldToken(name=name, spec=spec, position=brace)
        pos = close + 1

    if any(literal):
        yield LiteralToken(text="".join(literal))
