"""Template driver: tokenize, resolve, parse and render every field."""

from collections.abc import Iterable
from typing import NoReturn

from pyfmt.core.config import FormatConfig
from pyfmt.core.errors import TemplateSyntaxError
from pyfmt.engine.buffer import AlignedBuffer
from pyfmt.engine.directive import parse_spec
from pyfmt.engine.renderer import ValueRenderer
from pyfmt.engine.tokenizer import FieldToken
from pyfmt.engine.tokenizer import Token
from pyfmt.engine.tokenizer import tokenize
from pyfmt.types import ArgumentResolver


class TemplateDriver:
    """Expand templates against a single argument resolver.

    A driver keeps no state between expansions apart from counters, so one
    instance may expand several templates in turn.
    """

    def __init__(
        self,
        resolver: ArgumentResolver,
        config: FormatConfig | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            resolver: Source of field values
            config: Expansion options, defaults to FormatConfig()

        """
        self.resolver = resolver
        self.config = config or FormatConfig()
        self.fields_rendered = 0

    def expand(self, template: str) -> str:
        """Expand a template string.

        Args:
            template: Template text

        Returns:
            Rendered string

        Raises:
            FormatError: On malformed templates or specs, unresolved fields
                and values the verb cannot format

        """
        return self.expand_tokens(tokenize(template), template)

    def expand_tokens(self, tokens: Iterable[Token], template: str = "") -> str:
        """Expand an already tokenized template.

        Args:
            tokens: Tokens in template order
            template: Source text, used in error messages

        Returns:
            Rendered string

        """
        buffer = AlignedBuffer()
        renderer = ValueRenderer(
            buffer, natural_alignment=self.config.natural_alignment
        )
        cursor = 0
        seen_manual = False
        self.fields_rendered = 0

        for token in tokens:
            if not isinstance(token, FieldToken):
                buffer.write(token.text)
                continue

            if token.is_automatic:
                if seen_manual and not self.config.allow_mixed_numbering:
                    self._numbering_error(template, token)
                value = self.resolver.resolve_index(cursor)
                cursor += 1
            else:
                if token.name.isascii() and token.name.isdigit():
                    seen_manual = True
                    if cursor and not self.config.allow_mixed_numbering:
                        self._numbering_error(template, token)
                value = self.resolver.resolve(token.name)

            renderer.render(value, parse_spec(token.spec))
            self.fields_rendered += 1

        return buffer.getvalue()

    @staticmethod
    def _numbering_error(template: str, token: FieldToken) -> NoReturn:
        msg = "Cannot mix automatic and manual field numbering"
        raise TemplateSyntaxError(msg, template, token.position)


def expand(
    template: str,
    resolver: ArgumentResolver,
    config: FormatConfig | None = None,
) -> str:
    """Expand ``template`` against ``resolver``.

    Args:
        template: Template text
        resolver: Source of field values
        config: Expansion options

    Returns:
        Rendered string

    """
    return TemplateDriver(resolver, config).expand(template)
