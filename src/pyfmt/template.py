"""Pre-compiled templates for repeated rendering."""

from collections.abc import Mapping

from pyfmt.core.config import FormatConfig
from pyfmt.engine.directive import parse_spec
from pyfmt.engine.driver import TemplateDriver
from pyfmt.engine.tokenizer import FieldToken
from pyfmt.engine.tokenizer import Token
from pyfmt.engine.tokenizer import tokenize
from pyfmt.observability import traced_expand
from pyfmt.resolvers import MappingResolver
from pyfmt.resolvers import RecordResolver
from pyfmt.resolvers import SequenceResolver
from pyfmt.resolvers import record_fields
from pyfmt.types import ArgumentResolver
from pyfmt.validation import validate_missing_or_extra


class Template:
    """Template tokenized and validated once, rendered many times."""

    def __init__(self, source: str, *, config: FormatConfig | None = None) -> None:
        """Initialize a template.

        Args:
            source: Template text
            config: Expansion options used by every render

        Raises:
            TemplateSyntaxError: When the template's braces are unmatched
            SpecSyntaxError: When any field's format specification is invalid

        """
        self.source = source
        self.config = config or FormatConfig()
        self.tokens: tuple[Token, ...] = tuple(tokenize(source))
        for field in self.fields:
            parse_spec(field.spec)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"{type(self).__name__}({self.source!r})"

    @property
    def fields(self) -> list[FieldToken]:
        """Replacement fields in template order."""
        return [token for token in self.tokens if isinstance(token, FieldToken)]

    @property
    def field_names(self) -> set[str]:
        """Names of the named fields."""
        return {field.name for field in self.fields if not field.is_automatic}

    def format(self, *args: object) -> str:
        """Render against positional values."""
        return self._expand(SequenceResolver(args))

    def format_map(self, mapping: Mapping[str, object]) -> str:
        """Render against keyed values."""
        return self._expand(MappingResolver(mapping))

    def format_record(self, record: object) -> str:
        """Render against a record's declared fields."""
        return self._expand(RecordResolver(record))

    def render(
        self,
        record: object,
        extra: Mapping[str, object] | None = None,
        *,
        strict: bool = False,
    ) -> str:
        """Render against a record's fields merged with extra values.

        Args:
            record: Record providing field values
            extra: Optional values not declared on the record; they take
                precedence over record fields of the same name
            strict: Require the values to match the named fields exactly

        Returns:
            Rendered string

        Raises:
            NotARecordError: When ``record`` is not a supported record
            FieldValidationError: When ``strict`` and values do not match

        """
        data = record_fields(record)
        if extra:
            data = {**data, **extra}
        if strict:
            validate_missing_or_extra(self.field_names, data)
        return self.format_map(data)

    def _expand(self, resolver: ArgumentResolver) -> str:
        driver = TemplateDriver(resolver, self.config)
        return traced_expand(driver, self.source, self.tokens)
