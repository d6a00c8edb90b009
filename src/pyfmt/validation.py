"""Template field validation utilities."""

from collections.abc import Mapping

from pyfmt.core.errors import FieldValidationError
from pyfmt.engine.tokenizer import FieldToken
from pyfmt.engine.tokenizer import tokenize


def collect_fields(template: str) -> set[str]:
    """Extract the named fields of a template.

    Automatic ``{}`` fields have no name and are not included.

    Args:
        template: Template text

    Returns:
        Set of field names found in template

    Raises:
        TemplateSyntaxError: When the template's braces are unmatched

    """
    return {
        token.name
        for token in tokenize(template)
        if isinstance(token, FieldToken) and not token.is_automatic
    }


def validate_missing_or_extra(
    fields_required: set[str], provided: Mapping[str, object]
) -> None:
    """Validate that all required fields are provided without extras.

    Args:
        fields_required: Set of field names required by template
        provided: Mapping of provided field names to values

    Raises:
        FieldValidationError: When fields are missing or extra

    """
    provided_set = set(provided.keys())
    missing = fields_required - provided_set
    extra = provided_set - fields_required

    if missing or extra:
        msg_parts = []
        if missing:
            msg_parts.append(f"Missing fields: {', '.join(sorted(missing))}")
        if extra:
            msg_parts.append(f"Extra fields: {', '.join(sorted(extra))}")
        msg = "; ".join(msg_parts)
        raise FieldValidationError(msg)
