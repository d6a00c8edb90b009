"""pyfmt - Python-style str.format templates.

This package renders templates made of literal text and ``{name:spec}``
replacement fields. Format specifications are parsed by an explicit flag
state machine into a Directive, and each value is rendered with padding,
sign placement, radix prefixes and percent scaling applied in a fixed order.

Values come from positional arguments, a mapping or the fields of a record
(pydantic model, dataclass or named tuple).
"""

from pyfmt.api import format  # noqa: A004
from pyfmt.api import format_map
from pyfmt.api import format_record
from pyfmt.api import must_format
from pyfmt.api import must_format_map
from pyfmt.api import must_format_record
from pyfmt.core import ConversionError
from pyfmt.core import FieldValidationError
from pyfmt.core import FormatConfig
from pyfmt.core import FormatError
from pyfmt.core import FormatPanic
from pyfmt.core import FormatSyntaxError
from pyfmt.core import NotARecordError
from pyfmt.core import RenderError
from pyfmt.core import ResolutionError
from pyfmt.core import SpecSyntaxError
from pyfmt.core import TemplateSyntaxError
from pyfmt.engine import Align
from pyfmt.engine import Directive
from pyfmt.engine import Sign
from pyfmt.engine import Verb
from pyfmt.engine import parse_spec
from pyfmt.project_info import ProjectInfo
from pyfmt.project_info import get_project_info
from pyfmt.resolvers import MappingResolver
from pyfmt.resolvers import RecordResolver
from pyfmt.resolvers import SequenceResolver
from pyfmt.template import Template
from pyfmt.types import ArgumentResolver
from pyfmt.validation import collect_fields
from pyfmt.validation import validate_missing_or_extra

# Public API - supports both direct and module imports
__all__ = [
    "Align",
    "ArgumentResolver",
    "ConversionError",
    "Directive",
    "FieldValidationError",
    "FormatConfig",
    "FormatError",
    "FormatPanic",
    "FormatSyntaxError",
    "MappingResolver",
    "NotARecordError",
    "ProjectInfo",
    "RecordResolver",
    "RenderError",
    "ResolutionError",
    "SequenceResolver",
    "Sign",
    "SpecSyntaxError",
    "Template",
    "TemplateSyntaxError",
    "Verb",
    "collect_fields",
    "format",
    "format_map",
    "format_record",
    "get_project_info",
    "must_format",
    "must_format_map",
    "must_format_record",
    "parse_spec",
    "validate_missing_or_extra",
]
__version__ = get_project_info().version
