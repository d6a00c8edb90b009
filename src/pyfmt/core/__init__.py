"""Core functionality for pyfmt.

This module contains the exception taxonomy and configuration shared by the
engine and the public entry points.
"""

from pyfmt.core.config import FormatConfig
from pyfmt.core.errors import ConversionError
from pyfmt.core.errors import FieldValidationError
from pyfmt.core.errors import FormatError
from pyfmt.core.errors import FormatPanic
from pyfmt.core.errors import FormatSyntaxError
from pyfmt.core.errors import NotARecordError
from pyfmt.core.errors import RenderError
from pyfmt.core.errors import ResolutionError
from pyfmt.core.errors import SpecSyntaxError
from pyfmt.core.errors import TemplateSyntaxError

__all__ = [
    "ConversionError",
    "FieldValidationError",
    "FormatConfig",
    "FormatError",
    "FormatPanic",
    "FormatSyntaxError",
    "NotARecordError",
    "RenderError",
    "ResolutionError",
    "SpecSyntaxError",
    "TemplateSyntaxError",
]
