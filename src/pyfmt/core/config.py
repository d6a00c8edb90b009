"""Configuration for template expansion.

This module provides the options shared by every entry point: alignment
defaults, field numbering rules and tracing.
"""

from pydantic import BaseModel
from pydantic import Field


class FormatConfig(BaseModel):
    """Configuration for template expansion.

    Attributes:
        natural_alignment: When a field requests a width but no alignment,
            right-align numbers and left-align everything else, as
            str.format does. When False such fields are written unpadded.
            Default is True.
        allow_mixed_numbering: Whether automatic ``{}`` and manual ``{0}``
            fields may appear in the same template. Default is True.
        trace_expansion: Whether to wrap each expansion in an OpenTelemetry
            span. Default is True.

    """

    natural_alignment: bool = Field(default=True)
    allow_mixed_numbering: bool = Field(default=True)
    trace_expansion: bool = Field(
        default=True,
        description="Emit a pyfmt.expand span for every expansion",
    )
