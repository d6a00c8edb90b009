"""Format-specification engine: tokenizer, flag parser, renderer, buffer."""

from pyfmt.engine.buffer import AlignedBuffer
from pyfmt.engine.directive import Directive
from pyfmt.engine.directive import parse_spec
from pyfmt.engine.driver import TemplateDriver
from pyfmt.engine.driver import expand
from pyfmt.engine.enums import Align
from pyfmt.engine.enums import Sign
from pyfmt.engine.enums import Verb
from pyfmt.engine.primitives import format_value
from pyfmt.engine.renderer import ValueRenderer
from pyfmt.engine.renderer import shift_percent
from pyfmt.engine.tokenizer import FieldToken
from pyfmt.engine.tokenizer import LiteralToken
from pyfmt.engine.tokenizer import tokenize

__all__ = [
    "Align",
    "AlignedBuffer",
    "Directive",
    "FieldToken",
    "LiteralToken",
    "Sign",
    "TemplateDriver",
    "ValueRenderer",
    "Verb",
    "expand",
    "format_value",
    "parse_spec",
    "shift_percent",
    "tokenize",
]
