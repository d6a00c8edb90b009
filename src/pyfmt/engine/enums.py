"""Type-safe enumerations for format directives."""

from enum import StrEnum


class Align(StrEnum):
    """Field alignment, keyed by its specification token."""

    NONE = ""
    LEFT = "<"
    RIGHT = ">"
    PAD_AFTER_SIGN = "="
    CENTER = "^"


class Sign(StrEnum):
    """Sign display mode."""

    MINUS = "-"
    PLUS = "+"
    SPACE = " "


class Verb(StrEnum):
    """Conversion kind, keyed by its specification letter."""

    DEFAULT = ""
    BINARY = "b"
    DECIMAL = "d"
    OCTAL = "o"
    HEX_LOWER = "x"
    HEX_UPPER = "X"
    SCI_LOWER = "e"
    SCI_UPPER = "E"
    FIXED_LOWER = "f"
    FIXED_UPPER = "F"
    GENERAL_LOWER = "g"
    GENERAL_UPPER = "G"
    REPR = "r"
    TYPE_NAME = "t"
    STRING = "s"
    PERCENT = "%"


FLOAT_VERBS = frozenset(
    {
        Verb.SCI_LOWER,
        Verb.SCI_UPPER,
        Verb.FIXED_LOWER,
        Verb.FIXED_UPPER,
        Verb.GENERAL_LOWER,
        Verb.GENERAL_UPPER,
    }
)

RADIX_VERBS = frozenset({Verb.BINARY, Verb.OCTAL, Verb.HEX_LOWER, Verb.HEX_UPPER})

TEXT_VERBS = frozenset({Verb.REPR, Verb.TYPE_NAME, Verb.STRING})
