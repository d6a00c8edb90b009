"""Tests for the value renderer and the host formatting primitive."""

from decimal import Decimal

import pytest

from pyfmt.core.errors import ConversionError
from pyfmt.core.errors import RenderError
from pyfmt.engine.buffer import AlignedBuffer
from pyfmt.engine.directive import parse_spec
from pyfmt.engine.enums import Sign
from pyfmt.engine.enums import Verb
from pyfmt.engine.primitives import format_value
from pyfmt.engine.primitives import is_number
from pyfmt.engine.renderer import ValueRenderer
from pyfmt.engine.renderer import shift_percent


def render(value: object, spec: str, *, natural_alignment: bool = True) -> str:
    buffer = AlignedBuffer()
    renderer = ValueRenderer(buffer, natural_alignment=natural_alignment)
    renderer.render(value, parse_spec(spec))
    return buffer.getvalue()


class TestIntegers:
    """Test integer verbs, signs and radix prefixes."""

    def test_right_aligned_width(self) -> None:
        """Test explicit right alignment."""
        assert render(42, ">10") == "        42"

    def test_forced_sign(self) -> None:
        """Test '+' signs positives and keeps negatives."""
        assert render(5, "+d") == "+5"
        assert render(-5, "+d") == "-5"

    def test_space_sign(self) -> None:
        """Test ' ' reserves a space for positives."""
        assert render(5, " d") == " 5"
        assert render(-5, " d") == "-5"

    def test_hex_prefix_after_sign(self) -> None:
        """Test the hex marker is placed after a minus sign."""
        assert render(-10, "#x") == "-0xa"
        assert render(255, "#X") == "0XFF"

    def test_hex_without_radix(self) -> None:
        """Test hex digits without a marker."""
        assert render(255, "x") == "ff"

    def test_binary_and_octal_prefixes(self) -> None:
        """Test literal prefixes for binary and octal."""
        assert render(5, "#b") == "0b101"
        assert render(-5, "#b") == "-0b101"
        assert render(8, "#o") == "0o10"
        assert render(5, "b") == "101"

    def test_prefix_with_sign_modes(self) -> None:
        """Test prefixes follow '+' and ' ' signs."""
        assert render(5, "+#b") == "+0b101"
        assert render(5, " #b") == " 0b101"

    def test_left_alignment_keeps_sign_first(self) -> None:
        """Test a negative value left-aligned."""
        assert render(-7, "<5") == "-7   "

    def test_pad_after_sign_with_spaces(self) -> None:
        """Test '=' alignment with the default fill."""
        assert render(-7, "=5") == "-   7"

    def test_center(self) -> None:
        """Test centered numbers."""
        assert render(7, "*^5") == "**7**"

    def test_precision_rejected_for_integers(self) -> None:
        """Test precision on an integer verb is a conversion error."""
        with pytest.raises(ConversionError):
            render(5, ".2d")


class TestZeroPadding:
    """Test zero-padding against every sign mode and radix verb."""

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            (-42, "08d", "-0000042"),
            (42, "+08d", "+0000042"),
            (42, " 08d", " 0000042"),
            (42, "-08d", "00000042"),
            (10, "08b", "00001010"),
            (10, "+08b", "+0001010"),
            (10, " 08b", " 0001010"),
            (-10, "08b", "-0001010"),
            (10, "#08b", "0b001010"),
            (-10, "#08b", "-0b01010"),
            (5, "+#010b", "+0b0000101"),
            (-5, "#010b", "-0b0000101"),
            (10, "+#08o", "+0o00012"),
            (5, " #010o", " 0o0000005"),
            (255, "#010x", "0x000000ff"),
            (255, "-#08x", "0x0000ff"),
            (-255, "#08x", "-0x000ff"),
            (10, " #08x", " 0x0000a"),
            (-10, "#08X", "-0X0000A"),
            (10, "#06X", "0X000A"),
        ],
    )
    def test_zero_pad(self, value: int, spec: str, expected: str) -> None:
        """Test sign, radix marker and zero fill ordering."""
        result = render(value, spec)
        assert result == expected
        assert result == format(value, spec)

    def test_explicit_left_alignment_pads_after(self) -> None:
        """Test '<' with zero-pad fills on the right."""
        assert render(42, "<05") == "42000"


class TestFloats:
    """Test floating-point verbs."""

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            (3.14159, ".2f", "3.14"),
            (3.7, ".f", "4"),
            (3.7, "5.f", "    4"),
            (3.14159, "10.3f", "     3.142"),
            (-3.14159, "08.3f", "-003.142"),
            (3.14159, " .2f", " 3.14"),
            (-3.14159, " .2f", "-3.14"),
            (3.14159, "+.1f", "+3.1"),
            (1234.5, ".2e", "1.23e+03"),
            (1234.5, "E", "1.234500E+03"),
            (0.0001, "g", "0.0001"),
            (1e-5, "G", "1E-05"),
            (3.14159, "<+8.2f", "+3.14   "),
            (3.14159, "=+8.2f", "+   3.14"),
            (2.5, "*^9.1f", "***2.5***"),
            (2.5, " 8.2f", "    2.50"),
            (2.5, " 08.2f", " 0002.50"),
            (float("inf"), "f", "inf"),
            (7, ".1f", "7.0"),
        ],
    )
    def test_float_verbs(self, value: float, spec: str, expected: str) -> None:
        """Test float rendering matches str.format."""
        assert render(value, spec) == expected

    def test_decimal_values(self) -> None:
        """Test Decimal goes through the host formatter."""
        assert render(Decimal("1.5"), ".3f") == "1.500"

    def test_float_with_decimal_verb(self) -> None:
        """Test 'd' rejects floats."""
        with pytest.raises(ConversionError) as exc_info:
            render(1.5, "d")

        error = exc_info.value
        assert error.verb == "d"
        assert error.value_type == "float"
        assert isinstance(error.__cause__, ValueError)


class TestPercent:
    """Test percentage rendering."""

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            (0.5, ".0%", "50%"),
            (0.005, ".2%", "0.50%"),
            (-0.5, ".0%", "-50%"),
            (0.25, "%", "25.000000%"),
            (1.234, ".1%", "123.4%"),
            (12.5, ".0%", "1250%"),
            (0.05, ".0%", "5%"),
            (0.0, ".0%", "0%"),
            (0.125, ".1%", "12.5%"),
            (1, ".1%", "100.0%"),
            (0.5, "+.0%", "+50%"),
            (0.5, " .1%", " 50.0%"),
            (0.12345, "010.3%", "00012.345%"),
            (-0.12345, "010.3%", "-0012.345%"),
            (0.5, ">6.0%", "   50%"),
            (float("inf"), "%", "inf%"),
        ],
    )
    def test_percent(self, value: float, spec: str, expected: str) -> None:
        """Test the string-level shift by two places."""
        assert render(value, spec) == expected

    def test_percent_bare_point(self) -> None:
        """Test a '.' without digits cannot size a percentage."""
        with pytest.raises(RenderError, match="has no digits"):
            render(0.5, ".%")

    def test_percent_of_text(self) -> None:
        """Test a string cannot be rendered as a percentage."""
        with pytest.raises(ConversionError):
            render("half", "%")


class TestShiftPercent:
    """Test the percent string transform directly."""

    def test_whole_number(self) -> None:
        """Test text without a fractional part."""
        assert shift_percent("42") == "4200%"
        assert shift_percent("-3") == "-300%"

    def test_zero_integer_part_drops_leading_zero(self) -> None:
        """Test digits fold out of the fraction."""
        assert shift_percent("0.0050") == "0.50%"
        assert shift_percent("0.1234") == "12.34%"

    def test_non_numeric_whole_part(self) -> None:
        """Test a corrupt integer part is a render error."""
        with pytest.raises(RenderError):
            shift_percent("abc.de")

    def test_nan(self) -> None:
        """Test non-finite text gets a bare percent sign."""
        assert shift_percent("nan") == "nan%"


class TestTextVerbs:
    """Test default, repr, type-name and string rendering."""

    @pytest.mark.parametrize(
        ("value", "spec", "expected"),
        [
            ("abc", "r", "'abc'"),
            (42, "t", "int"),
            ("hello", ".3s", "hel"),
            ("hello", ".2", "he"),
            (None, "", "None"),
            (True, "", "True"),
            (True, ">6", "  True"),
            (True, "6", "True  "),
            (42, "6s", "42    "),
            (42, "6r", "42    "),
            (3.0, "", "3.0"),
            (3.14159, ".3", "3.14"),
            (1 + 2j, "", "(1+2j)"),
            (1 + 2j, "<8", "(1+2j)  "),
            (Decimal("1.50"), "", "1.50"),
            ("abc", "+", "abc"),
            # odd padding goes right: pad before is (width - len) // 2
            ("ab", "^6", "  ab  "),
            ("ab", "^5", " ab  "),
        ],
    )
    def test_text(self, value: object, spec: str, expected: str) -> None:
        """Test non-numeric verbs and default rendering."""
        assert render(value, spec) == expected

    @pytest.mark.parametrize(("value", "spec"), [("abc", "d"), ("abc", "f")])
    def test_numeric_verb_on_text(self, value: object, spec: str) -> None:
        """Test numeric verbs reject strings."""
        with pytest.raises(ConversionError, match="str"):
            render(value, spec)


class TestNaturalAlignment:
    """Test alignment when a width is given without an alignment."""

    def test_numbers_align_right(self) -> None:
        """Test numbers pad on the left."""
        assert render(42, "10") == "        42"

    def test_text_aligns_left(self) -> None:
        """Test text pads on the right."""
        assert render("ab", "5") == "ab   "

    def test_disabled_writes_unpadded(self) -> None:
        """Test natural alignment can be turned off."""
        assert render(42, "10", natural_alignment=False) == "42"
        assert render("ab", "5", natural_alignment=False) == "ab"

    def test_explicit_alignment_unaffected(self) -> None:
        """Test explicit alignment applies regardless of the option."""
        assert render("ab", ">5", natural_alignment=False) == "   ab"


class TestFormatValue:
    """Test the host formatting primitive."""

    def test_repr_truncated(self) -> None:
        """Test precision truncates text verbs."""
        assert format_value("abcdef", verb=Verb.REPR, precision=3) == "'ab"

    def test_numeric_spec_assembly(self) -> None:
        """Test sign, alternate, width and precision reach format()."""
        result = format_value(
            3.5,
            verb=Verb.FIXED_LOWER,
            sign=Sign.PLUS,
            width=8,
            precision=2,
        )
        assert result == "   +3.50"

    def test_alternate_hex(self) -> None:
        """Test the alternate flag adds the hex marker."""
        assert format_value(26, verb=Verb.HEX_LOWER, alternate=True) == "0x1a"

    def test_is_number(self) -> None:
        """Test bool is treated as text."""
        assert is_number(1)
        assert is_number(1.5)
        assert is_number(Decimal("2"))
        assert not is_number(True)
        assert not is_number("1")
