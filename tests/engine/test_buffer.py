"""Tests for the aligned output buffer."""

import pytest

from pyfmt.engine.buffer import AlignedBuffer
from pyfmt.engine.enums import Align


def aligned(text: str, align: Align, width: int, fill: str = " ") -> str:
    buffer = AlignedBuffer()
    buffer.write_aligned(text, align, width, fill)
    return buffer.getvalue()


class TestWrite:
    """Test raw writes."""

    def test_write_appends(self) -> None:
        """Test raw writes accumulate in order."""
        buffer = AlignedBuffer()
        buffer.write("ab")
        buffer.write("")
        buffer.write("cd")
        assert buffer.getvalue() == "abcd"
        assert len(buffer) == 4

    def test_empty_buffer(self) -> None:
        """Test a fresh buffer is empty."""
        buffer = AlignedBuffer()
        assert buffer.getvalue() == ""
        assert len(buffer) == 0


class TestWriteAligned:
    """Test padded writes."""

    def test_right(self) -> None:
        """Test right alignment pads before."""
        assert aligned("42", Align.RIGHT, 5) == "   42"

    def test_left(self) -> None:
        """Test left alignment pads after."""
        assert aligned("42", Align.LEFT, 5, "*") == "42***"

    def test_center_even_padding(self) -> None:
        """Test centering with an even amount of padding."""
        assert aligned("ab", Align.CENTER, 6) == "  ab  "

    def test_center_odd_padding_goes_right(self) -> None:
        """Test the extra padding character lands on the right."""
        assert aligned("ab", Align.CENTER, 5, "-") == "-ab--"

    def test_pad_after_sign_negative(self) -> None:
        """Test padding goes between the sign and the digits."""
        assert aligned("-42", Align.PAD_AFTER_SIGN, 6, "0") == "-00042"

    def test_pad_after_sign_plus(self) -> None:
        """Test a leading '+' stays in front."""
        assert aligned("+7", Align.PAD_AFTER_SIGN, 4, "0") == "+007"

    def test_pad_after_sign_unsigned(self) -> None:
        """Test unsigned text is right-aligned."""
        assert aligned("42", Align.PAD_AFTER_SIGN, 4, "0") == "0042"

    def test_pad_after_sign_empty_text(self) -> None:
        """Test empty text is padded without error."""
        assert aligned("", Align.PAD_AFTER_SIGN, 2, "0") == "00"

    @pytest.mark.parametrize(
        "align", [Align.LEFT, Align.RIGHT, Align.CENTER, Align.PAD_AFTER_SIGN]
    )
    def test_never_truncates(self, align: Align) -> None:
        """Test width is a minimum, not a maximum."""
        assert aligned("abcdef", align, 3) == "abcdef"

    def test_no_alignment_writes_verbatim(self) -> None:
        """Test Align.NONE ignores the width."""
        assert aligned("ab", Align.NONE, 10) == "ab"

    def test_default_fill_is_space(self) -> None:
        """Test the default fill character."""
        buffer = AlignedBuffer()
        buffer.write_aligned("x", Align.RIGHT, 3)
        assert buffer.getvalue() == "  x"
