"""Append-only output buffer with aligned writes."""

from pyfmt.engine.enums import Align

DEFAULT_FILL = " "


class AlignedBuffer:
    """Accumulate rendered text, padding fields to a minimum width."""

    def __init__(self) -> None:
        """Initialize an empty buffer."""
        self._parts: list[str] = []
        self._length = 0

    def __len__(self) -> int:
        """Return the number of characters written so far."""
        return self._length

    def write(self, text: str) -> None:
        """Append text verbatim."""
        if text:
            self._parts.append(text)
            self._length += len(text)

    def write_aligned(
        self,
        text: str,
        align: Align,
        width: int,
        fill: str = DEFAULT_FILL,
    ) -> None:
        """Append text padded to at least ``width`` characters.

        Width is a minimum only: text that is already long enough, or has no
        alignment, is written unchanged and never truncated.

        Args:
            text: Text to write
            align: Where the padding goes
            width: Minimum number of characters to produce
            fill: Single padding character

        """
        padding = width - len(text)
        if align is Align.NONE or padding <= 0:
            self.write(text)
            return

        match align:
            case Align.RIGHT:
                self.write(fill * padding)
                self.write(text)
            case Align.LEFT:
                self.write(text)
                self.write(fill * padding)
            case Align.CENTER:
                before = padding // 2
                self.write(fill * before)
                self.write(text)
                self.write(fill * (padding - before))
            case Align.PAD_AFTER_SIGN:
                if text[:1] in ("-", "+"):
                    self.write(text[0])
                    self.write_aligned(text[1:], Align.RIGHT, width - 1, fill)
                else:
                    self.write_aligned(text, Align.RIGHT, width, fill)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)
