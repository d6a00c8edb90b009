"""Render a small report with positional, keyed and record templates."""

from pydantic import BaseModel

import pyfmt
from pyfmt import Template


class Holding(BaseModel):
    """One line of a portfolio."""

    symbol: str
    shares: int
    price: float
    change: float


def main():
    """Print a formatted portfolio table."""
    holdings = [
        Holding(symbol="ACME", shares=120, price=31.5, change=0.0425),
        Holding(symbol="INITECH", shares=8, price=1204.25, change=-0.013),
        Holding(symbol="HOOLI", shares=45, price=88.0, change=0.0),
    ]

    header = "{:<8} {:>6} {:>10} {:>8}"
    print(pyfmt.format(header, "Symbol", "Qty", "Price", "Change"))

    row = Template("{symbol:<8} {shares:>6d} {price:>10.2f} {change:>+8.1%}")
    for holding in holdings:
        print(row.format_record(holding))

    total = sum(h.shares * h.price for h in holdings)
    values = {"label": "Total", "total": total}
    print(pyfmt.format_map("{label:.<26}{total:>10.2f}", values))
    print(pyfmt.format("flags: {:#010b} {:#06x}", 0b1011, 255))


if __name__ == "__main__":
    main()
