"""Display formatting shared by the analytics and the CLI."""

import math
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Union


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def format_fixed(value: float, digits: int = 2) -> str:
    """Format with a fixed number of decimals, rounding halves up.

    Rounds the exact binary value of ``value``, so 1.005 (stored as
    1.00499...) gives "1.00" while 0.125 gives "0.13".
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _group_indian(digits: str) -> str:
    # 1234567 -> 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(value: Union[float, None], symbol: str = "₹") -> str:
    """Format an amount with sign, symbol and digit grouping.

    Rupee amounts use Indian lakh/crore grouping, everything else groups by
    thousands.

    Args:
        value: Amount to format. None formats as zero.
        symbol: Currency symbol.

    Returns:
        Formatted string such as "-₹1,23,456.70" or "$1,234.50".
    """
    if value is None:
        return f"{symbol}0.00"

    sign = "-" if value < 0 else ""
    text = format_fixed(abs(value), 2)
    whole, frac = text.split(".")
    if symbol == "₹":
        whole = _group_indian(whole)
    else:
        whole = f"{int(whole):,}"
    return f"{sign}{symbol}{whole}.{frac}"


def format_date(value: Union[date, datetime, None]) -> str:
    """Format a date as '05 Jan 2025', or 'N/A' when missing."""
    if value is None:
        return "N/A"
    return value.strftime("%d %b %Y")
