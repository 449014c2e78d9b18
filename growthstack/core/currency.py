"""Display helpers for rupee amounts (en-IN conventions)."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

from growthstack.models import CalculationResult

RUPEE = "₹"

# (threshold, suffix), largest first
_COMPACT_UNITS = (
    (Decimal(10_000_000), "Cr"),
    (Decimal(100_000), "L"),
    (Decimal(1_000), "K"),
)


def _quantize(value: Decimal, places: str) -> Decimal:
    return value.quantize(Decimal(places), rounding=ROUND_HALF_UP)


def group_indian(digits: str) -> str:
    """Insert separators the Indian way: last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: float) -> str:
    """Format as whole rupees, e.g. 1234567.8 -> '₹12,34,568'."""
    if not math.isfinite(amount):
        return f"{RUPEE}{amount}"
    rounded = _quantize(Decimal(str(amount)), "1")
    sign = "-" if rounded < 0 else ""
    return f"{sign}{RUPEE}{group_indian(str(abs(int(rounded))))}"


def format_compact_currency(amount: float) -> str:
    """Short form with at most one decimal, e.g. 2500000 -> '₹25L'."""
    if not math.isfinite(amount):
        return f"{RUPEE}{amount}"
    value = Decimal(str(amount))
    sign = "-" if value < 0 else ""
    magnitude = abs(value)

    scaled, suffix = _quantize(magnitude, "0.1"), ""
    for index, (threshold, unit) in enumerate(_COMPACT_UNITS):
        if magnitude < threshold:
            continue
        scaled, suffix = _quantize(magnitude / threshold, "0.1"), unit
        # 99,99,999 rounds to 100L; show it as 1Cr instead
        if index > 0:
            bigger, bigger_unit = _COMPACT_UNITS[index - 1]
            if scaled * threshold >= bigger:
                scaled, suffix = _quantize(magnitude / bigger, "0.1"), bigger_unit
        break
    else:
        if scaled >= _COMPACT_UNITS[-1][0]:
            scaled, suffix = _quantize(magnitude / _COMPACT_UNITS[-1][0], "0.1"), _COMPACT_UNITS[-1][1]

    text = format(scaled.normalize(), "f")
    if sign and scaled == 0:
        sign = ""
    return f"{sign}{RUPEE}{text}{suffix}"


def summary_display(result: CalculationResult) -> Dict[str, str]:
    """Rupee strings for the headline figures of a projection."""
    return {
        "totalInvested": format_currency(result.totalInvested),
        "totalWealth": format_currency(result.totalWealth),
        "totalRealWealth": format_currency(result.totalRealWealth),
        "totalGain": format_currency(result.totalGain),
        "totalWealthCompact": format_compact_currency(result.totalWealth),
    }


__all__ = ["format_compact_currency", "format_currency", "group_indian", "summary_display"]
