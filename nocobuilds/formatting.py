"""Display formatting shared by entities and the comparison matrix."""

from decimal import ROUND_HALF_EVEN, Decimal

_COMPACT_UNITS = (
    (1_000, "K"),
    (1_000_000, "M"),
    (1_000_000_000, "B"),
)

_TENTH = Decimal("0.1")


def _scaled(magnitude: int, threshold: int) -> Decimal:
    return (Decimal(magnitude) / threshold).quantize(_TENTH, rounding=ROUND_HALF_EVEN)


def compact_number(value: int) -> str:
    """Format an integer in compact notation (320000 -> "320K", 1200000 -> "1.2M").

    At most one decimal place is kept and a trailing ".0" is dropped. A value
    that rounds up to 1000 of one unit moves to the next (999999 -> "1M").
    """
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    unit = None
    for index, (threshold, _) in enumerate(_COMPACT_UNITS):
        if magnitude < threshold:
            break
        unit = index
    if unit is None:
        return f"{sign}{magnitude}"

    scaled = _scaled(magnitude, _COMPACT_UNITS[unit][0])
    if scaled >= 1000 and unit + 1 < len(_COMPACT_UNITS):
        unit += 1
        scaled = _scaled(magnitude, _COMPACT_UNITS[unit][0])
    text = f"{scaled:.1f}".rstrip("0").rstrip(".")
    return f"{sign}{text}{_COMPACT_UNITS[unit][1]}"


def compact_currency(value: int) -> str:
    return f"${compact_number(value)}"


def grouped_number(value: int) -> str:
    """Format with thousands separators (1200 -> "1,200")."""
    return f"{value:,}"


def format_rating(rating: float) -> str:
    """One decimal place, e.g. "4.2"."""
    return f"{rating:.1f}"


def format_review_count(count: int) -> str:
    if count >= 1000:
        return f"{count // 1000}k+ reviews"
    return f"{count} reviews"
