import math
from decimal import ROUND_HALF_UP, Decimal

UNITS = ["B", "KB", "MB", "GB", "TB"]


def _round(value: float, places: int) -> str:
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_file_size(num_bytes: object) -> str:
    """Human readable size, e.g. ``1536 -> "1.5 KB"``. Invalid or non-positive input gives ``"0 B"``."""
    if isinstance(num_bytes, bool) or not isinstance(num_bytes, int | float):
        return "0 B"
    if not math.isfinite(num_bytes) or num_bytes <= 0:
        return "0 B"

    value = float(num_bytes)
    index = 0
    while value >= 1024 and index < len(UNITS) - 1:
        value /= 1024
        index += 1

    places = 0 if value >= 10 or index == 0 else 1
    return f"{_round(value, places)} {UNITS[index]}"
