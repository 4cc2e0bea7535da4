import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence, Tuple

from .. import config

TWO_PLACES = Decimal('0.01')


def unit_table(use_decimal: bool) -> Tuple[int, Sequence[str]]:
    """Returns (base, suffixes) for the requested unit system."""
    if use_decimal:
        return config.SI_BASE, config.SI_SUFFIXES
    return config.KIBIBYTE_BASE, config.KIBIBYTE_SUFFIXES


def pretty_size(size: int, use_decimal: bool = False) -> str:
    """
    Human readable size, e.g. 1073741824 -> '1 GiB' (or '1.07 GB' decimal).
    """
    base, suffixes = unit_table(use_decimal)
    return scale(size, base, suffixes)


def scale(size: int, base: int, suffixes: Sequence[str]) -> str:
    """
    Scales a byte count into the largest tier where it is >= 1.

    The value is rounded half away from zero to 2 decimals and printed
    without trailing zeros ('1 GiB', '1.07 GB', '109.4 kB').
    Sizes beyond the last suffix stay on the last suffix.
    0 and 1 are spelled out since log(0) is undefined and "1 bytes" reads badly.
    """
    if size < 0:
        raise ValueError(f"Size must be non-negative, got {size}")
    if size == 0:
        return config.ZERO_BYTES
    if size == 1:
        return config.ONE_BYTE

    tier = _tier(size, base, len(suffixes) - 1)
    scaled = size / base ** tier
    return f"{_round_2(scaled)} {suffixes[tier]}"


def _tier(size: int, base: int, max_tier: int) -> int:
    tier = math.floor(math.log(size) / math.log(base))
    # Float log is off by one around exact powers (log(1e9)/log(1000) < 3)
    while base ** (tier + 1) <= size:
        tier += 1
    while tier > 0 and base ** tier > size:
        tier -= 1
    return min(tier, max_tier)


def _round_2(value: float) -> str:
    # repr() gives the shortest string that round-trips, so 1.005 is rounded
    # as written rather than as its binary approximation 1.00499999...
    rounded = Decimal(repr(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    text = format(rounded, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text
