"""
Type casts. Element-wise over sequences; never raise.
"""
from decimal import Decimal
from typing import Any, Sequence

from input_sanitizer.services.transforms.base import elementwise, to_decimal

TRUE_STRINGS = frozenset({"1", "true", "on", "yes", "y"})
FALSE_STRINGS = frozenset({"0", "false", "off", "no", "n", ""})


@elementwise
def to_int(value: Any, args: Sequence[str]) -> int:
    """
    Cast to int. Numeric strings are truncated towards zero ("12.7" -> 12),
    booleans become 0/1, anything non-numeric or beyond +-1e4000
    becomes 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    number = to_decimal(value)
    if number is None:
        return 0
    return int(number)


@elementwise
def to_float(value: Any, args: Sequence[str]) -> float:
    """Cast to float; non-numeric and out-of-range values become 0.0."""
    if isinstance(value, bool):
        return float(value)
    number = to_decimal(value)
    if number is None:
        return 0.0
    return float(number)


@elementwise
def to_bool(value: Any, args: Sequence[str]) -> bool:
    """
    Cast to bool.

    "1", "true", "on", "yes" are True and "0", "false", "off", "no", "" are
    False (case-insensitive, trimmed). Any other string is True. Non-strings
    follow Python truthiness.
    """
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
        return True
    return bool(value)


@elementwise
def to_string(value: Any, args: Sequence[str]) -> str:
    """
    Cast to str; None becomes "" and booleans become "1"/"0". An int too
    long for the interpreter's digit limit is returned unchanged.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    try:
        return str(value)
    except ValueError:
        return value
