"""
Shared helpers for built-in transforms.

A transform is a plain callable ``(value, args) -> value``. ``args`` is the
ordered list of raw argument strings parsed from the pipeline; transforms
convert them themselves and never raise on malformed input.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from functools import wraps
from typing import Any, Callable, Optional, Sequence

Transform = Callable[[Any, Sequence[str]], Any]

# Largest decimal exponent the numeric transforms accept. Keeps integers
# under the interpreter's default 4300-digit int <-> str limit.
MAX_EXPONENT = 4000

# Bound on rounding precision arguments
MAX_PLACES = 100


def arg(args: Sequence[str], index: int, default: Optional[str] = None) -> Optional[str]:
    """Return the positional argument at ``index`` or ``default`` when absent/blank."""
    if index < len(args) and args[index] != "":
        return args[index]
    return default


def int_arg(args: Sequence[str], index: int, default: Optional[int] = None) -> Optional[int]:
    """Positional argument coerced to int, ``default`` when absent or not an integer."""
    raw = arg(args, index)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def elementwise(fn: Transform) -> Transform:
    """
    Apply ``fn`` to every element of a list/tuple (recursively) and to every
    value of a dict. Scalars go straight to ``fn``.
    """
    @wraps(fn)
    def wrapper(value: Any, args: Sequence[str] = ()) -> Any:
        if isinstance(value, list):
            return [wrapper(item, args) for item in value]
        if isinstance(value, tuple):
            return tuple(wrapper(item, args) for item in value)
        if isinstance(value, dict):
            return {key: wrapper(item, args) for key, item in value.items()}
        return fn(value, args)

    return wrapper


def string_transform(fn: Callable[[str, Sequence[str]], Any]) -> Transform:
    """Element-wise transform that only touches ``str`` values; others pass through."""
    @elementwise
    @wraps(fn)
    def wrapper(value: Any, args: Sequence[str] = ()) -> Any:
        if not isinstance(value, str):
            return value
        return fn(value, args)

    return wrapper


def _in_range(number: Decimal) -> bool:
    return number.is_finite() and (number.is_zero() or abs(number.adjusted()) <= MAX_EXPONENT)


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Best-effort numeric coercion used by the numeric transforms.
    Booleans are not numbers here; returns None when the value is not numeric.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Decimal):
        return value if _in_range(value) else None
    if isinstance(value, (int, float)):
        try:
            value = repr(value) if isinstance(value, float) else str(value)
        except ValueError:
            return None
    if not isinstance(value, str):
        return None
    if "_" in value:
        return None
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return None
    return number if _in_range(number) else None


def round_half_up(number: Decimal, places: int) -> Decimal:
    """
    Round the way PHP does (half away from zero).

    ``places`` is clamped to +-MAX_PLACES. Precision is widened so numbers
    longer than the default 28-digit context keep every digit.
    """
    places = max(min(places, MAX_PLACES), -MAX_PLACES)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + places + 2)
        return number.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)

