"""
Numeric and date formatting transforms.

Format strings follow the PHP ``date()`` token set, the notation most form
front-ends already send (``m/d/Y``, ``Y-m-d H:i:s``).
"""
from datetime import date, datetime, timezone
from typing import Any, List, Optional, Sequence

from input_sanitizer.core.config import get_settings
from input_sanitizer.services.transforms.base import (
    MAX_PLACES,
    arg,
    elementwise,
    int_arg,
    round_half_up,
    to_decimal,
)

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# PHP token -> strptime directive, used when parsing input dates
_STRPTIME_DIRECTIVES = {
    "d": "%d",
    "j": "%d",
    "D": "%a",
    "l": "%A",
    "m": "%m",
    "n": "%m",
    "M": "%b",
    "F": "%B",
    "y": "%y",
    "Y": "%Y",
    "H": "%H",
    "G": "%H",
    "h": "%I",
    "g": "%I",
    "i": "%M",
    "s": "%S",
    "A": "%p",
    "a": "%p",
}


def _raw_arg(args: Sequence[str], index: int, default: str) -> str:
    """Like ``arg`` but an explicitly empty argument stays empty."""
    return args[index] if index < len(args) else default


@elementwise
def number_format(value: Any, args: Sequence[str]) -> Any:
    """
    Format a number with grouped thousands.

    Args:
        decimals (optional): digits after the decimal point, defaults to 0
        dec_point (optional): decimal separator, defaults to "."
        thousands_sep (optional): group separator, defaults to ","; an explicit
            empty argument disables grouping

    Non-numeric values, and numbers with an exponent beyond +-MAX_EXPONENT,
    are returned unchanged. ``decimals`` is capped at MAX_PLACES.
    """
    number = to_decimal(value)
    if number is None:
        return value
    decimals = min(max(int_arg(args, 0, 0), 0), MAX_PLACES)
    dec_point = _raw_arg(args, 1, ".")
    thousands_sep = _raw_arg(args, 2, ",")

    try:
        rounded = round_half_up(number, decimals)
    except ArithmeticError:
        return value

    text = f"{rounded.copy_abs():.{decimals}f}"
    integer_part, _, fraction = text.partition(".")
    groups: List[str] = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)

    result = thousands_sep.join(groups)
    if fraction:
        result = f"{result}{dec_point}{fraction}"
    if rounded < 0:
        result = f"-{result}"
    return result


@elementwise
def round_number(value: Any, args: Sequence[str]) -> Any:
    """
    Round half away from zero.

    Args:
        precision (optional): decimal places, negative rounds to tens/hundreds;
            defaults to 0

    Integers stay integers, other numeric input becomes float. Non-numeric
    and out-of-range values are returned unchanged.
    """
    number = to_decimal(value)
    if number is None:
        return value
    try:
        rounded = round_half_up(number, int_arg(args, 0, 0))
    except ArithmeticError:
        return value
    if isinstance(value, int):
        return int(rounded)
    return float(rounded)


def php_to_strptime(fmt: str) -> str:
    """Translate a PHP date format into a ``strptime`` pattern."""
    out: List[str] = []
    escaped = False
    for ch in fmt:
        if escaped:
            out.append("%%" if ch == "%" else ch)
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch in _STRPTIME_DIRECTIVES:
            out.append(_STRPTIME_DIRECTIVES[ch])
        elif ch == "%":
            out.append("%%")
        else:
            out.append(ch)
    return "".join(out)


def format_php(moment: datetime, fmt: str) -> str:
    """Render ``moment`` with a PHP date format. Unknown letters are literal."""
    hour12 = moment.hour % 12 or 12
    out: List[str] = []
    escaped = False
    for ch in fmt:
        if escaped:
            out.append(ch)
            escaped = False
            continue
        if ch == "\\":
            escaped = True
        elif ch == "d":
            out.append(f"{moment.day:02d}")
        elif ch == "j":
            out.append(str(moment.day))
        elif ch == "D":
            out.append(DAY_NAMES[moment.weekday()][:3])
        elif ch == "l":
            out.append(DAY_NAMES[moment.weekday()])
        elif ch == "N":
            out.append(str(moment.isoweekday()))
        elif ch == "w":
            out.append(str(moment.isoweekday() % 7))
        elif ch == "m":
            out.append(f"{moment.month:02d}")
        elif ch == "n":
            out.append(str(moment.month))
        elif ch == "M":
            out.append(MONTH_NAMES[moment.month - 1][:3])
        elif ch == "F":
            out.append(MONTH_NAMES[moment.month - 1])
        elif ch == "y":
            out.append(f"{moment.year % 100:02d}")
        elif ch == "Y":
            out.append(f"{moment.year:04d}")
        elif ch == "H":
            out.append(f"{moment.hour:02d}")
        elif ch == "G":
            out.append(str(moment.hour))
        elif ch == "h":
            out.append(f"{hour12:02d}")
        elif ch == "g":
            out.append(str(hour12))
        elif ch == "i":
            out.append(f"{moment.minute:02d}")
        elif ch == "s":
            out.append(f"{moment.second:02d}")
        elif ch == "A":
            out.append("AM" if moment.hour < 12 else "PM")
        elif ch == "a":
            out.append("am" if moment.hour < 12 else "pm")
        elif ch == "U":
            aware = moment if moment.tzinfo else moment.replace(tzinfo=timezone.utc)
            out.append(str(int(aware.timestamp())))
        else:
            out.append(ch)
    return "".join(out)


def parse_date(value: Any, input_format: Optional[str] = None) -> Optional[datetime]:
    """
    Best-effort conversion of ``value`` into a datetime.

    Accepts datetime/date objects, unix timestamps, and strings in
    ``input_format`` (PHP notation) or, when that is not given, ISO-8601 and
    then each of the configured ``date_input_formats``.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if input_format:
        candidates = [input_format]
    else:
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass
        candidates = get_settings().date_input_formats

    for fmt in candidates:
        try:
            return datetime.strptime(text, php_to_strptime(fmt))
        except ValueError:
            continue
    return None


@elementwise
def format_date(value: Any, args: Sequence[str]) -> Any:
    """
    Re-emit a date in another format.

    Args:
        format: PHP-style output format; without it the value is unchanged
        input_format (optional): PHP-style format the input is written in

    Unparseable values are returned unchanged.
    """
    output_format = arg(args, 0)
    if output_format is None:
        return value
    moment = parse_date(value, arg(args, 1))
    if moment is None:
        return value
    return format_php(moment, output_format)
