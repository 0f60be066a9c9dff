"""
Whole-value transforms: null/empty coalescing and sequence shaping.
These look at the value as a whole and are not applied element-wise.
"""
from typing import Any, List, Sequence

from input_sanitizer.services.transforms.base import arg


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def nullify(value: Any, args: Sequence[str]) -> Any:
    """Blank strings and empty lists/tuples/dicts become None."""
    if isinstance(value, str) and not value.strip():
        return None
    if isinstance(value, (list, tuple, dict)) and not value:
        return None
    return value


def default(value: Any, args: Sequence[str]) -> Any:
    """
    Fill in a missing value.

    Args:
        value: replacement used when the input is None or ""
    """
    if value is None or value == "":
        return arg(args, 0, "")
    return value


def compact(value: Any, args: Sequence[str]) -> Any:
    """Drop None and blank-string items from a list/tuple or from dict values."""
    if isinstance(value, list):
        return [item for item in value if not _is_blank(item)]
    if isinstance(value, tuple):
        return tuple(item for item in value if not _is_blank(item))
    if isinstance(value, dict):
        return {key: item for key, item in value.items() if not _is_blank(item)}
    return value


def unique(value: Any, args: Sequence[str]) -> Any:
    """De-duplicate a list/tuple keeping the first occurrence of each item."""
    if not isinstance(value, (list, tuple)):
        return value
    seen: List[Any] = []
    hashed = set()
    result = []
    for item in value:
        try:
            if item in hashed:
                continue
            hashed.add(item)
        except TypeError:
            if item in seen:
                continue
            seen.append(item)
        result.append(item)
    return tuple(result) if isinstance(value, tuple) else result


def split(value: Any, args: Sequence[str]) -> Any:
    """
    Split a string into a list of trimmed, non-empty parts.

    Args:
        delimiter (optional): defaults to ","; since pipeline arguments are
            comma-separated, a comma can only be used as the default
    """
    if not isinstance(value, str):
        return value
    delimiter = arg(args, 0, ",")
    return [part.strip() for part in value.split(delimiter) if part.strip()]


def join(value: Any, args: Sequence[str]) -> Any:
    """
    Join a list/tuple into one string; None items become "".

    Args:
        glue (optional): defaults to ","
    """
    if not isinstance(value, (list, tuple)):
        return value
    glue = args[0] if args else ","
    return glue.join("" if item is None else str(item) for item in value)
