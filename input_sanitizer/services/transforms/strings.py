"""
String shaping transforms.

All of these are element-wise over lists/tuples/dict values and leave
non-string scalars (None included) untouched.
"""
import html
import re
import unicodedata
from typing import Sequence

import bleach

from input_sanitizer.services.transforms.base import arg, string_transform

# Collapse any whitespace run
_WHITESPACE_REGEX = re.compile(r"\s+")

_NON_DIGIT_REGEX = re.compile(r"\D+")


@string_transform
def trim(value: str, args: Sequence[str]) -> str:
    """Strip both ends. Optional arg: the characters to strip instead of whitespace."""
    return value.strip(arg(args, 0))


@string_transform
def ltrim(value: str, args: Sequence[str]) -> str:
    return value.lstrip(arg(args, 0))


@string_transform
def rtrim(value: str, args: Sequence[str]) -> str:
    return value.rstrip(arg(args, 0))


@string_transform
def squish(value: str, args: Sequence[str]) -> str:
    """Trim and collapse internal whitespace runs to a single space."""
    return _WHITESPACE_REGEX.sub(" ", value.strip())


@string_transform
def upper(value: str, args: Sequence[str]) -> str:
    return value.upper()


@string_transform
def lower(value: str, args: Sequence[str]) -> str:
    return value.lower()


@string_transform
def ucfirst(value: str, args: Sequence[str]) -> str:
    """Uppercase the first character only; the rest is left as is."""
    return value[:1].upper() + value[1:]


@string_transform
def lcfirst(value: str, args: Sequence[str]) -> str:
    return value[:1].lower() + value[1:]


@string_transform
def ucwords(value: str, args: Sequence[str]) -> str:
    """Uppercase the first character of every whitespace-separated word."""
    return re.sub(r"(^|\s)(\S)", lambda m: m.group(1) + m.group(2).upper(), value)


@string_transform
def capitalize(value: str, args: Sequence[str]) -> str:
    return value.capitalize()


@string_transform
def title(value: str, args: Sequence[str]) -> str:
    return value.title()


@string_transform
def slug(value: str, args: Sequence[str]) -> str:
    """
    ASCII-folded, lowercased slug.

    Args:
        separator (optional): defaults to "-"
    """
    separator = arg(args, 0, "-")
    folded = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    parts = re.split(r"[^a-z0-9]+", folded.lower())
    return separator.join(part for part in parts if part)


@string_transform
def strip_tags(value: str, args: Sequence[str]) -> str:
    """
    Remove every HTML tag and comment, keeping the text content.
    The remaining text comes back HTML-safe (``&``, ``<``, ``>`` escaped).
    """
    return bleach.clean(value, tags=(), attributes={}, strip=True, strip_comments=True)


@string_transform
def escape(value: str, args: Sequence[str]) -> str:
    return html.escape(value, quote=True)


@string_transform
def digits(value: str, args: Sequence[str]) -> str:
    return _NON_DIGIT_REGEX.sub("", value)


@string_transform
def alpha(value: str, args: Sequence[str]) -> str:
    return "".join(ch for ch in value if ch.isalpha())


@string_transform
def alphanumeric(value: str, args: Sequence[str]) -> str:
    return "".join(ch for ch in value if ch.isalnum())


@string_transform
def replace(value: str, args: Sequence[str]) -> str:
    """
    Literal substring replacement.

    Args:
        search: text to look for; without it the value is unchanged
        replacement (optional): defaults to ""
    """
    search = arg(args, 0)
    if search is None:
        return value
    return value.replace(search, arg(args, 1, ""))


@string_transform
def limit(value: str, args: Sequence[str]) -> str:
    """
    Truncate to ``length`` characters, appending ``end`` when truncated.

    Args:
        length: maximum number of characters kept; missing/invalid -> unchanged
        end (optional): suffix appended after truncation, defaults to ""
    """
    raw_length = arg(args, 0)
    if raw_length is None:
        return value
    try:
        length = int(raw_length.strip())
    except ValueError:
        return value
    if length < 0 or len(value) <= length:
        return value
    return value[:length] + arg(args, 1, "")


@string_transform
def mask(value: str, args: Sequence[str]) -> str:
    """
    Replace a run of characters with a mask character.

    Args:
        char (optional): mask character, defaults to "*"; only the first
            character is used
        index (optional): start position, negative counts from the end;
            defaults to 0
        length (optional): number of characters to mask, defaults to the
            rest of the string

    Not idempotent when the mask character differs from what it covers.
    """
    char = arg(args, 0, "*")[:1]
    try:
        index = int((arg(args, 1, "0")).strip())
        raw_length = arg(args, 2)
        length = int(raw_length.strip()) if raw_length is not None else None
    except ValueError:
        return value

    size = len(value)
    start = index if index >= 0 else max(size + index, 0)
    if start >= size:
        return value
    end = size if length is None else min(start + max(length, 0), size)
    if end <= start:
        return value
    return value[:start] + char * (end - start) + value[end:]
