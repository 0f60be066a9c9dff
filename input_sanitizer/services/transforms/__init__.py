"""
Built-in transform catalog.
Seeded into every TransformRegistry created with seed=True.
"""
from typing import Dict

from input_sanitizer.services.transforms.base import Transform
from input_sanitizer.services.transforms.casts import to_bool, to_float, to_int, to_string
from input_sanitizer.services.transforms.formatting import format_date, number_format, round_number
from input_sanitizer.services.transforms.sequences import (
    compact,
    default,
    join,
    nullify,
    split,
    unique,
)
from input_sanitizer.services.transforms.strings import (
    alpha,
    alphanumeric,
    capitalize,
    digits,
    escape,
    lcfirst,
    limit,
    lower,
    ltrim,
    mask,
    replace,
    rtrim,
    slug,
    squish,
    strip_tags,
    title,
    trim,
    ucfirst,
    ucwords,
    upper,
)

BUILTIN_TRANSFORMS: Dict[str, Transform] = {
    # strings
    "trim": trim,
    "ltrim": ltrim,
    "rtrim": rtrim,
    "squish": squish,
    "upper": upper,
    "lower": lower,
    "ucfirst": ucfirst,
    "lcfirst": lcfirst,
    "ucwords": ucwords,
    "capitalize": capitalize,
    "title": title,
    "slug": slug,
    "strip_tags": strip_tags,
    "escape": escape,
    "digits": digits,
    "alpha": alpha,
    "alphanumeric": alphanumeric,
    "replace": replace,
    "limit": limit,
    "mask": mask,
    # casts
    "int": to_int,
    "float": to_float,
    "bool": to_bool,
    "string": to_string,
    # formatting
    "number_format": number_format,
    "round": round_number,
    "date": format_date,
    # coalescing and sequences
    "nullify": nullify,
    "default": default,
    "compact": compact,
    "unique": unique,
    "split": split,
    "join": join,
}

__all__ = [
    "BUILTIN_TRANSFORMS",
    "Transform",
]
