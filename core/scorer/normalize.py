#!/usr/bin/env python3
"""
Normalization helpers for loosely-typed profile fields.

Profile rows arrive with lists stored as JSON arrays, comma-separated
strings or real lists, and numbers stored as numerics or free text
("5+ years"). These helpers turn them into clean Python values and
never raise.
"""

import json
import re
from decimal import Decimal
from typing import Any, List

_LEADING_NUMBER = re.compile(r'\d+(?:\.\d+)?')


def parse_tag_list(value: Any) -> List[str]:
    """Split a tag descriptor into a list of non-empty, stripped tags.

    Accepts None, a list/tuple, a JSON-encoded array string or a
    comma-separated string.
    """
    if value is None:
        return []

    if isinstance(value, (list, tuple, set)):
        items = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return []
        items = None
        if text.startswith('['):
            try:
                decoded = json.loads(text)
            except ValueError:
                decoded = None
            if isinstance(decoded, list):
                items = decoded
        if items is None:
            items = text.split(',')
    else:
        items = [value]

    tags = []
    for item in items:
        if item is None:
            continue
        tag = str(item).strip()
        if tag:
            tags.append(tag)
    return tags


def to_number(value: Any, default: float = 0.0) -> float:
    """Convert a numeric-ish value to a non-negative float.

    Strings use their first number ("5+ years" -> 5.0). Anything that
    cannot be read falls back to ``default``.
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        found = _LEADING_NUMBER.search(value)
        if not found:
            return default
        number = float(found.group(0))
    else:
        try:
            number = float(value)
        except (ValueError, TypeError):
            return default

    if number != number or number < 0:  # NaN or negative
        return default
    return number


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))
