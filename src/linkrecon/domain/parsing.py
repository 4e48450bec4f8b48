"""Value parsing shared by the normalizer, the merger and the analyzer.

Every boolean, speed, LAG-mode and name-list interpretation goes through this
module so that input rows and fetched data can never disagree on semantics.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

_TRUE_VALUES = frozenset({"true", "yes", "1", "y"})

_LAG_MODE_ALIASES = {
    "yes": "lacp_active",
    "y": "lacp_active",
    "true": "lacp_active",
    "1": "lacp_active",
    "lacp": "lacp_active",
    "lacp_active": "lacp_active",
    "lacp_passive": "lacp_passive",
    "static": "static",
    "no": "none",
    "n": "none",
    "false": "none",
    "0": "none",
    "none": "none",
}

_SPEED_PATTERN = re.compile(r"^(?P<amount>\d+(?:\.\d+)?)\s*(?P<unit>[a-z]*)$")
_GIGABIT_UNITS = frozenset({"", "g", "gb", "gbps", "gbit", "gbe", "ge", "gig"})
_MEGABIT_UNITS = frozenset({"m", "mb", "mbps", "mbit"})

NAME_LIST_SEPARATOR = ","


def clean_text(value: object) -> str | None:
    """Trim ``value`` and collapse blanks to ``None``."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_bool(value: object) -> bool:
    """Interpret spreadsheet and API truthiness.

    Accepts ``true/false``, ``yes/no``, ``1/0`` and ``y/n`` case-insensitively.
    Anything else, including ``None``, is ``False``.
    """

    if isinstance(value, bool):
        return value
    text = clean_text(value)
    if text is None:
        return False
    return text.lower() in _TRUE_VALUES


def parse_lag_mode(value: object) -> str | None:
    text = clean_text(value)
    if text is None:
        return None
    return _LAG_MODE_ALIASES.get(text.lower(), text)


def normalize_speed(value: object) -> str | None:
    """Canonicalize a link speed: ``25GB``, ``25 Gbps`` and ``25g`` all become ``25g``.

    Bare numbers are gigabits. Megabit values that are whole gigabits are
    expressed in gigabits (``1000 Mbps`` -> ``1g``). Unrecognized text is
    returned lower-cased so that it still compares sensibly.
    """

    text = clean_text(value)
    if text is None:
        return None
    lowered = text.lower()
    match = _SPEED_PATTERN.match(lowered)
    if match is None:
        return lowered

    amount = float(match["amount"])
    unit = match["unit"]
    if unit in _MEGABIT_UNITS:
        if amount % 1000 == 0:
            return f"{_format_amount(amount / 1000)}g"
        return f"{_format_amount(amount)}m"
    if unit in _GIGABIT_UNITS:
        return f"{_format_amount(amount)}g"
    return lowered


def _format_amount(amount: float) -> str:
    if amount.is_integer():
        return str(int(amount))
    return f"{amount:g}"


def split_names(value: object) -> list[str]:
    """Split a comma-separated name list, trimming and dropping empties."""

    text = clean_text(value)
    if text is None:
        return []
    return [name.strip() for name in text.split(NAME_LIST_SEPARATOR) if name.strip()]


def merge_name_lists(values: Iterable[object]) -> str | None:
    """Union name lists in first-seen order, deduplicating case-sensitively."""

    seen: dict[str, None] = {}
    for value in values:
        for name in split_names(value):
            seen.setdefault(name, None)
    if not seen:
        return None
    return NAME_LIST_SEPARATOR.join(seen)


def name_set(value: object) -> frozenset[str]:
    return frozenset(split_names(value))
