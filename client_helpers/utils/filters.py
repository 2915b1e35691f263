"""Query filter cleanup."""

from __future__ import annotations

from typing import Any, Mapping


def build_filters(filters: Mapping[str, Any]) -> dict[str, Any]:
    """Drop unset filter values and trim strings.

    Keys whose value is ``None`` or ``""`` are removed; remaining string
    values are stripped. A whitespace-only string is kept (as ``""``), since
    only the raw value is tested for emptiness.
    """
    return {
        key: value.strip() if isinstance(value, str) else value
        for key, value in filters.items()
        if value is not None and value != ""
    }
