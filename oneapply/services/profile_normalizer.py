"""Total coercion of stored profile fields.

Profile documents are written by several clients over time, so any field can be
missing or carry an unexpected type. Every helper here is total: it returns a
fallback instead of raising. ``NormalizedProfile`` runs these once at the
boundary and the rest of the pipeline only sees canonical shapes.
"""
from __future__ import annotations

from typing import Any, Mapping


DEFAULT_EXPERIENCE = "entry"


def _skill_name(entry: Any) -> str | None:
    if isinstance(entry, str):
        name = entry
    elif isinstance(entry, Mapping):
        name = entry.get("name")
        if not isinstance(name, str):
            return None
    else:
        return None
    return name if name.strip() else None


def normalize_skills(value: Any) -> list[str]:
    """Coerce a skills field into a list of skill names.

    - list/tuple: string entries and ``{"name": ...}`` objects are kept in order,
      entries without a usable name are dropped.
    - string: comma-separated, each piece trimmed, empty pieces dropped.
    - anything else: empty list.
    """

    if isinstance(value, (list, tuple)):
        names: list[str] = []
        for entry in value:
            name = _skill_name(entry)
            if name is not None:
                names.append(name)
        return names
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return []


def string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]


def optional_text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def strict_bool(value: Any) -> bool:
    return value is True


def optional_number(value: Any) -> int | float | None:
    # bool is an int subclass; a stray True must not become a salary of 1.
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        s = value.strip().replace(",", "")
        if not s:
            return None
        try:
            return int(s)
        except ValueError:
            pass
        try:
            return float(s)
        except ValueError:
            return None
    return None


def experience_label(value: Any) -> str:
    if isinstance(value, str) and value.strip():
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return DEFAULT_EXPERIENCE
