"""Normalize persisted placeholder containers to the current shape.

Rows in the store may hold any historical shape of ``manual_fields``. Each
read runs the cascade below; the migrated shape is never written back, so
the store can keep mixed shapes indefinitely.

A new historical shape is added as one more step in ``MIGRATION_STEPS``.
Existing steps are not modified.
"""

import json
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Tuple

from leadreach.exceptions import MigrationFallback
from leadreach.placeholders.classifier import is_auto_placeholder
from leadreach.schemas.email_template import CustomPlaceholder, EmailTemplateRead, ManualFields
from leadreach.utils.logger import logger

# Fixed sender fields of the first editor generation, in display order.
LEGACY_FIELD_KEYS = (
    "absender_vorname",
    "absender_name",
    "absender_telefon",
    "absender_email",
    "weitere_eigene",
)

ICON_KEY = "icon"
PLACEHOLDERS_KEY = "custom_placeholders"

_SCALARS = (str, int, float, bool)


def _icon_of(raw: Mapping) -> Optional[str]:
    icon = raw.get(ICON_KEY)
    return icon if isinstance(icon, str) else None


def _usable_name(name: Any) -> bool:
    return (
        isinstance(name, str)
        and bool(name)
        and "}" not in name
        and not is_auto_placeholder(name)
    )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _from_current(raw: Any) -> Optional[ManualFields]:
    """Current shape: ``{"custom_placeholders": [{name, value}, ...], "icon"?}``."""
    if not isinstance(raw, Mapping) or not isinstance(raw.get(PLACEHOLDERS_KEY), list):
        return None

    placeholders: List[CustomPlaceholder] = []
    seen = set()
    for entry in raw[PLACEHOLDERS_KEY]:
        if not isinstance(entry, Mapping):
            continue
        name = entry.get("name")
        if not _usable_name(name) or name in seen:
            logger.debug(f"Dropping unusable placeholder entry {entry!r}")
            continue
        value = entry.get("value")
        if value is not None and not isinstance(value, _SCALARS):
            value = None
        seen.add(name)
        placeholders.append(CustomPlaceholder(name=name, value=_as_text(value)))

    return ManualFields(custom_placeholders=placeholders, icon=_icon_of(raw))


def _from_legacy_fixed_fields(raw: Any) -> Optional[ManualFields]:
    """Legacy shape: flat string attributes such as ``{"absender_name": "Müller"}``."""
    if not isinstance(raw, Mapping):
        return None

    attributes = [
        (key, value)
        for key, value in raw.items()
        if key not in (ICON_KEY, PLACEHOLDERS_KEY)
        and (value is None or isinstance(value, _SCALARS))
        and _usable_name(key)
    ]
    if not attributes:
        icon = _icon_of(raw)
        return ManualFields(icon=icon) if icon is not None else None

    present = dict(attributes)
    ordered = [key for key in LEGACY_FIELD_KEYS if key in present]
    ordered += [key for key, _ in attributes if key not in LEGACY_FIELD_KEYS]

    placeholders = [
        CustomPlaceholder(name=key, value=_as_text(present[key])) for key in ordered
    ]
    return ManualFields(custom_placeholders=placeholders, icon=_icon_of(raw))


def _from_json_string(raw: Any) -> Optional[ManualFields]:
    """The container was stored JSON-encoded in a text column."""
    if not isinstance(raw, str):
        return None
    try:
        decoded = json.loads(raw)
    except ValueError:
        return None
    if isinstance(decoded, str):
        return None
    return _run_cascade(decoded, MIGRATION_STEPS[:-1])


MigrationStep = Tuple[str, Callable[[Any], Optional[ManualFields]]]

# Detection order matters: first match wins.
MIGRATION_STEPS: Tuple[MigrationStep, ...] = (
    ("current", _from_current),
    ("legacy_fixed_fields", _from_legacy_fixed_fields),
    ("json_string", _from_json_string),
)


def _run_cascade(raw: Any, steps) -> Optional[ManualFields]:
    for shape, step in steps:
        migrated = step(raw)
        if migrated is not None:
            if shape != "current":
                logger.debug(f"Migrated manual_fields from '{shape}' shape")
            return migrated
    return None


def migrate_manual_fields(raw: Any) -> ManualFields:
    """
    Normalize a raw ``manual_fields`` value into the current shape.

    Total over arbitrary input: missing, null or unrecognized values yield an
    empty inventory instead of an error.
    """
    migrated = _run_cascade(raw, MIGRATION_STEPS)
    if migrated is None:
        if raw is not None:
            logger.debug(f"Unrecognized manual_fields shape: {MigrationFallback(raw)!r}")
        return ManualFields()
    return migrated


def migrate_record(raw_record: Mapping) -> EmailTemplateRead:
    """Build the in-memory projection of a persisted template row."""
    subject = raw_record.get("subject")
    return EmailTemplateRead(
        id=raw_record["id"],
        name=_as_text(raw_record.get("name")),
        subject=subject if isinstance(subject, str) else None,
        body_template=_as_text(raw_record.get("body_template")),
        manual_fields=migrate_manual_fields(raw_record.get("manual_fields")),
        created_at=raw_record.get("created_at"),
        updated_at=raw_record.get("updated_at"),
    )
