"""Template placeholder engine.

Tokens look like ``{{name}}``. Names in the auto registry are filled from a
lead record at render time; every other name is a custom placeholder whose
value is stored on the template.
"""

from leadreach.placeholders.grammar import (
    AUTO_PLACEHOLDERS,
    AutoPlaceholder,
    Token,
    format_token,
    iter_tokens,
)
from leadreach.placeholders.extractor import extract_placeholders
from leadreach.placeholders.classifier import (
    auto_placeholder_for,
    classify,
    is_auto_placeholder,
)
from leadreach.placeholders.reconciler import (
    add_placeholder,
    check_inventory,
    normalize_name,
    remove_placeholder,
    sync_with_text,
    update_placeholder_value,
)
from leadreach.placeholders.migrator import migrate_manual_fields, migrate_record
from leadreach.placeholders.renderer import render, render_text

__all__ = [
    "AUTO_PLACEHOLDERS",
    "AutoPlaceholder",
    "Token",
    "format_token",
    "iter_tokens",
    "extract_placeholders",
    "auto_placeholder_for",
    "classify",
    "is_auto_placeholder",
    "add_placeholder",
    "check_inventory",
    "normalize_name",
    "remove_placeholder",
    "sync_with_text",
    "update_placeholder_value",
    "migrate_manual_fields",
    "migrate_record",
    "render",
    "render_text",
]
