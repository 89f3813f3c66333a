"""Keep a template's custom-placeholder inventory consistent.

Every function here is pure: it takes an inventory and returns a new tuple,
never touching the template's subject or body.

Text-driven sync only ever adds. A placeholder that disappears from the text
stays tracked with its value until it is removed explicitly.
"""

import re
from typing import Iterable, Optional, Tuple

from leadreach.exceptions import DuplicateNameError, ReservedNameError, ValidationError
from leadreach.placeholders.classifier import is_auto_placeholder
from leadreach.placeholders.extractor import extract_placeholders
from leadreach.schemas.email_template import CustomPlaceholder

Inventory = Tuple[CustomPlaceholder, ...]

_WHITESPACE = re.compile(r"\s+")


def normalize_name(raw: str) -> str:
    """Trim, lowercase and collapse internal whitespace to single underscores.

    >>> normalize_name("  Mein Name  ")
    'mein_name'
    """
    return _WHITESPACE.sub("_", raw.strip().lower())


def _names(inventory: Iterable[CustomPlaceholder]) -> set:
    return {p.name for p in inventory}


def add_placeholder(inventory: Iterable[CustomPlaceholder], raw_name: str) -> Inventory:
    """
    Append a new custom placeholder with an empty value.

    Args:
        inventory: Current custom placeholders
        raw_name: Name as typed by the user

    Returns:
        New inventory with the normalized name appended

    Raises:
        ValidationError: If the name is empty or contains "}"
        ReservedNameError: If the name belongs to the auto registry
        DuplicateNameError: If the name is already tracked (informational)
    """
    current = tuple(inventory)
    name = normalize_name(raw_name or "")

    if not name:
        raise ValidationError("Placeholder name must not be empty", field="name")
    if "}" in name:
        raise ValidationError("Placeholder name must not contain '}'", field="name")
    if is_auto_placeholder(name):
        raise ReservedNameError(name)
    if name in _names(current):
        raise DuplicateNameError(name)

    return current + (CustomPlaceholder(name=name, value=""),)


def remove_placeholder(inventory: Iterable[CustomPlaceholder], name: str) -> Inventory:
    """Drop the placeholder called ``name``; absent names are ignored."""
    return tuple(p for p in inventory if p.name != name)


def update_placeholder_value(
    inventory: Iterable[CustomPlaceholder], name: str, value: Optional[str]
) -> Inventory:
    """Set the value of an existing placeholder; no-op if ``name`` is absent."""
    return tuple(
        CustomPlaceholder(name=p.name, value=value) if p.name == name else p
        for p in inventory
    )


def sync_with_text(inventory: Iterable[CustomPlaceholder], *texts: Optional[str]) -> Inventory:
    """
    Track every non-auto token found in ``texts`` that is not tracked yet.

    Names found in text are taken verbatim. Tracked placeholders missing from
    the text are kept, values included.
    """
    current = tuple(inventory)
    known = _names(current)
    discovered = []

    for text in texts:
        for name in extract_placeholders(text):
            if name in known or is_auto_placeholder(name):
                continue
            known.add(name)
            discovered.append(CustomPlaceholder(name=name, value=""))

    if not discovered:
        return current
    return current + tuple(discovered)


def check_inventory(inventory: Iterable[CustomPlaceholder]) -> Inventory:
    """
    Verify an inventory before it is persisted.

    Names are checked as given: tokens discovered in text keep their
    spelling, so no normalization happens here.

    Raises:
        ValidationError: If a name is empty, contains "}" or occurs twice
        ReservedNameError: If a name belongs to the auto registry
    """
    current = tuple(inventory)
    seen = set()
    for placeholder in current:
        name = placeholder.name
        if not name or "}" in name:
            raise ValidationError(f"Invalid placeholder name '{name}'", field=name or "name")
        if is_auto_placeholder(name):
            raise ReservedNameError(name)
        if name in seen:
            raise ValidationError(f"Placeholder '{name}' is defined twice", field=name)
        seen.add(name)
    return current
