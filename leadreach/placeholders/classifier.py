"""Decide whether a placeholder name is auto or custom."""

from typing import Dict, Optional

from leadreach.models.enums import PlaceholderKind
from leadreach.placeholders.grammar import AUTO_PLACEHOLDERS, AutoPlaceholder

_REGISTRY_INDEX: Dict[str, AutoPlaceholder] = {
    name: entry for entry in AUTO_PLACEHOLDERS for name in entry.names
}


def auto_placeholder_for(name: str) -> Optional[AutoPlaceholder]:
    """Return the registry entry for ``name`` (canonical name or alias)."""
    return _REGISTRY_INDEX.get(name)


def is_auto_placeholder(name: str) -> bool:
    """Case-sensitive exact membership test against the auto registry."""
    return name in _REGISTRY_INDEX


def classify(name: str) -> PlaceholderKind:
    if is_auto_placeholder(name):
        return PlaceholderKind.AUTO
    return PlaceholderKind.CUSTOM
