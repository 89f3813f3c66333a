"""Enum types for models and the placeholder engine."""

import enum


class PlaceholderKind(str, enum.Enum):
    """Where a placeholder's value comes from at render time."""

    AUTO = "auto"  # Resolved from the lead record
    CUSTOM = "custom"  # Entered by the template author


class TemplateChangeAction(str, enum.Enum):
    """Kind of change the template store notifies subscribers about."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
