"""Database models for LeadReach."""

# Import all models
from leadreach.models.base import BaseModel
from leadreach.models.enums import PlaceholderKind, TemplateChangeAction
from leadreach.models.email_template import EmailTemplate
from leadreach.models.lead import Lead

# Export all models and enums
__all__ = [
    # Base
    "BaseModel",
    # Enums
    "PlaceholderKind",
    "TemplateChangeAction",
    # Models
    "EmailTemplate",
    "Lead",
]
