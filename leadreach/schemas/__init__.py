"""Pydantic schemas for template records and rendering."""

from leadreach.schemas.email_template import (
    CustomPlaceholder,
    ManualFields,
    EmailTemplateCreate,
    EmailTemplateRead,
    RenderedEmail,
    TemplateChange,
)

__all__ = [
    "CustomPlaceholder",
    "ManualFields",
    "EmailTemplateCreate",
    "EmailTemplateRead",
    "RenderedEmail",
    "TemplateChange",
]
