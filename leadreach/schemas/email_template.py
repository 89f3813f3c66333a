"""Email template schemas for the placeholder engine and the store."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from leadreach.models.enums import TemplateChangeAction


class CustomPlaceholder(BaseModel):
    """A user-defined placeholder and the value entered for it."""

    name: str
    value: str = ""

    model_config = {"frozen": True}

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v):
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)


class ManualFields(BaseModel):
    """Current shape of the persisted manual_fields column."""

    custom_placeholders: List[CustomPlaceholder] = Field(default_factory=list)
    icon: Optional[str] = None

    def to_storage(self) -> dict:
        """Serialize for the JSON column, omitting an unset icon."""
        return self.model_dump(exclude_none=True)


class EmailTemplateCreate(BaseModel):
    """Schema for creating or fully replacing a template."""

    name: str
    subject: Optional[str] = None
    body_template: str
    manual_fields: ManualFields = Field(default_factory=ManualFields)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("subject", mode="before")
    @classmethod
    def blank_subject_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class EmailTemplateRead(BaseModel):
    """Migrated, in-memory projection of a stored template."""

    id: int
    name: str
    subject: Optional[str] = None
    body_template: str
    manual_fields: ManualFields
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def placeholders(self) -> List[CustomPlaceholder]:
        return self.manual_fields.custom_placeholders


class RenderedEmail(BaseModel):
    """Final subject and body handed to the delivery collaborator."""

    subject: str
    body: str


class TemplateChange(BaseModel):
    """Notification emitted by the template store after a committed write."""

    action: TemplateChangeAction
    template_id: int
