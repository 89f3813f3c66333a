"""EmailTemplate model for outreach email templates."""

from sqlalchemy import Column, String, Text, JSON
from leadreach.models.base import BaseModel


class EmailTemplate(BaseModel):
    """
    EmailTemplate model as stored by the persistence store.

    The manual_fields column is stored as-is. Rows written by older versions
    of the editor may hold a flat set of sender attributes instead of the
    current {"custom_placeholders": [...]} shape; reads go through the schema
    migrator and never rewrite the column.

    Attributes:
        name: Template name shown in the template list
        subject: Optional subject line with {{placeholders}}
        body_template: Email body with {{placeholders}}
        manual_fields: Raw placeholder container (any historical shape)
    """

    __tablename__ = "email_templates"

    # Core fields
    name = Column(String(100), nullable=False, index=True)
    subject = Column(String(200), nullable=True)
    body_template = Column(Text, nullable=False)
    manual_fields = Column(JSON, nullable=True)

    def __repr__(self):
        """String representation of EmailTemplate."""
        return f"<EmailTemplate(id={self.id}, name='{self.name}')>"
