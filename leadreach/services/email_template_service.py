"""Email template service: the persistence store for outreach templates."""

from typing import Callable, Dict, Any, List, Optional

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from leadreach.config import settings
from leadreach.exceptions import PersistenceError, ValidationError
from leadreach.models.email_template import EmailTemplate
from leadreach.models.enums import TemplateChangeAction
from leadreach.placeholders.migrator import migrate_record
from leadreach.placeholders.reconciler import check_inventory, sync_with_text
from leadreach.schemas.email_template import (
    EmailTemplateCreate,
    EmailTemplateRead,
    ManualFields,
    TemplateChange,
)
from leadreach.services.base import BaseService
from leadreach.utils.logger import logger

TemplateListener = Callable[[TemplateChange], None]

_email_adapter = TypeAdapter(EmailStr)


def is_email_placeholder(name: str) -> bool:
    """Placeholders whose value must be an email address when filled in."""
    return name == "email" or name.endswith("_email")


def validate_template(payload: EmailTemplateCreate) -> None:
    """
    Check a template before it is persisted.

    Raises:
        ValidationError: On the first field that fails
        ReservedNameError: If a custom placeholder uses an auto name
    """
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("Template name is required", field="name")
    if len(name) > settings.template_name_max_length:
        raise ValidationError(
            f"Template name must be at most {settings.template_name_max_length} characters",
            field="name",
        )
    if payload.subject and len(payload.subject) > settings.subject_max_length:
        raise ValidationError(
            f"Subject must be at most {settings.subject_max_length} characters",
            field="subject",
        )
    if not (payload.body_template or "").strip():
        raise ValidationError("Email body is required", field="body_template")

    check_inventory(payload.manual_fields.custom_placeholders)

    for placeholder in payload.manual_fields.custom_placeholders:
        if placeholder.value and is_email_placeholder(placeholder.name):
            try:
                _email_adapter.validate_python(placeholder.value)
            except PydanticValidationError:
                raise ValidationError(
                    f"'{placeholder.value}' is not a valid email address",
                    field=placeholder.name,
                ) from None


class EmailTemplateService(BaseService[EmailTemplate]):
    """
    Service for managing email templates.

    Provides methods for:
    - Listing and loading templates as migrated projections
    - Creating, replacing and deleting templates
    - Notifying subscribers after every committed change

    Reads never write the migrated shape back. Updates replace the whole
    row, so concurrent sessions resolve by last write wins.
    """

    def __init__(self):
        """Initialize email template service."""
        super().__init__(EmailTemplate)
        self._listeners: List[TemplateListener] = []

    # Change notifications

    def subscribe(self, listener: TemplateListener) -> None:
        """Register a callback for committed template changes."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: TemplateListener) -> None:
        """Remove a previously registered callback."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, action: TemplateChangeAction, template_id: int) -> None:
        change = TemplateChange(action=action, template_id=template_id)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception as e:
                # A failing subscriber must not undo a committed write
                logger.error(f"Template change listener failed: {e}")

    # Reads

    @staticmethod
    def to_read(template: EmailTemplate) -> EmailTemplateRead:
        """Project a stored row into the current in-memory shape."""
        return migrate_record(template.to_dict())

    def list_templates(self, db: Session) -> List[EmailTemplateRead]:
        """
        Get all templates ordered by name.

        Args:
            db: Database session

        Returns:
            List of migrated templates
        """
        rows = self.get_multi(db, limit=None, order_by=EmailTemplate.name)
        return [self.to_read(row) for row in rows]

    def get_template(self, db: Session, template_id: int) -> Optional[EmailTemplateRead]:
        """
        Get a single template by ID.

        Args:
            db: Database session
            template_id: Template ID

        Returns:
            Migrated template or None if not found
        """
        template = self.get(db, template_id)
        if not template:
            return None
        return self.to_read(template)

    # Writes

    @staticmethod
    def _to_columns(payload: EmailTemplateCreate) -> Dict[str, Any]:
        validate_template(payload)

        placeholders = sync_with_text(
            payload.manual_fields.custom_placeholders,
            payload.subject,
            payload.body_template,
        )
        manual_fields = ManualFields(
            custom_placeholders=list(placeholders),
            icon=payload.manual_fields.icon,
        )
        return {
            "name": payload.name.strip(),
            "subject": payload.subject or None,
            "body_template": payload.body_template,
            "manual_fields": manual_fields.to_storage(),
        }

    def create_template(self, db: Session, payload: EmailTemplateCreate) -> EmailTemplateRead:
        """
        Create a new template.

        Args:
            db: Database session
            payload: Template data

        Returns:
            The stored template

        Raises:
            ValidationError: If the payload is not valid
            PersistenceError: If the write fails
        """
        template = self.create(db, self._to_columns(payload))
        self._notify(TemplateChangeAction.INSERT, template.id)
        return self.to_read(template)

    def update_template(
        self,
        db: Session,
        template_id: int,
        payload: EmailTemplateCreate,
    ) -> EmailTemplateRead:
        """
        Replace an existing template.

        Args:
            db: Database session
            template_id: Template ID
            payload: Complete new template data

        Returns:
            The stored template

        Raises:
            ValidationError: If the payload is not valid
            PersistenceError: If the template no longer exists or the write fails
        """
        columns = self._to_columns(payload)
        template = self.get(db, template_id)
        if not template:
            raise PersistenceError(f"Template {template_id} not found")

        template = self.update(db, template, columns)
        self._notify(TemplateChangeAction.UPDATE, template.id)
        return self.to_read(template)

    def delete_template(self, db: Session, template_id: int) -> bool:
        """
        Delete a template.

        Args:
            db: Database session
            template_id: Template ID

        Returns:
            True if a template was deleted
        """
        deleted = self.delete(db, template_id)
        if deleted:
            self._notify(TemplateChangeAction.DELETE, template_id)
        return deleted

    def save_session(self, db: Session, session) -> EmailTemplateRead:
        """
        Persist an editing session as a unit.

        Creates a new template when the session has no template ID, otherwise
        replaces the stored one. On success the session is reset; on any
        error it is left untouched so the user can retry.

        Args:
            db: Database session
            session: TemplateEditingSession

        Returns:
            The stored template
        """
        payload = session.to_payload()
        if session.template_id is None:
            saved = self.create_template(db, payload)
        else:
            saved = self.update_template(db, session.template_id, payload)

        session.reset()
        return saved
