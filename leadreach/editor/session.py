"""Editing session for one template at a time.

The session is the read/write projection the user edits. It is created
empty, loaded from the store, mutated locally, and persisted as a unit.

Store reads are request/response calls that may come back after the user
has moved on. Every change of context (new, load, reset) bumps
``generation``; a fetch started under an older generation is discarded.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from leadreach.exceptions import DuplicateNameError
from leadreach.placeholders import reconciler
from leadreach.placeholders.grammar import format_token
from leadreach.schemas.email_template import (
    CustomPlaceholder,
    EmailTemplateCreate,
    EmailTemplateRead,
    ManualFields,
)
from leadreach.services.email_template_service import validate_template
from leadreach.utils.logger import logger


@dataclass(frozen=True)
class FetchTicket:
    """Identifies the session context a store read was started in."""

    generation: int
    template_id: Optional[int]


@dataclass(frozen=True)
class AddResult:
    """Outcome of adding a custom placeholder."""

    name: str
    added: bool
    notice: Optional[str] = None


class TemplateEditingSession:
    """Mutable editing state for one template."""

    def __init__(self):
        self.generation = 0
        self._clear()

    def _clear(self):
        self.template_id: Optional[int] = None
        self.name = ""
        self.subject = ""
        self.body = ""
        self.icon: Optional[str] = None
        self.placeholders: Tuple[CustomPlaceholder, ...] = ()

    def _bump(self):
        self.generation += 1

    @property
    def is_new(self) -> bool:
        return self.template_id is None

    # Context changes

    def reset(self) -> None:
        """Return to the empty state of a new, unsaved template."""
        self._clear()
        self._bump()

    new = reset

    def load(self, template: EmailTemplateRead) -> None:
        """Replace the session state with a template from the store."""
        self._bump()
        self.template_id = template.id
        self.name = template.name
        self.subject = template.subject or ""
        self.body = template.body_template
        self.icon = template.manual_fields.icon
        self.placeholders = tuple(template.manual_fields.custom_placeholders)
        self._sync()

    def begin_fetch(self, template_id: Optional[int]) -> FetchTicket:
        """Start loading ``template_id``; pass the ticket to apply_fetch."""
        self._clear()
        self._bump()
        self.template_id = template_id
        return FetchTicket(generation=self.generation, template_id=template_id)

    def apply_fetch(self, ticket: FetchTicket, template: Optional[EmailTemplateRead]) -> bool:
        """
        Apply a store read if the session is still waiting for it.

        Returns:
            True if applied, False if the result was stale and ignored
        """
        if ticket.generation != self.generation or ticket.template_id != self.template_id:
            logger.info(
                f"Discarding stale fetch for template {ticket.template_id} "
                f"(generation {ticket.generation}, now {self.generation})"
            )
            return False
        if template is None:
            logger.info(f"Template {ticket.template_id} no longer exists")
            self.reset()
            return False

        self.load(template)
        return True

    def handle_deleted(self, template_id: int) -> bool:
        """Reset if the deleted template is the one being edited."""
        if self.template_id is not None and self.template_id == template_id:
            self.reset()
            return True
        return False

    # Text edits

    def _sync(self):
        self.placeholders = reconciler.sync_with_text(self.placeholders, self.subject, self.body)

    def set_name(self, name: str) -> None:
        self.name = name

    def set_subject(self, subject: str) -> None:
        self.subject = subject or ""
        self._sync()

    def set_body(self, body: str) -> None:
        self.body = body or ""
        self._sync()

    def insert_placeholder(self, name: str, position: Optional[int] = None) -> int:
        """
        Insert ``{{name}}`` into the body.

        Args:
            name: Placeholder name (auto or custom)
            position: Character offset, clamped to the body; None appends

        Returns:
            Offset just after the inserted token
        """
        token = format_token(name)
        if position is None:
            position = len(self.body)
        position = max(0, min(position, len(self.body)))

        self.body = self.body[:position] + token + self.body[position:]
        self._sync()
        return position + len(token)

    # Placeholder inventory

    def add_placeholder(self, raw_name: str) -> AddResult:
        """
        Add a custom placeholder.

        Raises:
            ReservedNameError: If the name is an auto placeholder
            ValidationError: If the name is empty
        """
        try:
            self.placeholders = reconciler.add_placeholder(self.placeholders, raw_name)
        except DuplicateNameError as e:
            logger.info(str(e))
            return AddResult(name=e.name, added=False, notice=str(e))
        return AddResult(name=self.placeholders[-1].name, added=True)

    def remove_placeholder(self, name: str) -> None:
        self.placeholders = reconciler.remove_placeholder(self.placeholders, name)

    def update_placeholder_value(self, name: str, value: str) -> None:
        self.placeholders = reconciler.update_placeholder_value(self.placeholders, name, value)

    def placeholder_value(self, name: str) -> Optional[str]:
        for placeholder in self.placeholders:
            if placeholder.name == name:
                return placeholder.value
        return None

    # Saving

    def to_payload(self) -> EmailTemplateCreate:
        """Build the record persisted by the store; validates first."""
        payload = EmailTemplateCreate(
            name=self.name,
            subject=self.subject,
            body_template=self.body,
            manual_fields=ManualFields(
                custom_placeholders=list(self.placeholders),
                icon=self.icon,
            ),
        )
        validate_template(payload)
        return payload

    def validate(self) -> None:
        """
        Raises:
            ValidationError: If the session cannot be saved as it is
        """
        self.to_payload()

    def as_template(self) -> EmailTemplateRead:
        """Current state as a template projection, e.g. for previews."""
        return EmailTemplateRead(
            id=self.template_id or 0,
            name=self.name,
            subject=self.subject or None,
            body_template=self.body,
            manual_fields=ManualFields(
                custom_placeholders=list(self.placeholders),
                icon=self.icon,
            ),
        )
