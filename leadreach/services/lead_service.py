"""Lead service: the data source for auto placeholders."""

from typing import Dict, Optional

from sqlalchemy.orm import Session

from leadreach.exceptions import PersistenceError
from leadreach.models.lead import Lead
from leadreach.placeholders.grammar import AUTO_PLACEHOLDERS
from leadreach.services.base import BaseService

# Lead columns are named after the registry aliases
_COLUMN_FOR = {
    entry.name: next(alias for alias in entry.aliases if hasattr(Lead, alias))
    for entry in AUTO_PLACEHOLDERS
}


def lead_record(lead: Lead) -> Dict[str, str]:
    """
    Build the lookup used for auto placeholders.

    Keys are every spelling of each registry entry, so templates using
    either the canonical name or an alias render the same value.
    """
    record = {}
    for entry in AUTO_PLACEHOLDERS:
        value = getattr(lead, _COLUMN_FOR[entry.name]) or ""
        for name in entry.names:
            record[name] = value
    return record


class LeadService(BaseService[Lead]):
    """Service for reading and creating leads."""

    def __init__(self):
        """Initialize lead service."""
        super().__init__(Lead)

    def get_lead_record(self, db: Session, lead_id: int) -> Dict[str, str]:
        """
        Get the auto-placeholder values for one lead.

        Args:
            db: Database session
            lead_id: Lead ID

        Returns:
            Mapping of auto placeholder names to values

        Raises:
            PersistenceError: If the lead does not exist
        """
        lead: Optional[Lead] = self.get(db, lead_id)
        if not lead:
            raise PersistenceError(f"Lead {lead_id} not found")
        return lead_record(lead)
