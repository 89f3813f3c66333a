"""Services for LeadReach."""

from .base import BaseService
from .email_template_service import EmailTemplateService, validate_template
from .lead_service import LeadService, lead_record

__all__ = [
    "BaseService",
    "EmailTemplateService",
    "validate_template",
    "LeadService",
    "lead_record",
]
