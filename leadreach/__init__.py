"""LeadReach email template placeholder engine."""

__version__ = "0.1.0"
