"""Client-side editing state for a single template."""

from leadreach.editor.session import AddResult, FetchTicket, TemplateEditingSession

__all__ = ["AddResult", "FetchTicket", "TemplateEditingSession"]
