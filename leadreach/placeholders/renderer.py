"""Substitute placeholders with lead data and entered values."""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from leadreach.placeholders.classifier import auto_placeholder_for
from leadreach.placeholders.grammar import iter_tokens
from leadreach.schemas.email_template import CustomPlaceholder, RenderedEmail

CustomValues = Union[Mapping, Iterable[CustomPlaceholder], None]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _lead_value(lead_record: Optional[Mapping], name: str) -> str:
    if not lead_record:
        return ""
    if lead_record.get(name) is not None:
        return _as_text(lead_record.get(name))

    # Fall back to the other spellings of the same registry entry
    entry = auto_placeholder_for(name)
    for alias in entry.names:
        if lead_record.get(alias) is not None:
            return _as_text(lead_record.get(alias))
    return ""


def _values_mapping(custom_values: CustomValues) -> Mapping:
    if custom_values is None:
        return {}
    if isinstance(custom_values, Mapping):
        return custom_values
    return {p.name: p.value for p in custom_values}


def render_text(
    text: Optional[str],
    lead_record: Optional[Mapping] = None,
    custom_values: CustomValues = None,
) -> str:
    """
    Replace every token in ``text`` in a single pass.

    Auto placeholders are read from ``lead_record``, everything else from
    ``custom_values``. Missing or empty values become an empty string.
    Text without tokens is returned unchanged.
    """
    if not text:
        return text or ""

    values = _values_mapping(custom_values)

    pieces = []
    position = 0
    for token in iter_tokens(text):
        pieces.append(text[position:token.start])
        if auto_placeholder_for(token.name) is not None:
            pieces.append(_lead_value(lead_record, token.name))
        else:
            pieces.append(_as_text(values.get(token.name)))
        position = token.end
    pieces.append(text[position:])
    return "".join(pieces)


def render(
    template,
    lead_record: Optional[Mapping] = None,
    custom_values: CustomValues = None,
) -> RenderedEmail:
    """
    Render a template's subject and body for one lead.

    Args:
        template: Object with ``subject``, ``body_template`` and
            ``manual_fields`` (e.g. EmailTemplateRead)
        lead_record: Values for auto placeholders
        custom_values: Values for custom placeholders; defaults to the
            template's own inventory

    Returns:
        RenderedEmail with the final subject and body
    """
    if custom_values is None:
        custom_values = template.manual_fields.custom_placeholders

    return RenderedEmail(
        subject=render_text(template.subject, lead_record, custom_values),
        body=render_text(template.body_template, lead_record, custom_values),
    )
