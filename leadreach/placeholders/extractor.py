"""Scan template text for placeholder names."""

from typing import List, Optional

from leadreach.placeholders.grammar import iter_tokens


def extract_placeholders(text: Optional[str]) -> List[str]:
    """Return the distinct placeholder names in ``text``, in first-seen order.

    Unbalanced or malformed braces are plain text. ``None`` and the empty
    string both yield an empty list.
    """
    if not text:
        return []

    seen = set()
    names = []
    for token in iter_tokens(text):
        if token.name not in seen:
            seen.add(token.name)
            names.append(token.name)
    return names
