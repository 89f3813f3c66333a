"""Placeholder token syntax and the auto-placeholder registry."""

from typing import Iterator, NamedTuple, Tuple

OPEN_DELIMITER = "{{"
CLOSE_DELIMITER = "}}"


class Token(NamedTuple):
    """A ``{{name}}`` occurrence; ``end`` is exclusive."""

    start: int
    end: int
    name: str


def iter_tokens(text: str) -> Iterator[Token]:
    """
    Yield the tokens of ``text`` from left to right.

    A token is ``{{`` followed by a non-empty run of characters other than
    ``}`` and then ``}}``. Every ``{{`` before a given ``}`` shares that
    ``}``, so a failed candidate resumes after it and the scan stays linear.
    """
    position = 0
    while True:
        start = text.find(OPEN_DELIMITER, position)
        if start < 0:
            return
        close = text.find("}", start + len(OPEN_DELIMITER))
        if close < 0:
            return
        if close > start + len(OPEN_DELIMITER) and text.startswith(CLOSE_DELIMITER, close):
            yield Token(start, close + len(CLOSE_DELIMITER), text[start + len(OPEN_DELIMITER):close])
            position = close + len(CLOSE_DELIMITER)
        else:
            position = close + 1


class AutoPlaceholder(NamedTuple):
    """A reserved placeholder filled from the lead record."""

    name: str
    label: str
    aliases: Tuple[str, ...] = ()

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.name,) + self.aliases


# Closed registry, in display order. Not extensible at runtime.
AUTO_PLACEHOLDERS: Tuple[AutoPlaceholder, ...] = (
    AutoPlaceholder("person_vorname", "Person Vorname", ("person_firstname",)),
    AutoPlaceholder("person_nachname", "Person Nachname", ("person_lastname",)),
    AutoPlaceholder("firma_name", "Firma Name", ("company_name",)),
    AutoPlaceholder("firma_branche", "Firma Branche", ("company_industry",)),
    AutoPlaceholder("ortschaft", "Ortschaft", ("locality",)),
)


def format_token(name: str) -> str:
    """Wrap a placeholder name in the token delimiters."""
    return f"{OPEN_DELIMITER}{name}{CLOSE_DELIMITER}"
