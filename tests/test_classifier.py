"""Tests for the auto-placeholder registry and classifier."""

import pytest

from leadreach.models.enums import PlaceholderKind
from leadreach.placeholders import (
    AUTO_PLACEHOLDERS,
    auto_placeholder_for,
    classify,
    is_auto_placeholder,
)


class TestRegistry:
    """Test the auto-placeholder registry."""

    def test_registry_has_five_entries(self):
        assert len(AUTO_PLACEHOLDERS) == 5

    def test_registry_order(self):
        assert [entry.name for entry in AUTO_PLACEHOLDERS] == [
            "person_vorname",
            "person_nachname",
            "firma_name",
            "firma_branche",
            "ortschaft",
        ]

    def test_aliases(self):
        aliases = [alias for entry in AUTO_PLACEHOLDERS for alias in entry.aliases]
        assert aliases == [
            "person_firstname",
            "person_lastname",
            "company_name",
            "company_industry",
            "locality",
        ]


class TestClassifier:
    """Test is_auto_placeholder and classify."""

    @pytest.mark.parametrize(
        "name", [name for entry in AUTO_PLACEHOLDERS for name in entry.names]
    )
    def test_registry_names_are_auto(self, name):
        assert is_auto_placeholder(name)
        assert classify(name) == PlaceholderKind.AUTO

    @pytest.mark.parametrize(
        "name", ["absender_name", "Person_Vorname", "PERSON_FIRSTNAME", " ortschaft", "{{ortschaft}}"]
    )
    def test_other_names_are_custom(self, name):
        assert not is_auto_placeholder(name)
        assert classify(name) == PlaceholderKind.CUSTOM

    def test_alias_resolves_to_entry(self):
        entry = auto_placeholder_for("company_name")
        assert entry.name == "firma_name"
        assert auto_placeholder_for("absender_name") is None
