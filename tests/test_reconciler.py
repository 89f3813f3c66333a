"""Tests for custom-placeholder reconciliation."""

import pytest

from leadreach.exceptions import DuplicateNameError, ReservedNameError, ValidationError
from leadreach.placeholders import (
    AUTO_PLACEHOLDERS,
    add_placeholder,
    check_inventory,
    normalize_name,
    remove_placeholder,
    sync_with_text,
    update_placeholder_value,
)
from leadreach.schemas import CustomPlaceholder


def P(name, value=""):
    return CustomPlaceholder(name=name, value=value)


class TestNormalizeName:
    """Test name normalization on the explicit add path."""

    def test_trim_lowercase_underscore(self):
        assert normalize_name("  Mein Name  ") == "mein_name"

    def test_collapses_whitespace_runs(self):
        assert normalize_name("Absender \t  Telefon\nPrivat") == "absender_telefon_privat"

    def test_already_normal(self):
        assert normalize_name("absender_name") == "absender_name"


class TestAddPlaceholder:
    """Test add_placeholder."""

    def test_appends_with_empty_value(self):
        inventory = (P("a", "1"),)
        result = add_placeholder(inventory, "  Mein Name  ")
        assert result == (P("a", "1"), P("mein_name", ""))

    def test_returns_new_inventory(self):
        inventory = (P("a"),)
        result = add_placeholder(inventory, "b")
        assert inventory == (P("a"),)
        assert result is not inventory

    @pytest.mark.parametrize(
        "name", [name for entry in AUTO_PLACEHOLDERS for name in entry.names]
    )
    def test_reserved_names_rejected(self, name):
        inventory = (P("x", "v"),)
        with pytest.raises(ReservedNameError):
            add_placeholder(inventory, name)
        assert inventory == (P("x", "v"),)

    def test_reserved_after_normalization(self):
        with pytest.raises(ReservedNameError):
            add_placeholder((), "  Person Vorname ")

    def test_duplicate_is_informational(self):
        inventory = (P("absender_name", "Tom"),)
        with pytest.raises(DuplicateNameError) as exc_info:
            add_placeholder(inventory, "Absender Name")
        assert exc_info.value.name == "absender_name"
        assert not isinstance(exc_info.value, ValueError)
        assert inventory == (P("absender_name", "Tom"),)

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValidationError):
            add_placeholder((), name)

    def test_closing_brace_rejected(self):
        with pytest.raises(ValidationError):
            add_placeholder((), "bad}name")


class TestRemoveAndUpdate:
    """Test remove_placeholder and update_placeholder_value."""

    def test_remove(self):
        assert remove_placeholder((P("a"), P("b")), "a") == (P("b"),)

    def test_remove_absent_is_noop(self):
        inventory = (P("a", "1"),)
        assert remove_placeholder(inventory, "zzz") == inventory

    def test_update_value(self):
        result = update_placeholder_value((P("a"), P("b")), "b", "neu")
        assert result == (P("a"), P("b", "neu"))

    def test_update_absent_is_noop(self):
        inventory = (P("a", "1"),)
        assert update_placeholder_value(inventory, "b", "x") == inventory

    def test_update_none_becomes_empty(self):
        assert update_placeholder_value((P("a", "1"),), "a", None) == (P("a", ""),)


class TestSyncWithText:
    """Test text-driven sync."""

    def test_discovers_custom_tokens(self):
        result = sync_with_text((), "Betreff {{thema}}", "Hallo {{person_vorname}}, {{absender_name}}")
        assert result == (P("thema"), P("absender_name"))

    def test_skips_auto_tokens(self):
        assert sync_with_text((), "{{person_firstname}} {{ortschaft}}") == ()

    def test_keeps_existing_values(self):
        inventory = (P("absender_name", "Tom"),)
        assert sync_with_text(inventory, "{{absender_name}}") == inventory

    def test_names_taken_verbatim(self):
        assert sync_with_text((), "{{Mein Name}}") == (P("Mein Name"),)

    def test_never_prunes_on_text_removal(self):
        inventory = (P("x", "v"),)

        # Token removed from the text mid-edit
        inventory = sync_with_text(inventory, "Hallo ohne Platzhalter")
        assert inventory == (P("x", "v"),)

        # Token typed again later
        inventory = sync_with_text(inventory, "Hallo {{x}}")
        assert inventory == (P("x", "v"),)

    def test_none_texts(self):
        assert sync_with_text((P("a"),), None, None) == (P("a"),)

    def test_explicit_remove_then_sync_rediscovers(self):
        inventory = remove_placeholder((P("x", "v"),), "x")
        assert sync_with_text(inventory, "{{x}}") == (P("x", ""),)


class TestCheckInventory:
    """Test inventory checks before a write."""

    def test_valid_inventory(self):
        inventory = [P("a", "1"), P("Mein Name", "Tom")]
        assert check_inventory(inventory) == tuple(inventory)

    @pytest.mark.parametrize("name", ["firma_name", "company_name", "ortschaft"])
    def test_reserved_name(self, name):
        with pytest.raises(ReservedNameError):
            check_inventory([P("a"), P(name, "ACME")])

    def test_duplicate_name(self):
        with pytest.raises(ValidationError) as exc_info:
            check_inventory([P("x", "1"), P("x", "2")])
        assert exc_info.value.field == "x"

    @pytest.mark.parametrize("name", ["", "a}b"])
    def test_invalid_name(self, name):
        with pytest.raises(ValidationError):
            check_inventory([P(name)])
