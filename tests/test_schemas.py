"""Schema validation tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from leadreach.models.enums import TemplateChangeAction
from leadreach.schemas import (
    CustomPlaceholder,
    EmailTemplateCreate,
    ManualFields,
    TemplateChange,
)


class TestCustomPlaceholder:
    """Test CustomPlaceholder."""

    def test_defaults_to_empty_value(self):
        assert CustomPlaceholder(name="a").value == ""

    def test_none_value_coerced(self):
        assert CustomPlaceholder(name="a", value=None).value == ""

    def test_frozen(self):
        placeholder = CustomPlaceholder(name="a", value="1")
        with pytest.raises(ValidationError):
            placeholder.value = "2"

    def test_name_required(self):
        with pytest.raises(ValidationError):
            CustomPlaceholder(value="x")


class TestManualFields:
    """Test ManualFields."""

    def test_storage_omits_unset_icon(self):
        fields = ManualFields(custom_placeholders=[CustomPlaceholder(name="a")])
        assert fields.to_storage() == {"custom_placeholders": [{"name": "a", "value": ""}]}

    def test_storage_keeps_icon(self):
        assert ManualFields(icon="mail").to_storage() == {"custom_placeholders": [], "icon": "mail"}


class TestEmailTemplateCreate:
    """Test EmailTemplateCreate."""

    def test_strips_name(self):
        assert EmailTemplateCreate(name="  Vorlage  ", body_template="x").name == "Vorlage"

    @pytest.mark.parametrize("subject", ["", "   ", None])
    def test_blank_subject_is_none(self, subject):
        assert EmailTemplateCreate(name="n", subject=subject, body_template="x").subject is None

    def test_subject_trimmed(self):
        assert EmailTemplateCreate(name="n", subject=" Hallo ", body_template="x").subject == "Hallo"

    def test_body_required(self):
        with pytest.raises(ValidationError):
            EmailTemplateCreate(name="n")


class TestTemplateChange:
    """Test TemplateChange."""

    def test_action_from_string(self):
        change = TemplateChange(action="DELETE", template_id=3)
        assert change.action is TemplateChangeAction.DELETE
