"""Tests for component/submission discriminators."""
from formio_export.core.builders.discriminators import (
    is_formio_form,
    is_formio_submission,
    is_formio_wizard,
)


class TestIsFormioForm:
    def test_form_display(self):
        assert is_formio_form({"display": "form", "components": []})

    def test_form_type(self):
        assert is_formio_form({"type": "form"})

    def test_plain_component(self):
        assert not is_formio_form({"type": "textfield"})

    def test_non_mapping(self):
        assert not is_formio_form(None)
        assert not is_formio_form("form")


class TestIsFormioWizard:
    def test_wizard_display(self):
        assert is_formio_wizard({"display": "wizard", "type": "form"})

    def test_form_is_not_wizard(self):
        assert not is_formio_wizard({"display": "form"})


class TestIsFormioSubmission:
    def test_full_submission(self):
        record = {"_id": "s1", "owner": "u1", "modified": 123, "data": {}}
        assert is_formio_submission(record)

    def test_raw_data(self):
        assert not is_formio_submission({"data": {"a": 1}})

    def test_partial_identity(self):
        assert not is_formio_submission({"_id": "s1", "data": {}})

    def test_non_mapping(self):
        assert not is_formio_submission([("_id", 1)])
