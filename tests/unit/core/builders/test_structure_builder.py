"""Tests for structure building."""
import logging

import pytest
from unittest.mock import MagicMock

from formio_export.adapters.components.factory import DefaultComponentFactory
from formio_export.core.builders.structure_builder import (
    build_structure,
    normalize_component,
)
from formio_export.core.ports.components import ComponentFactoryPort

LOGGER_NAME = "formio_export.core.builders.structure_builder"


def full_submission(submission_id, owner="u1", modified=123, data=None):
    return {"_id": submission_id, "owner": owner, "modified": modified, "data": data or {}}


class TestNormalizeComponent:
    def test_wizard_becomes_form(self):
        result = normalize_component({"type": "wizard", "display": "wizard"})
        assert result["type"] == "form"
        assert result["display"] == "form"

    def test_does_not_mutate_definition(self):
        wizard = {"type": "wizard", "display": "wizard"}
        normalize_component(wizard)
        assert wizard == {"type": "wizard", "display": "wizard"}

    def test_plain_component_untouched(self):
        component = {"type": "textfield"}
        assert normalize_component(component) is component


class TestBuildStructure:
    def setup_method(self):
        self.factory = DefaultComponentFactory()

    def test_raw_data_entry(self):
        items = [{"component": {"type": "textfield"}, "submission": [{"data": {"a": 1}}], "option": {}}]

        structure = build_structure(items, self.factory)

        assert len(structure) == 1
        entry = structure[0]
        assert entry.component["type"] == "textfield"
        assert entry.data == {"a": 1}
        assert "submission" not in entry.options
        assert entry.identity is None

    def test_full_submission_attaches_identity(self):
        items = [{
            "component": {"type": "form"},
            "submission": [full_submission("s1", data={"a": 1})],
            "option": {},
        }]

        structure = build_structure(items, self.factory)

        assert structure[0].options["submission"] == {"id": "s1", "owner": "u1", "modified": 123}

    def test_identity_does_not_leak_between_submissions(self):
        base_options = {"title": "Survey"}
        items = [{
            "component": {"type": "form"},
            "submission": [full_submission("s1"), full_submission("s2", owner="u2")],
            "option": base_options,
        }]

        structure = build_structure(items, self.factory)

        assert structure[0].options["submission"]["id"] == "s1"
        assert structure[1].options["submission"]["id"] == "s2"
        assert structure[1].options["submission"]["owner"] == "u2"
        assert base_options == {"title": "Survey"}

    def test_raw_record_after_full_has_no_identity(self):
        items = [{
            "component": {"type": "form"},
            "submission": [full_submission("s1"), {"data": {"b": 2}}],
            "option": {},
        }]

        structure = build_structure(items, self.factory)

        assert structure[1].identity is None

    def test_form_and_wizard_normalized_in_every_entry(self):
        items = [
            {"component": {"display": "wizard", "type": "wizard"}, "submission": [{"data": {}}, {"data": {}}], "option": {}},
            {"component": {"display": "form"}, "submission": [{"data": {}}], "option": {}},
        ]

        structure = build_structure(items, self.factory)

        assert len(structure) == 3
        for entry in structure:
            assert entry.component["type"] == "form"
            assert entry.component["display"] == "form"

    def test_count_and_order_preserved(self):
        items = [
            {"component": {"type": "form"}, "submission": [{"data": {"n": 1}}, {"data": {"n": 2}}], "option": {}},
            {"component": None, "submission": [{"data": {"n": 99}}], "option": {}},
            {"component": {"type": "form"}, "submission": [{"data": {"n": 3}}], "option": {}},
        ]

        structure = build_structure(items, self.factory)

        assert [entry.data["n"] for entry in structure] == [1, 2, 3]

    def test_missing_component_skipped_with_one_warning(self, caplog):
        items = [{"submission": [{"data": {"a": 1}}, {"data": {"a": 2}}], "option": {}}]

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            structure = build_structure(items, self.factory)

        assert structure == []
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "no component defined" in warnings[0].getMessage()
        assert warnings[0].component_id == "FormioExport"
        assert warnings[0].entry_index == 0

    def test_non_mapping_component_treated_as_missing(self, caplog):
        items = [
            {"component": "textfield", "submission": [{"data": {"a": 1}}], "option": {}},
            {"component": {}, "submission": [{"data": {"a": 2}}], "option": {}},
        ]

        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            structure = build_structure(items, self.factory)

        assert [entry.data["a"] for entry in structure] == [2]
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].entry_index == 0

    def test_single_submission_mapping_accepted(self):
        items = [{"component": {"type": "form"}, "submission": full_submission("s1"), "option": {}}]

        structure = build_structure(items, self.factory)

        assert len(structure) == 1
        assert structure[0].identity.id == "s1"

    def test_record_without_data_key_used_as_payload(self):
        items = [{"component": {"type": "form"}, "submission": [{"a": 1}], "option": None}]

        structure = build_structure(items, self.factory)

        assert structure[0].data == {"a": 1}

    def test_factory_called_with_normalized_component(self):
        factory = MagicMock(spec=ComponentFactoryPort)
        items = [{"component": {"display": "wizard"}, "submission": [{"data": {"a": 1}}], "option": {"x": 1}}]

        build_structure(items, factory)

        component, data, options = factory.create.call_args[0]
        assert component["type"] == "form"
        assert data == {"a": 1}
        assert options == {"x": 1}

    def test_factory_errors_propagate(self):
        factory = MagicMock(spec=ComponentFactoryPort)
        factory.create.side_effect = KeyError("boom")
        items = [{"component": {"type": "form"}, "submission": [{"data": {}}], "option": {}}]

        with pytest.raises(KeyError):
            build_structure(items, factory)
