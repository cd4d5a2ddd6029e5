"""Tests for the JSON template store."""

import json

import pytest

from errors import TemplateStoreError
from fakes import make_template
from store import TemplateStore, validate_template_config


class TestValidateTemplateConfig:
    def test_valid_config_has_no_warnings(self):
        assert validate_template_config(make_template("Ok").to_config(), 0) == []

    def test_missing_id_is_generated(self):
        config = make_template("No id").to_config()
        del config["id"]
        warnings = validate_template_config(config, 2)
        assert config["id"]
        assert len(warnings) == 1
        assert "Template 2" in warnings[0]

    def test_unknown_type_warns(self):
        config = make_template("Odd", type="fax").to_config()
        warnings = validate_template_config(config, 0)
        assert any("fax" in w for w in warnings)

    def test_email_type_is_known(self):
        config = make_template("Mail", type="email").to_config()
        assert validate_template_config(config, 0) == []

    @pytest.mark.parametrize("config", [
        "not a dict",
        {"id": "x"},
        {"id": "x", "mergeData": "oops"},
        {"id": "x", "mergeData": {"type": "document", "data": []}},
    ])
    def test_unusable_entries_raise(self, config):
        with pytest.raises(TemplateStoreError):
            validate_template_config(config, 0)


class TestTemplateStore:
    def test_missing_file_is_empty(self, tmp_path):
        store = TemplateStore(tmp_path / "templates.json")
        assert store.load() == ([], [])

    def test_save_then_load(self, tmp_path, three_templates):
        store = TemplateStore(tmp_path / "nested" / "templates.json")
        store.save(three_templates)
        templates, warnings = store.load()
        assert templates == three_templates
        assert warnings == []

    def test_save_writes_indented_list(self, tmp_path, sample_template):
        path = tmp_path / "templates.json"
        TemplateStore(path).save([sample_template])
        text = path.read_text()
        assert json.loads(text) == [sample_template.to_config()]
        assert '\n  {' in text

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "templates.json"
        path.write_text("{not json")
        with pytest.raises(TemplateStoreError, match="invalid JSON"):
            TemplateStore(path).load()

    def test_non_list_raises(self, tmp_path):
        path = tmp_path / "templates.json"
        path.write_text('{"id": "x"}')
        with pytest.raises(TemplateStoreError, match="list"):
            TemplateStore(path).load()

    def test_warnings_returned(self, tmp_path):
        config = make_template("No id").to_config()
        del config["id"]
        path = tmp_path / "templates.json"
        path.write_text(json.dumps([config]))

        templates, warnings = TemplateStore(path).load()
        assert len(templates) == 1
        assert templates[0].id
        assert len(warnings) == 1
