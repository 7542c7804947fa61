import json
from pathlib import Path

import pytest

from swagger_mixin.document.base import Document
from swagger_mixin.document.loader import detect_format, dump_document, load_document
from swagger_mixin.errors import LoadError, SerializationError
from swagger_mixin.mixer.merge import mixin

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectFormat:
    def test_yaml_suffixes(self):
        assert detect_format(Path("api.yaml")) == "yaml"
        assert detect_format(Path("api.yml")) == "yaml"

    def test_everything_else_is_json(self):
        assert detect_format(Path("api.json")) == "json"
        assert detect_format(Path("api.txt")) == "json"
        assert detect_format(Path("api")) == "json"


class TestLoadDocument:
    def test_load_yaml_fixture(self):
        doc = load_document(FIXTURES / "primary.yaml")
        assert set(doc.paths) == {"/widgets", "/widgets/{id}"}
        assert set(doc.definitions) == {"Widget", "Error"}
        assert doc.paths["/widgets/{id}"].get.operation_id == "getWidget"
        # YAML status codes load as ints
        assert 404 in doc.paths["/widgets/{id}"].get.responses.status_code_responses

    def test_load_json_fixture(self):
        doc = load_document(FIXTURES / "mixin_admin.json")
        assert set(doc.paths) == {"/health", "/admin", "/admin/users"}
        assert doc.responses == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError) as exc:
            load_document(tmp_path / "nope.yaml")
        assert exc.value.path == tmp_path / "nope.yaml"

    def test_yaml_suffix_with_json_content_is_fine(self, tmp_path):
        f = tmp_path / "api.yml"
        f.write_text('{"swagger": "2.0", "paths": {}}')
        assert isinstance(load_document(f), Document)

    def test_yaml_content_in_json_file_fails(self, tmp_path):
        f = tmp_path / "api.json"
        f.write_text("swagger: '2.0'\npaths: {}\n")
        with pytest.raises(LoadError, match="JSONDecodeError"):
            load_document(f)

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "api.yaml"
        f.write_text("paths: [unclosed\n")
        with pytest.raises(LoadError, match="YAMLError"):
            load_document(f)

    def test_root_must_be_mapping(self, tmp_path):
        f = tmp_path / "api.json"
        f.write_text("[1, 2, 3]")
        with pytest.raises(LoadError, match="mapping"):
            load_document(f)

    def test_wrong_shape_is_load_error(self, tmp_path):
        f = tmp_path / "api.json"
        f.write_text('{"swagger": "2.0", "paths": {"/a": {"get": "not an operation"}}}')
        with pytest.raises(LoadError, match="not a valid swagger document"):
            load_document(f)


class TestDumpDocument:
    def test_sorted_indented_json(self):
        doc = Document.model_validate({"swagger": "2.0", "info": {"version": "1", "title": "t"}})
        text = dump_document(doc)
        assert text == '{\n  "info": {\n    "title": "t",\n    "version": "1"\n  },\n  "paths": {},\n  "swagger": "2.0"\n}\n'

    def test_paths_kept_when_merge_has_none(self):
        primary = Document.model_validate({"swagger": "2.0", "info": {"title": "t", "version": "1"}, "paths": {}})
        mixin(primary, Document.model_validate({"definitions": {"A": {}}}))

        data = json.loads(dump_document(primary))
        assert data["paths"] == {}
        assert data["definitions"] == {"A": {}}
        assert "parameters" not in data
        assert "responses" not in data

    def test_status_codes_written_as_strings(self):
        doc = load_document(FIXTURES / "primary.yaml")
        data = json.loads(dump_document(doc))
        responses = data["paths"]["/widgets/{id}"]["get"]["responses"]
        assert responses["404"] == {"$ref": "#/responses/NotFound"}
        assert responses["200"]["description"] == "The widget"

    def test_unserializable_value(self):
        doc = Document.model_validate({"swagger": "2.0", "x-bad": object()})
        with pytest.raises(SerializationError):
            dump_document(doc)
