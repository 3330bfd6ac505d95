import json
import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gitinfo import loader
from gitinfo.exceptions import LoadError


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, tmp_path):
    monkeypatch.delenv("GITINFO_SCHEMA", raising=False)
    monkeypatch.chdir(tmp_path)


class TestLocateSchema:

    def test_explicit_path_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GITINFO_SCHEMA", str(tmp_path / "env.json"))
        (tmp_path / "gitinfo.schema.json").write_text("{}", encoding="utf-8")
        assert loader.locate_schema("custom.json") == Path("custom.json")

    def test_env_before_cwd(self, monkeypatch, tmp_path):
        (tmp_path / "gitinfo.schema.json").write_text("{}", encoding="utf-8")
        monkeypatch.setenv("GITINFO_SCHEMA", "/nowhere/schema.json")
        assert loader.locate_schema() == Path("/nowhere/schema.json")

    def test_cwd_before_bundled(self, tmp_path):
        (tmp_path / "gitinfo.schema.json").write_text("{}", encoding="utf-8")
        assert loader.locate_schema() == Path("gitinfo.schema.json")

    def test_falls_back_to_bundled(self):
        path = loader.locate_schema()
        assert path == loader.BUNDLED_SCHEMA
        assert path.is_file()


class TestLoadSchema:

    def test_missing(self, tmp_path):
        with pytest.raises(LoadError, match="Schema not found"):
            loader.load_schema(tmp_path / "absent.json")

    def test_malformed(self, tmp_path):
        p = tmp_path / "s.json"
        p.write_text("{not json", encoding="utf-8")
        with pytest.raises(LoadError, match="Error parsing schema"):
            loader.load_schema(p)

    def test_comments_not_allowed_in_schema(self, tmp_path):
        p = tmp_path / "s.json"
        p.write_text('{"properties": {}} // note', encoding="utf-8")
        with pytest.raises(LoadError, match="Error parsing schema"):
            loader.load_schema(p)

    def test_root_must_be_object(self, tmp_path):
        p = tmp_path / "s.json"
        p.write_text("[]", encoding="utf-8")
        with pytest.raises(LoadError, match="Schema root must be an object"):
            loader.load_schema(p)

    def test_bundled_schema_loads(self):
        schema = loader.load_schema(loader.BUNDLED_SCHEMA)
        assert schema["additionalProperties"] is False
        assert "owner" in schema["properties"]


class TestLoadDocument:

    def test_jsonc_document(self, tmp_path):
        p = tmp_path / ".gitinfo"
        p.write_text('{\n  // repo title\n  "title": "Repo",\n}\n', encoding="utf-8")
        assert loader.load_document(p) == {"title": "Repo"}

    def test_bom_is_tolerated(self, tmp_path):
        p = tmp_path / ".gitinfo"
        p.write_bytes(b"\xef\xbb\xbf" + json.dumps({"title": "x"}).encode("utf-8"))
        assert loader.load_document(p) == {"title": "x"}

    def test_missing(self, tmp_path):
        with pytest.raises(LoadError, match="File not found"):
            loader.load_document(tmp_path / ".gitinfo")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(LoadError, match="File not found"):
            loader.load_document(tmp_path)

    def test_invalid_utf8(self, tmp_path):
        p = tmp_path / ".gitinfo"
        p.write_bytes(b'{"title": "\xff"}')
        with pytest.raises(LoadError, match="Error reading file"):
            loader.load_document(p)

    def test_malformed(self, tmp_path):
        p = tmp_path / ".gitinfo"
        p.write_text('{"title": "x" "tags": []}', encoding="utf-8")
        with pytest.raises(LoadError, match="Error parsing JSONC") as exc_info:
            loader.load_document(p)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
