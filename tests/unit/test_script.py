"""
Unit tests for datalite.core.script (SQLScript loading and statement access).
"""

import sys

import pytest
from pydantic import ValidationError

from datalite.core.script import SQLScript, read_script_text
from datalite.domain.errors import DataLiteError, ScriptLoadError
from datalite.models import ScriptOptions

CREATE_USERS = (
    "CREATE TABLE users (\n"
    "    id INTEGER PRIMARY KEY,\n"
    "    username TEXT NOT NULL,\n"
    "    email TEXT NOT NULL\n"
    ")"
)

INSERT_USERS = (
    "INSERT INTO users (id, username, email)\n"
    "VALUES\n"
    "    (1, 'john_doe', 'john@example.com'),\n"
    "    (2, 'jane_doe', 'jane@example.com')"
)


class TestSQLScriptFromText:
    def test_cleans_then_splits(self) -> None:
        script = SQLScript("-- header\nSELECT 1; /* note */\n\n\nSELECT 2; -- tail\n")
        assert list(script) == ["SELECT 1", "SELECT 2"]

    def test_empty_text_has_no_statements(self) -> None:
        script = SQLScript()
        assert len(script) == 0
        assert list(script) == []

    def test_comment_only_text_has_no_statements(self) -> None:
        assert len(SQLScript("-- nothing here\n/* or here */\n")) == 0

    def test_trigger_is_one_statement(self, trigger_script: str) -> None:
        script = SQLScript(trigger_script)
        assert len(script) == 2
        assert script[1].startswith("CREATE TRIGGER KDFMetadataLimit")
        assert script[1].endswith("END")
        assert "'Only one row allowed in KDFMetadata');" in script[1]

    def test_keeps_source_and_options(self) -> None:
        options = ScriptOptions(strict_keywords=False)
        script = SQLScript("SELECT 1;", options=options)
        assert script.source == "SELECT 1;"
        assert script.options is options

    def test_default_options(self) -> None:
        assert SQLScript("SELECT 1").options == ScriptOptions()


class TestSQLScriptOptions:
    def test_without_comment_removal_comments_take_part_in_splitting(self) -> None:
        sql = "SELECT 1; -- c;\nSELECT 2"
        assert list(SQLScript(sql)) == ["SELECT 1", "SELECT 2"]
        raw = SQLScript(sql, options=ScriptOptions(strip_comments=False))
        assert list(raw) == ["SELECT 1", "-- c", "SELECT 2"]

    def test_without_trimming_statements_keep_trailing_whitespace(self) -> None:
        sql = "SELECT 1;\nSELECT 2  \n\n"
        assert list(SQLScript(sql)) == ["SELECT 1", "SELECT 2"]
        untrimmed = SQLScript(sql, options=ScriptOptions(trim_lines=False))
        assert list(untrimmed) == ["SELECT 1", "SELECT 2  \n\n"]

    def test_lenient_keywords(self) -> None:
        sql = "SELECT beginning FROM t; SELECT 2;"
        assert len(SQLScript(sql)) == 2
        assert len(SQLScript(sql, options=ScriptOptions(strict_keywords=False))) == 1

    def test_options_are_frozen(self) -> None:
        options = ScriptOptions()
        with pytest.raises(ValidationError):
            options.strip_comments = False


class TestSQLScriptSequence:
    def test_indexing_and_slicing(self) -> None:
        script = SQLScript("A; B; C;")
        assert script[0] == "A"
        assert script[-1] == "C"
        assert script[1:] == ("B", "C")
        with pytest.raises(IndexError):
            script[3]

    def test_statements_property_is_a_tuple(self) -> None:
        assert SQLScript("A; B;").statements == ("A", "B")

    def test_membership_and_index(self) -> None:
        script = SQLScript("A; B;")
        assert "B" in script
        assert script.index("B") == 1
        assert script.count("A") == 1

    def test_equality_is_by_statements(self) -> None:
        assert SQLScript("A;\n\nB;") == SQLScript("A; B")
        assert SQLScript("A;") != SQLScript("B;")
        assert SQLScript("A;") != ["A"]

    def test_hashable(self) -> None:
        assert len({SQLScript("A; B;"), SQLScript("A;\nB")}) == 1

    def test_repr(self) -> None:
        assert repr(SQLScript("A; B;")) == "SQLScript(2 statements)"


class TestSQLScriptFromFile:
    def test_valid_file(self, valid_script_path) -> None:
        script = SQLScript.from_file(valid_script_path)
        assert len(script) == 2
        assert script[0] == CREATE_USERS
        assert script[1] == INSERT_USERS

    def test_accepts_string_path(self, valid_script_path) -> None:
        assert len(SQLScript.from_file(str(valid_script_path))) == 2

    def test_empty_file(self, empty_script_path) -> None:
        assert len(SQLScript.from_file(empty_script_path)) == 0

    def test_missing_file(self, temp_workspace) -> None:
        with pytest.raises(ScriptLoadError) as exc_info:
            SQLScript.from_file(temp_workspace / "missing.sql")
        assert exc_info.value.code == "script_not_found"
        assert "missing.sql" in str(exc_info.value)

    def test_invalid_encoding(self, temp_workspace) -> None:
        path = temp_workspace / "invalid_script.sql"
        path.write_bytes(b"SELECT '\xff\xfe';")
        with pytest.raises(ScriptLoadError) as exc_info:
            SQLScript.from_file(path)
        assert exc_info.value.code == "script_decode_error"

    def test_explicit_encoding(self, temp_workspace) -> None:
        path = temp_workspace / "latin1.sql"
        path.write_bytes("INSERT INTO t VALUES ('caf\xe9');".encode("latin-1"))
        script = SQLScript.from_file(path, encoding="latin-1")
        assert list(script) == ["INSERT INTO t VALUES ('caf\xe9')"]

    def test_unknown_encoding(self, valid_script_path) -> None:
        with pytest.raises(ScriptLoadError) as exc_info:
            SQLScript.from_file(valid_script_path, encoding="no-such-codec")
        assert exc_info.value.code == "script_decode_error"

    def test_directory_is_an_io_error(self, temp_workspace) -> None:
        with pytest.raises(ScriptLoadError) as exc_info:
            SQLScript.from_file(temp_workspace)
        assert exc_info.value.code == "script_io_error"

    def test_load_error_is_a_domain_error(self, temp_workspace) -> None:
        with pytest.raises(DataLiteError):
            read_script_text(temp_workspace / "missing.sql")


class TestSQLScriptFromResource:
    @pytest.fixture
    def resource_package(self, tmp_path, monkeypatch):
        package_dir = tmp_path / "datalite_test_resources"
        package_dir.mkdir()
        (package_dir / "__init__.py").write_text("", encoding="utf-8")
        (package_dir / "schema.sql").write_text(
            "CREATE TABLE a (x INTEGER);\n-- seed\nINSERT INTO a VALUES (1);\n", encoding="utf-8"
        )
        (package_dir / "broken.sql").write_bytes(b"\xff\xfe")
        (package_dir / "plain").write_text("SELECT 1", encoding="utf-8")
        monkeypatch.syspath_prepend(str(tmp_path))
        monkeypatch.delitem(sys.modules, "datalite_test_resources", raising=False)
        return "datalite_test_resources"

    def test_existing_resource(self, resource_package: str) -> None:
        script = SQLScript.from_resource(resource_package, "schema")
        assert script is not None
        assert list(script) == ["CREATE TABLE a (x INTEGER)", "INSERT INTO a VALUES (1)"]

    def test_missing_resource_returns_none(self, resource_package: str) -> None:
        assert SQLScript.from_resource(resource_package, "missing") is None

    def test_resource_without_extension(self, resource_package: str) -> None:
        script = SQLScript.from_resource(resource_package, "plain", extension=None)
        assert script is not None
        assert list(script) == ["SELECT 1"]

    def test_undecodable_resource(self, resource_package: str) -> None:
        with pytest.raises(ScriptLoadError) as exc_info:
            SQLScript.from_resource(resource_package, "broken")
        assert exc_info.value.code == "script_decode_error"

    def test_missing_package(self) -> None:
        with pytest.raises(ScriptLoadError) as exc_info:
            SQLScript.from_resource("datalite_no_such_package", "schema")
        assert exc_info.value.code == "script_not_found"
