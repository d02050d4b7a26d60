import shutil
from pathlib import Path

import pytest

RESOURCES_DIR = Path(__file__).parent / "resources"


@pytest.fixture
def temp_workspace(tmp_path):
    """Create a temporary workspace directory"""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


@pytest.fixture
def valid_script_path(temp_workspace):
    """Copy of the two-statement sample script (comments, blank lines)"""
    path = temp_workspace / "valid_script.sql"
    shutil.copy(RESOURCES_DIR / "valid_script.sql", path)
    return path


@pytest.fixture
def empty_script_path(temp_workspace):
    path = temp_workspace / "empty_script.sql"
    shutil.copy(RESOURCES_DIR / "empty_script.sql", path)
    return path


@pytest.fixture
def write_script(temp_workspace):
    """Write SQL text to a file in the workspace and return its path"""

    def _write(text: str, name: str = "script.sql") -> Path:
        path = temp_workspace / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def trigger_script():
    """Table plus a trigger whose body contains a semicolon"""
    return (
        "CREATE TABLE KDFMetadata (\n"
        "    id      INTEGER     PRIMARY KEY,\n"
        "    value   TEXT        NOT NULL\n"
        ");\n"
        "CREATE TRIGGER KDFMetadataLimit\n"
        "BEFORE INSERT ON KDFMetadata\n"
        "WHEN (SELECT COUNT(*) FROM KDFMetadata) >= 1\n"
        "BEGIN\n"
        "    SELECT RAISE(FAIL, 'Only one row allowed in KDFMetadata');\n"
        "END;\n"
    )
