"""
Global fixtures live here

This tells pytest how to prepare a Runtime and sample documents for tests.
"""
import json
import pytest
from pathlib import Path
from nestpath.core.runtime import build_runtime, Runtime

@pytest.fixture
def settings_dir(tmp_path: Path) -> Path:
    """A throwaway settings directory, so tests never touch the user's config."""
    return tmp_path / "nestpath_settings"

@pytest.fixture
def test_runtime(settings_dir: Path) -> Runtime:
    """
    Creates a temporary Runtime for testing
    """
    rt = build_runtime(settings_dir=settings_dir, verbose=False)
    # return the runtime to the test
    yield rt

@pytest.fixture
def config_doc() -> dict:
    """A nested document with a literal dotted key and a list of records."""
    return {
        "app": {"name": "demo", "debug": False, "port": 8000},
        "db.host": "literal-host",
        "db": {"host": "nested-host", "replicas": ["r1", "r2"]},
        "users": [
            {"id": 1, "name": "ada", "address": {"city": "London"}},
            {"id": 2, "name": "grace", "address": {"city": "New York"}},
        ],
    }

@pytest.fixture
def config_file(tmp_path: Path, config_doc: dict) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config_doc), encoding="utf-8")
    return path
