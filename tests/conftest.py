"""
Shared fixtures — sample catalogs on disk and in memory.
"""

import json
import logging
from pathlib import Path

import pytest

from launchpad.catalog_loader import parse_catalog
from launchpad.models import Catalog

SAMPLE = {
    "categories": [
        {
            "name": "Dev Tools",
            "icon": "icons/dev.ico",
            "apps": [
                {"name": "Editor", "exec": "editor --new", "description": "Plain text"},
                {"name": "Terminal", "exec": "term"},
            ],
        },
        {
            "name": "Games",
            "apps": [
                {"name": "Chess", "exec": "chess"},
                {"name": "Solitaire", "exec": "sol"},
            ],
        },
        {
            "name": "Web",
            "apps": [{"name": "Browser", "exec": "browser https://example.com"}],
        },
    ]
}


@pytest.fixture
def sample_data() -> dict:
    return json.loads(json.dumps(SAMPLE))


@pytest.fixture
def catalog(sample_data) -> Catalog:
    return parse_catalog(sample_data)


@pytest.fixture
def write_catalog(tmp_path: Path):
    """Write a catalog document under tmp_path and return its path."""
    def _write(data, rel: str = "apps.json") -> Path:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def restore_root_logger():
    """configure_logging touches the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
