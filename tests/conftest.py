import json
from pathlib import Path

import pytest


@pytest.fixture
def write_json():
    """Write data as JSON to path, creating parent directories."""

    def _write(path: Path, data) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def locales_dir(tmp_path, write_json):
    """Root with one default file and two single-file locales."""
    root = tmp_path / "locales"
    write_json(root / "default.json", {"a": "X", "only_default": "D"})
    write_json(
        root / "en" / "messages.json",
        {"a": "Y", "welcome": "Hello {name}!", "page": {"title": "Home"}},
    )
    write_json(root / "ru" / "messages.json", {"a": "Я", "welcome": "Привет, {name}!"})
    return root
