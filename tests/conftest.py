"""Shared pytest fixtures and configuration for the create-index-app suite.

Guidelines
----------
* No internet access in any test.
* Package managers and ``node`` are mocked at the infra boundary.
* Core tests drive services through protocol test doubles.
* Filesystem tests stay inside ``tmp_path``.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from create_index_app.utils.constants import SENTINEL_KEYWORD


def _write_manifest(directory: Path, manifest: dict[str, Any]) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "package.json"
    path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return path


def _template_manifest(**overrides: Any) -> dict[str, Any]:
    manifest: dict[str, Any] = {
        "name": "leaf-template",
        "version": "1.2.3",
        "keywords": ["index", SENTINEL_KEYWORD],
        "scripts": {"build": "leaf build", "start": "leaf dev", "lint": "eslint ."},
        "dependencies": {"leaf": "^1.0.0"},
        "devDependencies": {"eslint": "^8.0.0"},
        "license": "MIT",
    }
    manifest.update(overrides)
    return manifest


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A local template directory authorized with the sentinel keyword."""
    directory = tmp_path / "my-template"
    _write_manifest(directory, _template_manifest())
    (directory / "src").mkdir()
    (directory / "src" / "index.js").write_text("export default 1\n", encoding="utf-8")
    (directory / "LICENSE").write_text("MIT\n", encoding="utf-8")
    (directory / ".gitignore").write_text("node_modules\n", encoding="utf-8")
    (directory / ".npmignore").write_text("src\n", encoding="utf-8")
    (directory / "package-lock.json").write_text("{}\n", encoding="utf-8")
    return directory


@pytest.fixture
def write_manifest() -> Callable[[Path, dict[str, Any]], Path]:
    """Write ``package.json`` into a directory (created if needed)."""
    return _write_manifest


@pytest.fixture
def template_manifest() -> Callable[..., dict[str, Any]]:
    """Build an authorized template manifest with optional overrides."""
    return _template_manifest
