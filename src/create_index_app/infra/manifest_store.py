"""JSON-file implementation of :class:`ManifestStore`.

Manifests are plain ``dict`` values; key order is preserved in both
directions so script ordering survives a load/write cycle.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from create_index_app.exceptions import ManifestError, ManifestNotFoundError


class JsonManifestStore:
    """Reads and writes ``package.json`` files with a 2-space indent."""

    def load(self, path: Path) -> dict[str, Any]:
        """Parse the JSON object at *path*.

        Raises
        ------
        ManifestNotFoundError
            When *path* does not exist.
        ManifestError
            When the file is unreadable, not JSON, or not an object.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise ManifestNotFoundError(f"No manifest found at {path}.") from exc
        except OSError as exc:
            raise ManifestError(f"Cannot read {path}: {exc}") from exc

        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestError(f"{path} is not valid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise ManifestError(f"{path} does not contain a JSON object.")
        return data

    def write(self, path: Path, manifest: dict[str, Any]) -> None:
        text = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ManifestError(f"Cannot write {path}: {exc}") from exc
