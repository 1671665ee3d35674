"""Pure manifest transformations.

Turns a template's ``package.json`` into the trimmed manifest of a
freshly scaffolded project.  No I/O — reading and writing is the job of
a :class:`~create_index_app.core.protocols.ManifestStore`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from create_index_app.utils.constants import KEPT_MANIFEST_FIELDS, PREFERRED_SCRIPT_ORDER


def order_scripts(scripts: Mapping[str, Any]) -> dict[str, Any]:
    """Return *scripts* with the well-known names first.

    ``prepare``, ``start``, ``build`` and ``test`` (whichever are present)
    lead in that fixed order; every other script follows in its original
    relative order.
    """
    ordered = {name: scripts[name] for name in PREFERRED_SCRIPT_ORDER if name in scripts}
    ordered.update(
        (name, value) for name, value in scripts.items() if name not in ordered
    )
    return ordered


def clean_manifest(manifest: Mapping[str, Any]) -> dict[str, Any]:
    """Drop every field except scripts and the dependency maps.

    Fields absent from *manifest* stay absent from the result.
    """
    cleaned: dict[str, Any] = {}
    for field in KEPT_MANIFEST_FIELDS:
        if field not in manifest:
            continue
        value = manifest[field]
        if field == "scripts" and isinstance(value, Mapping):
            value = order_scripts(value)
        cleaned[field] = value
    return cleaned


def extract_keywords(manifest: Mapping[str, Any]) -> list[str] | None:
    """Return the manifest's ``keywords`` as a list, or ``None``."""
    keywords = manifest.get("keywords")
    if isinstance(keywords, str):
        return [keywords]
    if isinstance(keywords, list):
        return [str(keyword) for keyword in keywords]
    return None
