"""Fixed values shared across layers.

Centralised here so that every layer refers to a single, tested value
rather than repeating literals.
"""

from __future__ import annotations

SENTINEL_KEYWORD: str = "create-index-app--template"
"""Keyword a template's ``package.json`` must list to be scaffolded from."""

MANIFEST_NAME: str = "package.json"

PLACEHOLDER_MANIFEST: dict[str, str] = {"name": "my-ndx-app"}
"""Stub manifest written before the template lands in the target."""

DEPENDENCY_DIR: str = "node_modules"

SCAFFOLD_ONLY_PATHS: tuple[str, ...] = (
    "package-lock.json",
    DEPENDENCY_DIR,
    ".gitignore",
    ".npmignore",
    "LICENSE",
)
"""Paths removed from the target once the template has been copied."""

KEPT_MANIFEST_FIELDS: tuple[str, ...] = (
    "scripts",
    "webDependencies",
    "dependencies",
    "devDependencies",
)
"""Manifest fields that survive cleaning, in output order."""

PREFERRED_SCRIPT_ORDER: tuple[str, ...] = ("prepare", "start", "build", "test")

LOCAL_TEMPLATE_PREFIX: str = "."

MIN_NODE_MAJOR: int = 10

MIN_PYTHON: tuple[int, int] = (3, 10)

ISSUES_URL: str = "https://github.com/indexorg/create-index-app/issues"

HOMEPAGE_URL: str = "https://indexforwp.com/leaf"
