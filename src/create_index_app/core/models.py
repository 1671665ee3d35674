"""Domain models for create-index-app.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and trivial derivations.  They carry zero
I/O and no dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from create_index_app.utils.constants import DEPENDENCY_DIR, LOCAL_TEMPLATE_PREFIX


# ---------------------------------------------------------------------------
# Package managers
# ---------------------------------------------------------------------------

class PackageManager(str, enum.Enum):
    """Package manager used to install the scaffolded project."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def is_default(self) -> bool:
        return self is PackageManager.NPM


# ---------------------------------------------------------------------------
# Install request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InstallRequest:
    """Validated command-line request.  Built once, never mutated."""

    template_identifier: str
    """Template name as given on the command line (registry name or path)."""

    package_manager: PackageManager

    target_path: Path
    """Absolute path of the directory to scaffold into."""

    force_overwrite: bool = False

    verbose: bool = False


# ---------------------------------------------------------------------------
# Template sources
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LocalTemplate:
    """A template directory on the local filesystem."""

    path: Path
    """Absolute path to the template directory."""

    def location(self, target: Path) -> Path:
        return self.path


@dataclass(frozen=True, slots=True)
class RemoteTemplate:
    """A template published to the package registry."""

    name: str
    """Registry package name, possibly scoped (``@org/pkg``)."""

    def location(self, target: Path) -> Path:
        """Where the package lands once installed into *target*."""
        return target.joinpath(DEPENDENCY_DIR, *self.name.split("/"))


TemplateSource = LocalTemplate | RemoteTemplate


def parse_template_source(identifier: str, cwd: Path) -> TemplateSource:
    """Classify *identifier* as a local path or a registry package.

    Identifiers starting with ``.`` are paths relative to *cwd*;
    everything else is treated as a registry package name.
    """
    if identifier.startswith(LOCAL_TEMPLATE_PREFIX):
        return LocalTemplate(path=(cwd / identifier).resolve())
    return RemoteTemplate(name=identifier)
