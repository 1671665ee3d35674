"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so every service can be driven by test doubles.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class PackageManagerClient(Protocol):
    """Contract for a package manager CLI (npm, yarn, pnpm).

    Implementations map every process failure to
    :class:`~create_index_app.exceptions.PackageManagerError`.
    """

    name: str

    def check_available(self) -> bool:
        """Return ``True`` when the manager answers a version probe."""
        ...  # pragma: no cover

    def version(self) -> str | None:
        """Return the reported version, or ``None`` when unavailable."""
        ...  # pragma: no cover

    async def install_dependency(
        self,
        name: str,
        cwd: Path,
        *,
        verbose: bool = False,
        ignore_scripts: bool = True,
    ) -> None:
        """Install the single package *name* into *cwd*.

        Output is captured rather than streamed; on failure it is
        attached to the raised
        :class:`~create_index_app.exceptions.PackageManagerError`.
        """
        ...  # pragma: no cover

    async def install_all(self, cwd: Path, *, verbose: bool = False) -> None:
        """Install every dependency declared in *cwd*'s manifest.

        Output is streamed to the invoking terminal.
        """
        ...  # pragma: no cover


class KeywordRegistry(Protocol):
    """Contract for querying a registry package's ``keywords`` field."""

    async def fetch_keywords(self, name: str) -> list[str] | None:
        """Return the package keywords, or ``None`` when it has none.

        Raises
        ------
        VerificationUnavailableError
            When the registry cannot be queried or answers garbage.
        """
        ...  # pragma: no cover


class ManifestStore(Protocol):
    """Contract for reading and writing ``package.json`` documents."""

    def load(self, path: Path) -> dict[str, Any]:
        ...  # pragma: no cover

    def write(self, path: Path, manifest: dict[str, Any]) -> None:
        ...  # pragma: no cover


class Workspace(Protocol):
    """Contract for the filesystem operations of a scaffold."""

    def ensure_directory(self, path: Path) -> None:
        ...  # pragma: no cover

    def copy_tree(self, source: Path, destination: Path) -> None:
        """Copy *source* recursively into *destination*, overwriting files."""
        ...  # pragma: no cover

    def remove(self, path: Path) -> None:
        """Delete a file or directory tree; a missing *path* is not an error."""
        ...  # pragma: no cover
