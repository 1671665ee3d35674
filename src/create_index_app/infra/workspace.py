"""Local-disk implementation of :class:`Workspace`.

All ``OSError`` instances are translated to
:class:`~create_index_app.exceptions.FilesystemError`.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from create_index_app.exceptions import FilesystemError

logger = logging.getLogger(__name__)


class LocalWorkspace:
    """Filesystem operations used while scaffolding a project."""

    def ensure_directory(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Cannot create directory {path}: {exc}") from exc

    def copy_tree(self, source: Path, destination: Path) -> None:
        """Copy *source* into *destination*, overwriting existing files.

        When *destination* lives inside *source* (e.g. ``--template .``),
        it is skipped so the copy never recurses into itself.
        """
        if not source.is_dir():
            raise FilesystemError(f"Template directory {source} does not exist.")
        try:
            shutil.copytree(
                source,
                destination,
                dirs_exist_ok=True,
                ignore=_skip_path(destination.resolve()),
            )
        except (OSError, shutil.Error) as exc:
            raise FilesystemError(
                f"Cannot copy template from {source} to {destination}: {exc}"
            ) from exc

    def remove(self, path: Path) -> None:
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink(missing_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Cannot remove {path}: {exc}") from exc
        logger.debug("Removed %s", path)


def _skip_path(excluded: Path) -> Callable[[str, list[str]], set[str]]:
    """Build a :func:`shutil.copytree` ``ignore`` callback dropping *excluded*."""

    def ignore(directory: str, names: list[str]) -> set[str]:
        if Path(directory).resolve() != excluded.parent:
            return set()
        return {name for name in names if name == excluded.name}

    return ignore
