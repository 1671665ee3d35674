"""Project initialization — materializes a verified template on disk.

The steps run strictly in sequence, each awaited before the next
starts.  Any failure aborts the whole initialization; whatever was
already written stays on disk.

Guarantees
----------
* No direct filesystem or subprocess access — everything goes through
  the injected :class:`Workspace`, :class:`ManifestStore` and
  :class:`PackageManagerClient`.
* Only :class:`~create_index_app.exceptions.CreateIndexAppError`
  subclasses escape.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from create_index_app.core.manifest import clean_manifest
from create_index_app.core.models import InstallRequest, RemoteTemplate, TemplateSource
from create_index_app.core.protocols import ManifestStore, PackageManagerClient, Workspace
from create_index_app.utils.constants import (
    MANIFEST_NAME,
    PLACEHOLDER_MANIFEST,
    SCAFFOLD_ONLY_PATHS,
)

logger = logging.getLogger(__name__)


class ProjectInitializer:
    """Creates the target project from a verified template.

    Parameters
    ----------
    workspace:
        Filesystem operations (mkdir, recursive copy, removal).
    manifest_store:
        ``package.json`` reader/writer.
    fetcher:
        Package manager client used to download registry templates.
    """

    def __init__(
        self,
        workspace: Workspace,
        manifest_store: ManifestStore,
        fetcher: PackageManagerClient,
    ) -> None:
        self._workspace: Workspace = workspace
        self._manifest_store: ManifestStore = manifest_store
        self._fetcher: PackageManagerClient = fetcher

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def initialize(self, request: InstallRequest, source: TemplateSource) -> Path:
        """Scaffold *source* into ``request.target_path``.

        Returns the target directory.
        """
        target = request.target_path

        self._workspace.ensure_directory(target)
        self._manifest_store.write(target / MANIFEST_NAME, dict(PLACEHOLDER_MANIFEST))

        if isinstance(source, RemoteTemplate):
            logger.debug("Fetching %s into %s", source.name, target)
            await self._fetcher.install_dependency(
                source.name,
                target,
                verbose=request.verbose,
                ignore_scripts=True,
            )

        template_dir = source.location(target)
        logger.debug("Copying %s -> %s", template_dir, target)
        await asyncio.to_thread(self._workspace.copy_tree, template_dir, target)

        self.clean(target)
        return target

    def clean(self, target: Path) -> None:
        """Strip scaffold-only files and trim the manifest in *target*."""
        for name in SCAFFOLD_ONLY_PATHS:
            self._workspace.remove(target / name)

        manifest_path = target / MANIFEST_NAME
        manifest = self._manifest_store.load(manifest_path)
        self._manifest_store.write(manifest_path, clean_manifest(manifest))
