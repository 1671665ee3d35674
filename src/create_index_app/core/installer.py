"""Dependency installation for a scaffolded project."""

from __future__ import annotations

import logging
from pathlib import Path

from create_index_app.core.protocols import PackageManagerClient

logger = logging.getLogger(__name__)


class PackageInstaller:
    """Runs the selected package manager's install in the project.

    Output is streamed live by the client; a non-zero exit surfaces as
    :class:`~create_index_app.exceptions.PackageManagerError` and is
    never retried.
    """

    def __init__(self, client: PackageManagerClient) -> None:
        self._client: PackageManagerClient = client

    async def install(self, target: Path, *, verbose: bool = False) -> None:
        logger.debug("Installing packages in %s with %s", target, self._client.name)
        await self._client.install_all(target, verbose=verbose)
