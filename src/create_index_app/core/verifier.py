"""Template verification — the trust gate in front of every scaffold.

A template is usable only when its ``keywords`` list carries the
sentinel tag.  Verification fails closed: anything that prevents the
keywords from being read is an error, never a pass.
"""

from __future__ import annotations

import logging

from create_index_app.core.manifest import extract_keywords
from create_index_app.core.models import LocalTemplate, RemoteTemplate, TemplateSource
from create_index_app.core.protocols import KeywordRegistry, ManifestStore
from create_index_app.exceptions import (
    ManifestError,
    UnauthorizedTemplateError,
    VerificationUnavailableError,
    issue_tracker_hint,
)
from create_index_app.utils.constants import MANIFEST_NAME, SENTINEL_KEYWORD

logger = logging.getLogger(__name__)


class TemplateVerifier:
    """Confirms a :data:`TemplateSource` is an authorized template.

    Parameters
    ----------
    manifest_store:
        Reads the ``package.json`` of local templates.
    registry:
        Answers keyword queries for registry templates.
    """

    def __init__(self, manifest_store: ManifestStore, registry: KeywordRegistry) -> None:
        self._manifest_store: ManifestStore = manifest_store
        self._registry: KeywordRegistry = registry

    async def verify(self, source: TemplateSource) -> None:
        """Return silently when *source* is authorized.

        Raises
        ------
        VerificationUnavailableError
            When the keywords cannot be obtained.
        UnauthorizedTemplateError
            When the keywords lack the sentinel tag.
        """
        if isinstance(source, LocalTemplate):
            keywords = self._local_keywords(source)
            label = str(source.path)
        else:
            keywords = await self._remote_keywords(source)
            label = source.name

        logger.debug("Keywords for %s: %r", label, keywords)

        if not keywords or SENTINEL_KEYWORD not in keywords:
            raise UnauthorizedTemplateError(
                f"{label} is not an Index app template.",
                hint=issue_tracker_hint("Check the template name or"),
            )

    def _local_keywords(self, source: LocalTemplate) -> list[str] | None:
        try:
            manifest = self._manifest_store.load(source.path / MANIFEST_NAME)
        except ManifestError as exc:
            raise VerificationUnavailableError(
                f"Cannot read the template manifest: {exc}",
                hint=issue_tracker_hint("If you believe this is incorrect,"),
            ) from exc
        return extract_keywords(manifest)

    async def _remote_keywords(self, source: RemoteTemplate) -> list[str] | None:
        try:
            return await self._registry.fetch_keywords(source.name)
        except VerificationUnavailableError:
            raise
        except Exception as exc:
            raise VerificationUnavailableError(
                f"Cannot verify external template safely: {exc}",
                hint=issue_tracker_hint("If you believe this is incorrect,"),
            ) from exc
