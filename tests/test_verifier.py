"""Tests for template verification (core/verifier.py).

The registry is an ``AsyncMock``; local templates use the real JSON
manifest store on ``tmp_path``.

Coverage:
* Sentinel present / absent for local and remote sources.
* Fail-closed behaviour on unreadable manifests and registry errors.
* Remote sources never touch the manifest store (and vice versa).
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from create_index_app.core.models import LocalTemplate, RemoteTemplate
from create_index_app.core.verifier import TemplateVerifier
from create_index_app.exceptions import (
    UnauthorizedTemplateError,
    VerificationUnavailableError,
)
from create_index_app.infra.manifest_store import JsonManifestStore
from create_index_app.utils.constants import ISSUES_URL, SENTINEL_KEYWORD


def _registry(result: Any = None, *, error: Exception | None = None) -> AsyncMock:
    registry = AsyncMock()
    if error is not None:
        registry.fetch_keywords.side_effect = error
    else:
        registry.fetch_keywords.return_value = result
    return registry


# ---------------------------------------------------------------------------
# Local templates
# ---------------------------------------------------------------------------

class TestLocalVerification:
    async def test_authorized_template_passes(self, template_dir: Path) -> None:
        registry = _registry()
        verifier = TemplateVerifier(JsonManifestStore(), registry)

        await verifier.verify(LocalTemplate(path=template_dir))

        registry.fetch_keywords.assert_not_called()

    @pytest.mark.parametrize(
        "keywords",
        [None, [], ["index", "template"], "index"],
    )
    async def test_missing_sentinel_fails(
        self,
        tmp_path: Path,
        write_manifest: Callable[[Path, dict[str, Any]], Path],
        template_manifest: Callable[..., dict[str, Any]],
        keywords: Any,
    ) -> None:
        directory = tmp_path / "tpl"
        write_manifest(directory, template_manifest(keywords=keywords))
        verifier = TemplateVerifier(JsonManifestStore(), _registry())

        with pytest.raises(UnauthorizedTemplateError) as exc_info:
            await verifier.verify(LocalTemplate(path=directory))
        assert exc_info.value.hint is not None
        assert ISSUES_URL in exc_info.value.hint

    async def test_single_string_sentinel_passes(
        self,
        tmp_path: Path,
        write_manifest: Callable[[Path, dict[str, Any]], Path],
    ) -> None:
        directory = tmp_path / "tpl"
        write_manifest(directory, {"keywords": SENTINEL_KEYWORD})
        verifier = TemplateVerifier(JsonManifestStore(), _registry())

        await verifier.verify(LocalTemplate(path=directory))

    async def test_missing_manifest_fails_closed(self, tmp_path: Path) -> None:
        verifier = TemplateVerifier(JsonManifestStore(), _registry())

        with pytest.raises(VerificationUnavailableError):
            await verifier.verify(LocalTemplate(path=tmp_path / "nowhere"))

    async def test_invalid_manifest_fails_closed(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
        verifier = TemplateVerifier(JsonManifestStore(), _registry())

        with pytest.raises(VerificationUnavailableError):
            await verifier.verify(LocalTemplate(path=tmp_path))


# ---------------------------------------------------------------------------
# Remote templates
# ---------------------------------------------------------------------------

class TestRemoteVerification:
    async def test_authorized_package_passes(self) -> None:
        store = MagicMock()
        registry = _registry(["leaf", SENTINEL_KEYWORD])
        verifier = TemplateVerifier(store, registry)

        await verifier.verify(RemoteTemplate(name="@org/pkg"))

        registry.fetch_keywords.assert_awaited_once_with("@org/pkg")
        store.load.assert_not_called()

    @pytest.mark.parametrize("keywords", [None, [], ["leaf"]])
    async def test_missing_sentinel_fails(self, keywords: Any) -> None:
        verifier = TemplateVerifier(MagicMock(), _registry(keywords))

        with pytest.raises(UnauthorizedTemplateError, match="@org/pkg"):
            await verifier.verify(RemoteTemplate(name="@org/pkg"))

    async def test_registry_unavailable_propagates(self) -> None:
        error = VerificationUnavailableError("npm info failed")
        verifier = TemplateVerifier(MagicMock(), _registry(error=error))

        with pytest.raises(VerificationUnavailableError) as exc_info:
            await verifier.verify(RemoteTemplate(name="@org/pkg"))
        assert exc_info.value is error

    async def test_unexpected_registry_error_fails_closed(self) -> None:
        verifier = TemplateVerifier(MagicMock(), _registry(error=RuntimeError("boom")))

        with pytest.raises(VerificationUnavailableError, match="boom"):
            await verifier.verify(RemoteTemplate(name="@org/pkg"))
