"""Tests for the npm registry keyword query (infra/registry.py).

``run_command`` is patched — no network access.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from create_index_app.exceptions import VerificationUnavailableError
from create_index_app.infra.process import ProcessResult
from create_index_app.infra.registry import NpmRegistry

_RUN = "create_index_app.infra.registry.run_command"


async def _fetch(stdout: str, returncode: int = 0) -> list[str] | None:
    with patch(_RUN, new=AsyncMock()) as run:
        run.return_value = ProcessResult(returncode=returncode, output=stdout)
        return await NpmRegistry().fetch_keywords("@org/pkg")


class TestFetchKeywords:
    async def test_queries_keywords_only(self) -> None:
        with patch(_RUN, new=AsyncMock()) as run:
            run.return_value = ProcessResult(returncode=0, output='["a"]')
            await NpmRegistry().fetch_keywords("@org/pkg")

        run.assert_awaited_once_with(
            ["npm", "info", "@org/pkg", "keywords", "--json"],
            capture=True,
            combine_stderr=False,
        )

    async def test_list_answer(self) -> None:
        assert await _fetch('[\n  "leaf",\n  "create-index-app--template"\n]\n') == [
            "leaf",
            "create-index-app--template",
        ]

    async def test_single_string_answer(self) -> None:
        assert await _fetch('"leaf"') == ["leaf"]

    async def test_empty_answer_means_no_keywords(self) -> None:
        assert await _fetch("") is None

    async def test_null_answer(self) -> None:
        assert await _fetch("null") is None

    async def test_query_failure_fails_closed(self) -> None:
        with pytest.raises(VerificationUnavailableError, match="Cannot verify"):
            await _fetch('{"error": {"code": "E404"}}', returncode=1)

    async def test_garbage_answer_fails_closed(self) -> None:
        with pytest.raises(VerificationUnavailableError):
            await _fetch("npm WARN something")

    async def test_object_answer_fails_closed(self) -> None:
        with pytest.raises(VerificationUnavailableError):
            await _fetch('{"keywords": ["x"]}')
