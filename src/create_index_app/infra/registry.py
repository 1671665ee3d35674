"""npm-registry backed implementation of :class:`KeywordRegistry`.

Only the ``keywords`` field is requested (``npm info <pkg> keywords
--json``).  Every failure is reported as
:class:`~create_index_app.exceptions.VerificationUnavailableError` so the
verifier fails closed.
"""

from __future__ import annotations

import json
import logging

from create_index_app.exceptions import VerificationUnavailableError, issue_tracker_hint
from create_index_app.infra.process import run_command

logger = logging.getLogger(__name__)


class NpmRegistry:
    """Queries package keywords through the ``npm`` CLI."""

    async def fetch_keywords(self, name: str) -> list[str] | None:
        result = await run_command(
            ["npm", "info", name, "keywords", "--json"],
            capture=True,
            combine_stderr=False,
        )
        if not result.ok:
            logger.debug("npm info %s failed: %s", name, result.output)
            raise VerificationUnavailableError(
                f"Cannot verify external template {name!r} safely.",
                hint=issue_tracker_hint("If you believe this is incorrect,"),
            )
        return self._parse(name, result.output)

    @staticmethod
    def _parse(name: str, stdout: str) -> list[str] | None:
        text = stdout.strip()
        if not text:
            return None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise VerificationUnavailableError(
                f"Unreadable registry answer for {name!r}.",
                hint=issue_tracker_hint("If you believe this is incorrect,"),
            ) from exc
        if isinstance(data, str):
            return [data]
        if isinstance(data, list):
            return [str(keyword) for keyword in data]
        if data is None:
            return None
        raise VerificationUnavailableError(
            f"Unexpected registry answer for {name!r}.",
            hint=issue_tracker_hint("If you believe this is incorrect,"),
        )
