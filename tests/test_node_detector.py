"""Tests for Node.js detection (infra/node_detector.py).

PATH lookup and the version probe are mocked — no system dependency.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from create_index_app.exceptions import NodeRuntimeError
from create_index_app.infra.node_detector import (
    NodeStatus,
    _platform_install_commands,
    detect_node,
    parse_major,
    require_node,
)

_MODULE = "create_index_app.infra.node_detector"


class TestParseMajor:
    @pytest.mark.parametrize(
        ("raw", "major"),
        [("v20.11.1", 20), ("18.0.0", 18), ("v8", 8), ("  v10.24.1\n", 10)],
    )
    def test_parses(self, raw: str, major: int) -> None:
        assert parse_major(raw) == major

    def test_unparsable(self) -> None:
        assert parse_major("nightly") is None


class TestDetectNode:
    @patch(f"{_MODULE}.probe_version", return_value="v20.11.1")
    @patch(f"{_MODULE}.resolve_executable", return_value="/usr/bin/node")
    def test_found(self, _which: MagicMock, _probe: MagicMock) -> None:
        status = detect_node()
        assert status.found is True
        assert status.major == 20
        assert status.supported is True
        assert status.install_commands == ()

    @patch(f"{_MODULE}.probe_version")
    @patch(f"{_MODULE}.resolve_executable", return_value=None)
    def test_missing(self, _which: MagicMock, mock_probe: MagicMock) -> None:
        status = detect_node()
        assert status.found is False
        assert status.supported is False
        assert len(status.install_commands) > 0
        mock_probe.assert_not_called()

    @patch(f"{_MODULE}.probe_version", return_value="v8.17.0")
    @patch(f"{_MODULE}.resolve_executable", return_value="/usr/bin/node")
    def test_too_old(self, _which: MagicMock, _probe: MagicMock) -> None:
        status = detect_node()
        assert status.found is True
        assert status.supported is False
        assert len(status.install_commands) > 0


class TestRequireNode:
    @patch(f"{_MODULE}.detect_node")
    def test_supported(self, mock_detect: MagicMock) -> None:
        expected = NodeStatus(True, None, "v20.0.0", 20, ())
        mock_detect.return_value = expected
        assert require_node() is expected

    @patch(f"{_MODULE}.detect_node")
    def test_missing_raises_with_hint(self, mock_detect: MagicMock) -> None:
        mock_detect.return_value = NodeStatus(False, None, None, None, ("brew install node",))
        with pytest.raises(NodeRuntimeError, match="not installed") as exc_info:
            require_node()
        assert exc_info.value.hint is not None
        assert "brew install node" in exc_info.value.hint

    @patch(f"{_MODULE}.detect_node")
    def test_old_version_raises(self, mock_detect: MagicMock) -> None:
        mock_detect.return_value = NodeStatus(True, None, "v8.1.0", 8, ("brew install node",))
        with pytest.raises(NodeRuntimeError, match="out of date"):
            require_node()


class TestPlatformInstallCommands:
    @pytest.mark.parametrize(
        ("system", "needle"),
        [
            ("Windows", "winget"),
            ("Linux", "apt"),
            ("Darwin", "brew"),
            ("Plan9", "nodejs.org"),
        ],
    )
    def test_per_platform(self, system: str, needle: str) -> None:
        with patch(f"{_MODULE}.platform.system", return_value=system):
            commands = _platform_install_commands()
        assert any(needle in cmd for cmd in commands)
