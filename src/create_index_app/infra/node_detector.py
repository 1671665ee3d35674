"""Infrastructure: Node.js detection and platform guidance.

Every package manager this tool drives runs on Node.js, so the runtime
is probed up front and the user gets install guidance when it is
missing or too old.

Rules
-----
* Detection via :func:`shutil.which` plus ``node --version``.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import re
from dataclasses import dataclass
from pathlib import Path

from create_index_app.exceptions import NodeRuntimeError
from create_index_app.infra.process import probe_version, resolve_executable
from create_index_app.utils.constants import MIN_NODE_MAJOR

_VERSION_RE = re.compile(r"v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NodeStatus:
    """Result of a Node.js detection probe.

    Attributes
    ----------
    found : bool
        Whether ``node`` was located on PATH and answered.
    path : Path | None
        Absolute path to the ``node`` binary, or ``None``.
    version : str | None
        Version string as reported (``"v20.11.1"``), or ``None``.
    major : int | None
        Parsed major version, or ``None`` when unparsable.
    install_commands : tuple[str, ...]
        Suggested install commands for the current platform.  Empty
        when a supported Node.js is present.
    """

    found: bool
    path: Path | None
    version: str | None
    major: int | None
    install_commands: tuple[str, ...]

    @property
    def supported(self) -> bool:
        return self.found and self.major is not None and self.major >= MIN_NODE_MAJOR


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def parse_major(version: str) -> int | None:
    """Extract the major component of a ``node --version`` string."""
    match = _VERSION_RE.match(version.strip())
    if match is None:
        return None
    return int(match.group(1))


def detect_node() -> NodeStatus:
    """Probe the system for Node.js.

    Returns a :class:`NodeStatus` whether or not Node.js is present —
    the caller decides whether to abort or merely warn.
    """
    executable = resolve_executable("node")
    version = probe_version("node") if executable is not None else None

    if executable is None or version is None:
        return NodeStatus(
            found=False,
            path=None,
            version=None,
            major=None,
            install_commands=_platform_install_commands(),
        )

    major = parse_major(version)
    supported = major is not None and major >= MIN_NODE_MAJOR
    return NodeStatus(
        found=True,
        path=Path(executable).resolve(),
        version=version,
        major=major,
        install_commands=() if supported else _platform_install_commands(),
    )


def require_node() -> NodeStatus:
    """Return the :class:`NodeStatus` or raise :class:`NodeRuntimeError`."""
    status = detect_node()
    if status.supported:
        return status

    hint_lines: list[str] = []
    if status.install_commands:
        hint_lines.append("Install Node.js using one of:")
        hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
    hint = "\n".join(hint_lines) if hint_lines else None

    if not status.found:
        raise NodeRuntimeError("Node.js is not installed or not on PATH.", hint=hint)
    raise NodeRuntimeError(
        f"Node.js {status.version} is out of date and unsupported! "
        f"Please use Node.js v{MIN_NODE_MAJOR} or higher.",
        hint=hint,
    )


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "windows":
        return (
            "winget install OpenJS.NodeJS.LTS",
            "choco install nodejs-lts",
        )
    if system == "linux":
        return (
            "sudo apt install nodejs npm",
            "sudo dnf install nodejs",
            "sudo pacman -S nodejs npm",
        )
    if system == "darwin":
        return ("brew install node",)
    return ("Download Node.js from https://nodejs.org/",)
