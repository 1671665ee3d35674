"""Subprocess helpers shared by the package-manager adapters.

Two flavours exist: a blocking probe (``<tool> --version``) used during
argument validation and diagnostics, and an asyncio runner used for
long-running installs and registry queries.

Rules
-----
* Executables are resolved through :func:`shutil.which` so ``npm.cmd``
  style shims work on Windows.
* Nothing here raises raw ``OSError``; callers receive a
  :class:`ProcessResult` or ``None``.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Outcome of a finished child process.

    Attributes
    ----------
    returncode : int
        Exit status; ``127`` when the executable could not be started.
    output : str
        Captured stdout (and stderr when combined).  Empty when the
        streams were inherited.
    """

    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def resolve_executable(name: str) -> str | None:
    """Return the full path of *name* on PATH, or ``None``."""
    return shutil.which(name)


def probe_version(name: str) -> str | None:
    """Run ``<name> --version`` and return its first output line.

    Returns ``None`` when the tool is missing or exits non-zero.
    """
    executable = resolve_executable(name)
    if executable is None:
        return None
    try:
        completed = subprocess.run(
            [executable, "--version"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.debug("Version probe for %s failed: %s", name, exc)
        return None
    lines = completed.stdout.strip().splitlines()
    return lines[0].strip() if lines else ""


async def run_command(
    argv: list[str],
    cwd: Path | None = None,
    *,
    capture: bool = True,
    combine_stderr: bool = True,
) -> ProcessResult:
    """Run *argv* asynchronously and wait for it to exit.

    Parameters
    ----------
    argv:
        Command and arguments; ``argv[0]`` is resolved on PATH.
    cwd:
        Working directory for the child process.
    capture:
        Capture stdout into :attr:`ProcessResult.output`.  When ``False``
        both streams are inherited and the user sees output live.
    combine_stderr:
        When capturing, fold stderr into the same buffer; otherwise
        stderr is captured separately and discarded.
    """
    executable = resolve_executable(argv[0])
    if executable is None:
        return ProcessResult(returncode=127, output=f"{argv[0]}: command not found")

    stdout = asyncio.subprocess.PIPE if capture else None
    stderr: int | None = None
    if capture:
        stderr = asyncio.subprocess.STDOUT if combine_stderr else asyncio.subprocess.PIPE

    logger.debug("Running %s (cwd=%s)", " ".join(argv), cwd)
    try:
        process = await asyncio.create_subprocess_exec(
            executable,
            *argv[1:],
            cwd=str(cwd) if cwd else None,
            stdout=stdout,
            stderr=stderr,
        )
    except OSError as exc:
        return ProcessResult(returncode=127, output=f"{argv[0]}: {exc}")

    out_bytes, _ = await process.communicate()
    output = (out_bytes or b"").decode("utf-8", errors="replace")
    return ProcessResult(returncode=process.returncode or 0, output=output)
