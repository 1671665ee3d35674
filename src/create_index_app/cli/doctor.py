"""``create-index-app --doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the machine can scaffold and install a project.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys

from create_index_app.cli import exit_codes
from create_index_app.cli.console import console
from create_index_app.core.models import PackageManager
from create_index_app.infra.node_detector import NodeStatus, detect_node
from create_index_app.infra.package_managers import get_client
from create_index_app.utils.constants import MIN_NODE_MAJOR, MIN_PYTHON
from create_index_app.version import __version__

Check = tuple[str, str, str]

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _tool_version_check() -> Check:
    return "create-index-app", __version__, _OK


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= MIN_PYTHON
    required = ".".join(str(part) for part in MIN_PYTHON)
    status = _OK if ok else f"[red]FAIL (>={required} required)[/red]"
    return "Python", version, status


def _node_check(status_obj: NodeStatus) -> Check:
    """Return (label, value, status) for the Node.js row."""
    if not status_obj.found:
        return "Node.js", "not found", "[red]FAIL[/red]"
    value = status_obj.version or "unknown"
    if not status_obj.supported:
        return "Node.js", value, f"[red]FAIL (>=v{MIN_NODE_MAJOR} required)[/red]"
    return "Node.js", value, _OK


def _package_manager_check(manager: PackageManager) -> Check:
    """Return (label, value, status) for one package manager row.

    npm is required; yarn and pnpm are optional and only warn.
    """
    version = get_client(manager).version()
    if version is not None:
        return manager.value, version, _OK
    if manager.is_default:
        return manager.value, "not found", "[red]FAIL[/red]"
    return manager.value, "not found", _WARN


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, _OK


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\ncreate-index-app doctor", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"{'Component':<18} {'Value':<30} {'Status':<8}", file=sys.stderr)
    print("-" * 60, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<18} {value:<30} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


def collect_checks(node_status: NodeStatus) -> list[Check]:
    return [
        _tool_version_check(),
        _python_version_check(),
        _node_check(node_status),
        *(_package_manager_check(manager) for manager in PackageManager),
        _os_check(),
    ]


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all critical checks pass,
        :data:`exit_codes.GENERAL_ERROR` if a critical check fails.
    """
    node_status = detect_node()
    checks = collect_checks(node_status)
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="create-index-app doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=16)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()

    if not node_status.supported and node_status.install_commands:
        console.print("[yellow]A supported Node.js is not installed.[/yellow]")
        console.print("Install using one of the following commands:\n")
        for cmd in node_status.install_commands:
            console.print(f"  [bold]{cmd}[/bold]")
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
