"""CLI application entry point and command routing for create-index-app.

This module is the **sole error boundary** for the entire application.
It catches :class:`~create_index_app.exceptions.CreateIndexAppError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  services, wired with infrastructure adapters.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from create_index_app.cli import exit_codes
from create_index_app.cli.args import build_parser, validate_args
from create_index_app.cli.console import console, escape
from create_index_app.core.models import (
    InstallRequest,
    PackageManager,
    RemoteTemplate,
    parse_template_source,
)
from create_index_app.exceptions import CreateIndexAppError, PackageManagerError

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _is_available(manager: PackageManager) -> bool:
    from create_index_app.infra.package_managers import get_client

    return get_client(manager).check_available()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

async def _scaffold(request: InstallRequest) -> int:
    """Verify, initialize and install a project.

    Flow:
    1. Instantiate infra adapters + core services.
    2. Verify the template (fails closed).
    3. Materialize the template in the target directory.
    4. Install dependencies with the selected package manager.
    """
    from create_index_app.cli.steps import print_done, print_step, print_summary
    from create_index_app.core.initializer import ProjectInitializer
    from create_index_app.core.installer import PackageInstaller
    from create_index_app.core.verifier import TemplateVerifier
    from create_index_app.infra.manifest_store import JsonManifestStore
    from create_index_app.infra.package_managers import NpmClient, get_client
    from create_index_app.infra.registry import NpmRegistry
    from create_index_app.infra.workspace import LocalWorkspace

    source = parse_template_source(request.template_identifier, Path.cwd())
    manifest_store = JsonManifestStore()

    print_step("Verifying template...")
    verifier = TemplateVerifier(manifest_store, NpmRegistry())
    await verifier.verify(source)

    print_summary(request.template_identifier, request.target_path)

    initializer = ProjectInitializer(LocalWorkspace(), manifest_store, NpmClient())
    if isinstance(source, RemoteTemplate) and not request.verbose:
        with console.status("Fetching template..."):
            target = await initializer.initialize(request, source)
    else:
        target = await initializer.initialize(request, source)

    console.print()
    print_step("Setting up packages...", "this might take a minute")
    installer = PackageInstaller(get_client(request.package_manager))
    await installer.install(target, verbose=request.verbose)

    print_done(target)
    return exit_codes.SUCCESS


def _handle_scaffold(request: InstallRequest) -> int:
    from create_index_app.cli.steps import print_intro
    from create_index_app.infra.node_detector import require_node

    require_node()
    print_intro()
    return asyncio.run(_scaffold(request))


def _handle_doctor() -> int:
    """Dispatch the ``--doctor`` diagnostics command."""
    from create_index_app.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the create-index-app CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    CreateIndexAppError
        For every validation, verification or tool failure; :func:`cli`
        maps it to :data:`exit_codes.GENERAL_ERROR`.
    """
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    _configure_logging(args.verbose)

    if args.doctor:
        return _handle_doctor()

    request = validate_args(args, cwd=Path.cwd(), is_available=_is_available)
    return _handle_scaffold(request)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CreateIndexAppError as exc:
        if isinstance(exc, PackageManagerError) and exc.output:
            print(exc.output, file=sys.stderr)
        console.print()
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
