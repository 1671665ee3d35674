"""Argument parsing and validation.

Turns raw ``argv`` into an immutable
:class:`~create_index_app.core.models.InstallRequest`.  Every rejection
is a :class:`~create_index_app.exceptions.ConfigurationError` subclass;
the error boundary in :mod:`create_index_app.cli.app` turns it into
exit status 1.

Package-manager flags keep their camelCase spelling (``--useYarn``,
``--usePnpm``).
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

from create_index_app.core.models import InstallRequest, PackageManager
from create_index_app.exceptions import (
    ConflictingPackageManagerError,
    MissingTargetError,
    MissingTemplateError,
    PackageManagerNotFoundError,
    TargetExistsError,
    UnexpectedArgumentsError,
    UsageError,
)
from create_index_app.version import __version__

logger = logging.getLogger(__name__)

AvailabilityProbe = Callable[[PackageManager], bool]


class _RaisingParser(argparse.ArgumentParser):
    """ArgumentParser that raises :class:`UsageError` instead of exiting 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=f"Run `{self.prog} --help` for usage.")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Supported forms:

    * ``create-index-app <dir> --template <name-or-path> [options]``
    * ``create-index-app --target <dir> --template <name-or-path> [options]``
    * ``create-index-app --doctor``
    * ``create-index-app --version``
    """
    parser = _RaisingParser(
        prog="create-index-app",
        description="Scaffold a new Index project from a template.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "positionals",
        nargs="*",
        metavar="target-directory",
        help="Directory to create the project in.",
    )
    parser.add_argument(
        "--template",
        nargs="?",
        const=None,
        default=None,
        help="Registry package name, or a local path starting with '.'.",
    )
    parser.add_argument("--target", default=None, help="Directory to create the project in.")
    parser.add_argument(
        "--useYarn",
        dest="use_yarn",
        action="store_true",
        help="Install dependencies with yarn.",
    )
    parser.add_argument(
        "--usePnpm",
        dest="use_pnpm",
        action="store_true",
        help="Install dependencies with pnpm.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Allow scaffolding into an existing directory.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Pass verbose logging through to the package manager.",
    )
    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Check the local environment and exit.",
    )
    return parser


def validate_args(
    args: argparse.Namespace,
    *,
    cwd: Path,
    is_available: AvailabilityProbe,
) -> InstallRequest:
    """Validate parsed *args* and build the :class:`InstallRequest`.

    Parameters
    ----------
    args:
        Namespace produced by :func:`build_parser`.
    cwd:
        Directory relative targets are resolved against.
    is_available:
        Probe reporting whether a package manager is installed.

    Raises
    ------
    ConfigurationError
        One of its subclasses, for the first rule that fails.
    """
    if args.use_yarn and args.use_pnpm:
        raise ConflictingPackageManagerError(
            "You cannot use yarn and pnpm at the same time."
        )

    manager = PackageManager.NPM
    if args.use_yarn:
        manager = PackageManager.YARN
    elif args.use_pnpm:
        manager = PackageManager.PNPM

    if not manager.is_default and not is_available(manager):
        raise PackageManagerNotFoundError(
            f"{manager.value} doesn't seem to be installed.",
            hint=f"Install {manager.value} or drop the flag to use npm.",
        )

    positionals: list[str] = list(args.positionals)
    if not args.target and not positionals:
        raise MissingTargetError("Missing --target directory.")

    if not isinstance(args.template, str) or not args.template:
        raise MissingTemplateError("Missing --template argument.")

    if len(positionals) > 1:
        raise UnexpectedArgumentsError(
            f"Unexpected extra arguments: {' '.join(positionals[1:])}"
        )

    target_path = (cwd / (args.target or positionals[0])).resolve()
    if target_path.exists() and not args.force:
        raise TargetExistsError(
            f"{target_path} already exists.",
            hint="Use `--force` to overwrite this directory.",
        )

    request = InstallRequest(
        template_identifier=args.template,
        package_manager=manager,
        target_path=target_path,
        force_overwrite=bool(args.force),
        verbose=bool(args.verbose),
    )
    logger.debug("Validated request: %r", request)
    return request
