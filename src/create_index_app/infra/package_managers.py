"""Package-manager adapters satisfying :class:`PackageManagerClient`.

Each manager differs only in how it spells "install" and how verbosity
is toggled; everything else lives in :class:`_BaseClient`.  Process
failures are mapped to :class:`~create_index_app.exceptions.PackageManagerError`.
"""

from __future__ import annotations

from pathlib import Path

from create_index_app.core.models import PackageManager
from create_index_app.exceptions import PackageManagerError
from create_index_app.infra.process import ProcessResult, probe_version, run_command


class _BaseClient:
    """Shared behaviour for all package-manager clients."""

    name: str = ""

    # ------------------------------------------------------------------
    # Command construction (pure, overridden per manager)
    # ------------------------------------------------------------------

    def install_dependency_args(
        self, name: str, *, verbose: bool, ignore_scripts: bool
    ) -> list[str]:
        raise NotImplementedError

    def install_all_args(self, *, verbose: bool) -> list[str]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def check_available(self) -> bool:
        return self.version() is not None

    def version(self) -> str | None:
        return probe_version(self.name)

    async def install_dependency(
        self,
        name: str,
        cwd: Path,
        *,
        verbose: bool = False,
        ignore_scripts: bool = True,
    ) -> None:
        argv = [
            self.name,
            *self.install_dependency_args(
                name, verbose=verbose, ignore_scripts=ignore_scripts
            ),
        ]
        result = await run_command(argv, cwd, capture=True)
        self._check(result, f"Could not fetch template {name!r} with {self.name}.")

    async def install_all(self, cwd: Path, *, verbose: bool = False) -> None:
        argv = [self.name, *self.install_all_args(verbose=verbose)]
        result = await run_command(argv, cwd, capture=False)
        self._check(result, f"{self.name} install failed (exit code {result.returncode}).")

    def _check(self, result: ProcessResult, message: str) -> None:
        if result.ok:
            return
        raise PackageManagerError(
            message,
            hint="Check your network connection and package manager configuration.",
            output=result.output or None,
        )


class NpmClient(_BaseClient):
    name = "npm"

    def install_dependency_args(
        self, name: str, *, verbose: bool, ignore_scripts: bool
    ) -> list[str]:
        args = ["install", name]
        if ignore_scripts:
            args.append("--ignore-scripts")
        args += ["--loglevel", "verbose" if verbose else "error"]
        return args

    def install_all_args(self, *, verbose: bool) -> list[str]:
        return ["install", "--loglevel", "verbose" if verbose else "error"]


class YarnClient(_BaseClient):
    name = "yarn"

    def install_dependency_args(
        self, name: str, *, verbose: bool, ignore_scripts: bool
    ) -> list[str]:
        args = ["add", name]
        if ignore_scripts:
            args.append("--ignore-scripts")
        args.append("--verbose" if verbose else "--silent")
        return args

    def install_all_args(self, *, verbose: bool) -> list[str]:
        return ["--verbose" if verbose else "--silent"]


class PnpmClient(_BaseClient):
    name = "pnpm"

    def install_dependency_args(
        self, name: str, *, verbose: bool, ignore_scripts: bool
    ) -> list[str]:
        args = ["add", name]
        if ignore_scripts:
            args.append("--ignore-scripts")
        args.append(f"--reporter={'default' if verbose else 'silent'}")
        return args

    def install_all_args(self, *, verbose: bool) -> list[str]:
        return ["install", f"--reporter={'default' if verbose else 'silent'}"]


_CLIENTS: dict[PackageManager, type[_BaseClient]] = {
    PackageManager.NPM: NpmClient,
    PackageManager.YARN: YarnClient,
    PackageManager.PNPM: PnpmClient,
}


def get_client(manager: PackageManager) -> _BaseClient:
    """Return a fresh client for *manager*."""
    return _CLIENTS[manager]()
