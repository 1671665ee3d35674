"""Custom exception hierarchy for create-index-app.

All exceptions that cross layer boundaries must inherit from
:class:`CreateIndexAppError`.  Raw ``OSError``, JSON and subprocess
failures must NEVER propagate beyond the infrastructure layer — they
are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
CreateIndexAppError
├── ConfigurationError
│   ├── UsageError
│   ├── ConflictingPackageManagerError
│   ├── PackageManagerNotFoundError
│   ├── MissingTargetError
│   ├── MissingTemplateError
│   ├── UnexpectedArgumentsError
│   └── TargetExistsError
├── TrustError
│   ├── VerificationUnavailableError
│   └── UnauthorizedTemplateError
├── FilesystemError
│   └── ManifestError
│       └── ManifestNotFoundError
└── SubprocessError
    ├── PackageManagerError
    └── NodeRuntimeError
"""

from __future__ import annotations

from create_index_app.utils.constants import ISSUES_URL


class CreateIndexAppError(Exception):
    """Base exception for all create-index-app errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Arguments / configuration ---------------------------------------------

class ConfigurationError(CreateIndexAppError):
    """Raised when the command-line arguments are missing or inconsistent."""


class UsageError(ConfigurationError):
    """Raised when argparse rejects the command line (unknown flag, etc.)."""


class ConflictingPackageManagerError(ConfigurationError):
    """Raised when both ``--useYarn`` and ``--usePnpm`` are given."""


class PackageManagerNotFoundError(ConfigurationError):
    """Raised when the requested package manager is not installed."""


class MissingTargetError(ConfigurationError):
    """Raised when no target directory was given."""


class MissingTemplateError(ConfigurationError):
    """Raised when ``--template`` is missing or has no value."""


class UnexpectedArgumentsError(ConfigurationError):
    """Raised when more than one positional argument is given."""


class TargetExistsError(ConfigurationError):
    """Raised when the target directory exists and ``--force`` is not set."""


# --- Template trust --------------------------------------------------------

class TrustError(CreateIndexAppError):
    """Raised when a template cannot be confirmed as authorized."""


class VerificationUnavailableError(TrustError):
    """Raised when template metadata cannot be read or queried."""


class UnauthorizedTemplateError(TrustError):
    """Raised when a template lacks the sentinel keyword."""


# --- Filesystem ------------------------------------------------------------

class FilesystemError(CreateIndexAppError):
    """Raised when a filesystem operation on the project fails."""


class ManifestError(FilesystemError):
    """Raised when a ``package.json`` cannot be read, parsed or written."""


class ManifestNotFoundError(ManifestError):
    """Raised when the expected ``package.json`` does not exist."""


# --- External tools --------------------------------------------------------

class SubprocessError(CreateIndexAppError):
    """Raised when an external command fails."""


class PackageManagerError(SubprocessError):
    """Raised when a package manager command exits unsuccessfully.

    When the command's output was captured rather than streamed, it is
    kept on :attr:`output` so the CLI can show it after the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        output: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.output: str | None = output


class NodeRuntimeError(SubprocessError):
    """Raised when Node.js is missing or older than the supported minimum."""


def issue_tracker_hint(lead: str) -> str:
    """Return *lead* followed by a pointer to the project's issue tracker."""
    return f"{lead} create an issue here:\n{ISSUES_URL}"
