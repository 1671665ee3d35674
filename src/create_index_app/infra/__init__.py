"""Infrastructure layer — external system integration.

This layer wraps all interaction with the package manager CLIs, the
npm registry, Node.js and the local filesystem.  Every raw ``OSError``
or subprocess failure is caught here and re-raised as a
:class:`~create_index_app.exceptions.CreateIndexAppError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Exposes concrete implementations of the core protocols.
"""

from create_index_app.infra.manifest_store import JsonManifestStore
from create_index_app.infra.node_detector import NodeStatus, detect_node, require_node
from create_index_app.infra.package_managers import (
    NpmClient,
    PnpmClient,
    YarnClient,
    get_client,
)
from create_index_app.infra.registry import NpmRegistry
from create_index_app.infra.workspace import LocalWorkspace

__all__: list[str] = [
    "JsonManifestStore",
    "LocalWorkspace",
    "NodeStatus",
    "NpmClient",
    "NpmRegistry",
    "PnpmClient",
    "YarnClient",
    "detect_node",
    "get_client",
    "require_node",
]
