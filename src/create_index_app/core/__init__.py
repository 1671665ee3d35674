"""Core / service layer — scaffold orchestration and pure transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem, network or subprocess access — only through
  the protocols in :mod:`create_index_app.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from create_index_app.core.initializer import ProjectInitializer
from create_index_app.core.installer import PackageInstaller
from create_index_app.core.manifest import clean_manifest, order_scripts
from create_index_app.core.models import (
    InstallRequest,
    LocalTemplate,
    PackageManager,
    RemoteTemplate,
    TemplateSource,
    parse_template_source,
)
from create_index_app.core.protocols import (
    KeywordRegistry,
    ManifestStore,
    PackageManagerClient,
    Workspace,
)
from create_index_app.core.verifier import TemplateVerifier

__all__: list[str] = [
    "InstallRequest",
    "KeywordRegistry",
    "LocalTemplate",
    "ManifestStore",
    "PackageInstaller",
    "PackageManager",
    "PackageManagerClient",
    "ProjectInitializer",
    "RemoteTemplate",
    "TemplateSource",
    "TemplateVerifier",
    "Workspace",
    "clean_manifest",
    "order_scripts",
    "parse_template_source",
]
