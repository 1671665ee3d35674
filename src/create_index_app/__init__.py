"""create-index-app — scaffold a new Index project from a template.

Copies an authorized template into a target directory and installs its
dependencies with npm, yarn or pnpm.
"""

from create_index_app.version import __version__

__all__: list[str] = ["__version__"]
