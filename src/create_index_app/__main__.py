"""Allow ``python -m create_index_app`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m create_index_app`` behaves identically to the
``create-index-app`` console script.
"""

from __future__ import annotations

from create_index_app.cli.app import cli

if __name__ == "__main__":
    cli()
