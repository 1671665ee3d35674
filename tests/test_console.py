"""Tests for the console proxy (cli/console.py).

Coverage:
* Escaped user text keeps its brackets with and without Rich.
* Plain fallback strips style tags.
"""

from __future__ import annotations

import sys

import pytest

from create_index_app.cli.console import console, escape, strip_markup


class TestStripMarkup:
    def test_removes_style_tags(self) -> None:
        assert strip_markup("[bold red]Error:[/bold red] boom") == "Error: boom"

    def test_keeps_escaped_brackets(self) -> None:
        assert strip_markup("[green]pages/\\[slug][/green]") == "pages/[slug]"


class TestEscape:
    def test_rich_prints_brackets_literally(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("COLUMNS", "500")
        console.print(f"[bold]Error:[/bold] {escape('x[/y] in pages/[slug]')}")
        assert "Error: x[/y] in pages/[slug]" in capsys.readouterr().err

    def test_plain_fallback_prints_brackets_literally(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setitem(sys.modules, "rich", None)
        monkeypatch.setitem(sys.modules, "rich.console", None)
        monkeypatch.setitem(sys.modules, "rich.markup", None)
        console.print(f"[bold]Error:[/bold] {escape('pages/[slug]')}")
        assert capsys.readouterr().err == "Error: pages/[slug]\n"
