"""Tests for the find command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from datapop.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestFindCommand:
    def test_exact_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "find", "Title", "--exact"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["op"] == "find_layers"
        assert [item["id"] for item in payload["data"]["items"]] == ["TITLE"]

    def test_like_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "find", "itle"])
        assert result.exit_code == 0
        assert result.output.strip() == "TITLE\nSUBTITLE"

    def test_kind(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "find", "Avatar", "--kind", "bitmap"])
        assert result.output.strip() == "AVATAR-IMAGE"

    def test_children_of_root(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "find", "Avatar", "--root", "CARD", "--children"])
        assert result.output.strip() == "AVATAR-GROUP"

    def test_exclude(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "find", "Avatar", "--exclude", "AVATAR-GROUP"])
        assert result.output.strip() == "AVATAR"

    def test_first_without_match(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "find", "Nothing", "--first"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"] == {"layer": None}

    def test_rich_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["find", "Avatar Group", "--exact"])
        assert result.exit_code == 0
        assert "AVATAR-GROUP" in result.output
        assert "group" in result.output

    def test_unknown_root(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["find", "x", "--root", "NOPE"])
        assert result.exit_code == 1
        assert "Layer not found: NOPE" in result.stderr

    def test_invalid_kind_choice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["find", "x", "--kind", "widget"])
        assert result.exit_code == 2

    def test_does_not_rewrite_snapshot(self, cli_runner: CliRunner, snapshot_path: Path) -> None:
        before = snapshot_path.read_text(encoding="utf-8")
        cli_runner.invoke(cli, ["find", "Title"])
        assert snapshot_path.read_text(encoding="utf-8") == before
