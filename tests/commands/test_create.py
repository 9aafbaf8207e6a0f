"""Tests for the create command."""

from __future__ import annotations

import json
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from cyclectl.cli import cli
from cyclectl.services.telemetry import _current_span, enable_telemetry
from tests.conftest import networkx_has_cycle


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    yield
    enable_telemetry(False)
    _current_span.set(None)


@pytest.mark.usefixtures("_isolated_store")
class TestCreateCommand:
    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "create", "A", "B", "C", "D", "--edges", "5"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["ok"] is True
        data = payload["data"]
        assert data["vertices"] == 4
        assert data["edges"] == 5
        assert data["result"] is networkx_has_cycle(data["vertex_ids"], data["edge_pairs"])

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["create", "A", "--edges", "10"])
        assert result.exit_code == 0, result.output
        assert "OK" in result.output
        assert "create_and_check" in result.output
        assert "result: false" in result.output

    def test_quiet_prints_boolean(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "create"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "false"

    def test_negative_edges(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "create", "A", "B", "--edges=-1"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)["data"]
        assert data["edges"] == 0
        assert data["result"] is False

    def test_seed_reproducible(self, cli_runner: CliRunner) -> None:
        args = ["--json", "create", "A", "B", "C", "--edges", "4", "--seed", "2"]
        first = json.loads(cli_runner.invoke(cli, args).stdout)["data"]
        second = json.loads(cli_runner.invoke(cli, args).stdout)["data"]
        offset = second["vertex_ids"][0] - first["vertex_ids"][0]
        assert offset == 3
        assert [[s + offset, t + offset] for s, t in first["edge_pairs"]] == second["edge_pairs"]

    def test_seed_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "cyclectl.toml").write_text("[builder]\nseed = 2\n")
        args = ["--json", "create", "A", "B", "C", "--edges", "4"]
        from_config = json.loads(cli_runner.invoke(cli, args).stdout)["data"]
        explicit = json.loads(cli_runner.invoke(cli, [*args, "--seed", "2"]).stdout)["data"]
        offset = explicit["vertex_ids"][0] - from_config["vertex_ids"][0]
        assert [[s + offset, t + offset] for s, t in from_config["edge_pairs"]] == explicit[
            "edge_pairs"
        ]

    def test_verbose_shows_timing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "create", "A", "B", "--edges", "1"])
        assert result.exit_code == 0, result.output
        assert "meta:" in result.output
        assert "detect" in result.output
