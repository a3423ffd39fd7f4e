"""
Unit tests for the 'prune' command.
"""

import json

import pytest
from click.testing import CliRunner
from lnview.cli.commands.prune import prune


class TestPruneCommand:
    @pytest.fixture
    def graph_file(self, tmp_path, abc_raw):
        f = tmp_path / "graph.json"
        f.write_text(json.dumps(abc_raw))
        return str(f)

    def test_default_threshold_hides_everything(self, graph_file):
        runner = CliRunner()
        result = runner.invoke(prune, [graph_file])

        assert result.exit_code == 0
        assert "0/3 nodes, 0/2 channels visible (threshold 30)" in result.output
        assert "No node meets the threshold" in result.output

    def test_no_warning_when_nodes_visible(self, graph_file):
        runner = CliRunner()
        result = runner.invoke(prune, [graph_file, "-t", "1"])

        assert result.exit_code == 0
        assert "No node meets the threshold" not in result.output

    def test_clicks_are_replayed(self, graph_file):
        runner = CliRunner()
        result = runner.invoke(prune, [graph_file, "--click", "B", "--click", "A", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [n["id"] for n in data["nodes"]] == ["B", "C"]
        assert [e["id"] for e in data["edges"]] == ["bc"]
        assert data["threshold"] == 30
        assert data["total_nodes"] == 3

    def test_show_all(self, graph_file):
        runner = CliRunner()
        result = runner.invoke(prune, [graph_file, "--show-all", "--json"])

        data = json.loads(result.output)
        assert data["threshold"] == 0
        assert len(data["nodes"]) == 3
        assert len(data["edges"]) == 2

    def test_human_output_lists_nodes(self, graph_file):
        runner = CliRunner()
        result = runner.invoke(prune, [graph_file, "-t", "1"])

        assert result.exit_code == 0
        assert "Alice [A] degree=1" in result.output
        assert "B [B] degree=2" in result.output

    def test_unknown_click_fails(self, graph_file):
        runner = CliRunner()
        result = runner.invoke(prune, [graph_file, "--click", "Z"])

        assert result.exit_code == 1
        assert "Unknown node: Z" in result.output

    def test_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(prune, [str(tmp_path / "nope.json")])

        assert result.exit_code == 1
        assert "file not found" in result.output
