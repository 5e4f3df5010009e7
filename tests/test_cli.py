"""Tests for the command line in celebrity/cli.py"""

import json
import runpy
import sys

import pytest

from celebrity.cli import main


class TestMain:
    def test_sample_party(self, tmp_path, capsys):
        output = tmp_path / "output"
        assert main(["--output", str(output), "--no-render"]) == 0

        out = capsys.readouterr().out
        assert "Celebrity clique:" in out
        for id in (1, 2, 3):
            assert f"id: {id} knows" in out
        assert "digraph" in (output / "graph.dot").read_text()
        assert not (output / "graph.png").exists()

    def test_party_without_celebrities(self, tmp_path, capsys):
        party = tmp_path / "party.json"
        party.write_text(json.dumps({"1": [], "2": [], "3": []}))

        assert main(["--party", str(party), "--output", str(tmp_path), "--no-render"]) == 0
        assert "No celebrity clique" in capsys.readouterr().out

    def test_render_failure_is_not_an_error(self, tmp_path):
        code = main(["--output", str(tmp_path), "--layout", "no-such-layout-program"])
        assert code == 0
        assert (tmp_path / "graph.dot").exists()

    def test_invalid_party_file(self, tmp_path):
        party = tmp_path / "party.json"
        party.write_text("[]")
        assert main(["--party", str(party), "--output", str(tmp_path)]) == 1

    def test_missing_party_file(self, tmp_path):
        assert main(["--party", str(tmp_path / "missing.json"), "--output", str(tmp_path)]) == 1

    def test_run_as_module(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            sys, "argv", ["celebrity", "--output", str(tmp_path), "--no-render"]
        )
        with pytest.raises(SystemExit) as exit_info:
            runpy.run_module("celebrity", run_name="__main__")
        assert exit_info.value.code == 0
        assert (tmp_path / "graph.dot").exists()
