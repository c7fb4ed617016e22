"""Test configuration loading and the command line interface."""

import json
from unittest.mock import patch

import pytest

from src.main import load_config, load_phrase_sets, main
from src.service import AppConfig


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_missing_file(self, tmp_path):
        """A missing config is reported."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_empty_file_gives_defaults(self, tmp_path):
        """An empty file means all defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == AppConfig()

    def test_values_loaded(self, tmp_path):
        """Nested suggestion settings and extras are read."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "confidence: 8\n"
            "public_limit: 10\n"
            "suggestion:\n"
            "  model: gpt-4o-mini\n"
            "  count: 24\n"
            "  api_base: http://localhost:4000\n"
        )
        config = load_config(str(path))
        assert config.confidence == 8
        assert config.public_limit == 10
        assert config.suggestion.model == "gpt-4o-mini"
        assert config.suggestion.count == 24
        assert config.suggestion.__pydantic_extra__ == {"api_base": "http://localhost:4000"}

    def test_invalid_values(self, tmp_path):
        """Out of range values fail validation."""
        path = tmp_path / "config.yaml"
        path.write_text("confidence: 0\n")
        with pytest.raises(Exception):
            load_config(str(path))


class TestCLI:
    """Smoke tests for the CLI commands."""

    def test_build(self, tmp_path, capsys):
        """Building prints a titled grid."""
        path = tmp_path / "meeting.txt"
        path.write_text("\n".join(["*late start"] + [f"phrase {i}" for i in range(8)]))

        assert main(["build", str(path), "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("meeting (3x3)")
        assert "late start" in out

    def test_build_reshuffles(self, tmp_path, capsys):
        """Extra reshuffles print extra boards."""
        path = tmp_path / "p.txt"
        path.write_text("\n".join(f"p{i}" for i in range(30)))

        assert main(["build", str(path), "--title", "Party", "--reshuffles", "2", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert out.count("Party (5x5)") == 3
        assert "FREE" in out

    def test_build_no_free_center(self, tmp_path, capsys):
        """The free centre can be switched off."""
        path = tmp_path / "p.txt"
        path.write_text("\n".join(f"p{i}" for i in range(30)))

        assert main(["build", str(path), "--no-free-center", "--seed", "3"]) == 0
        assert "FREE" not in capsys.readouterr().out

    def test_build_missing_file(self, tmp_path, capsys):
        """Errors are reported on stderr with exit code 1."""
        assert main(["build", str(tmp_path / "missing.txt")]) == 1
        assert "Error during build" in capsys.readouterr().err

    def test_rank(self, tmp_path, capsys):
        """Ranking prints sets best first."""
        path = tmp_path / "sets.json"
        path.write_text(json.dumps([
            {"code": "AAA", "title": "Many", "rating_average": 4.5, "rating_count": 10, "rating_total": 45},
            {"code": "BBB", "title": "Few", "rating_average": 5.0, "rating_count": 2, "rating_total": 10},
        ]))
        sets = load_phrase_sets(str(path))
        assert [s.code for s in sets] == ["AAA", "BBB"]

        assert main(["rank", str(path)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert "BBB" in lines[0]
        assert "AAA" in lines[1]

    def test_rank_rejects_non_list(self, tmp_path, capsys):
        """A JSON object is not a list of sets."""
        path = tmp_path / "sets.json"
        path.write_text("{}")
        assert main(["rank", str(path)]) == 1

    @patch('litellm.completion')
    def test_suggest_to_file(self, mock_completion, tmp_path, capsys, make_response):
        """Suggestions can be written to a phrase file."""
        mock_completion.return_value = make_response(content='["sunburn", "lost sandal"]')
        output = tmp_path / "out" / "beach.txt"

        assert main(["suggest", "beach", "--output", str(output)]) == 0
        assert output.read_text() == "sunburn\nlost sandal\n"
        assert "Saved 2 phrases" in capsys.readouterr().out

    def test_bad_config(self, tmp_path, capsys):
        """A missing config file stops the CLI."""
        assert main(["--config", str(tmp_path / "none.yaml"), "rank", "x.json"]) == 1
        assert "Error loading config" in capsys.readouterr().err
