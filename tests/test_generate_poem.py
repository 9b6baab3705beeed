"""
pytest suite for the ``python -m wordbridge.generate_poem`` CLI.

Exercises ``main()`` in-process with temporary corpus and config files.
"""

import io
import json
import os
import sys

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from wordbridge.generate_poem import load_config, main, resolve_config, run
from wordbridge.models import PoetConfig


# =========================================================================
# Fixtures
# =========================================================================


@pytest.fixture()
def corpus(tmp_path):
    """Corpus file for the hello/goodbye example."""
    path = tmp_path / "corpus.txt"
    path.write_text("hello world\ngoodbye world\n", encoding="utf-8")
    return str(path)


@pytest.fixture()
def config_path(tmp_path):
    return str(tmp_path / "configs" / "poet.json")


# =========================================================================
# Test: configuration
# =========================================================================


class TestConfig:
    """Tests for config resolution and persistence."""

    def test_defaults(self):
        assert resolve_config() == PoetConfig(representation="vertices", encoding="utf-8")

    def test_save_config_writes_json(self, config_path):
        assert main(["--save-config", config_path, "--representation", "edges"]) is None
        with open(config_path, encoding="utf-8") as fh:
            assert json.load(fh) == {"representation": "edges", "encoding": "utf-8"}
        assert load_config(config_path).representation == "edges"

    def test_explicit_flag_overrides_file(self, config_path):
        main(["--save-config", config_path, "--representation", "edges"])
        assert resolve_config(config_path).representation == "edges"
        assert resolve_config(config_path, representation="vertices").representation == "vertices"

    def test_invalid_config_exits_1(self, tmp_path, corpus):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"representation": "matrix"}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["--corpus", corpus, "--input", "a b", "--apply-config", str(bad)])
        assert exc.value.code == 1

    def test_unknown_encoding_rejected(self):
        with pytest.raises(ValidationError, match="unknown encoding"):
            PoetConfig(encoding="no-such-codec")

    def test_unknown_encoding_in_file_exits_1(self, tmp_path, corpus):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"encoding": "no-such-codec"}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            main(["--corpus", corpus, "--input", "a c", "--apply-config", str(bad)])
        assert exc.value.code == 1

    def test_unknown_encoding_flag_exits_1(self, corpus):
        with pytest.raises(SystemExit) as exc:
            main(["--corpus", corpus, "--input", "a c", "--encoding", "no-such-codec"])
        assert exc.value.code == 1

    def test_missing_config_exits_1(self, tmp_path, corpus):
        with pytest.raises(SystemExit) as exc:
            main(["--corpus", corpus, "--apply-config", str(tmp_path / "nope.json")])
        assert exc.value.code == 1


# =========================================================================
# Test: pipeline
# =========================================================================


class TestRun:
    """Tests for ``run()``."""

    def test_run_builds_summary(self, corpus, tmp_path):
        summary_path = str(tmp_path / "out" / "summary.json")
        summary = run(
            corpus, ["hello goodbye", "solo"], PoetConfig(representation="edges"),
            summary_path=summary_path,
        )
        assert summary.representation == "edges"
        assert summary.metrics.total_words == 3
        assert summary.metrics.total_weight == 3
        assert [p.poem for p in summary.poems] == ["hello world goodbye", "solo"]
        assert [p.bridges_inserted for p in summary.poems] == [1, 0]

        with open(summary_path, encoding="utf-8") as fh:
            written = json.load(fh)
        assert written["corpus"] == corpus
        assert written["poems"][0]["poem"] == "hello world goodbye"

    def test_run_missing_corpus_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            run(str(tmp_path / "missing.txt"), ["a b"], PoetConfig())


# =========================================================================
# Test: CLI
# =========================================================================


@pytest.mark.integration
class TestMain:
    """End-to-end tests for ``main()``."""

    def test_input_flag(self, corpus, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--corpus", corpus, "--input", "Hello Goodbye"])
        assert exc.value.code == 0
        assert capsys.readouterr().out == "Hello world Goodbye\n"

    def test_stdin_lines(self, corpus, capsys, monkeypatch):
        monkeypatch.setattr(sys, "stdin", io.StringIO("hello goodbye\n\n  \nworld\n"))
        with pytest.raises(SystemExit) as exc:
            main(["--corpus", corpus, "--representation", "edges"])
        assert exc.value.code == 0
        assert capsys.readouterr().out == "hello world goodbye\nworld\n"

    def test_summary_flag(self, corpus, tmp_path):
        summary_path = tmp_path / "summary.json"
        with pytest.raises(SystemExit):
            main(["--corpus", corpus, "--input", "hello goodbye", "--summary", str(summary_path)])
        written = json.loads(summary_path.read_text(encoding="utf-8"))
        assert written["representation"] == "vertices"
        assert written["poems"][0]["bridges_inserted"] == 1

    def test_apply_config(self, corpus, config_path, tmp_path):
        main(["--save-config", config_path, "--representation", "edges"])
        summary_path = tmp_path / "summary.json"
        with pytest.raises(SystemExit) as exc:
            main([
                "--corpus", corpus, "--input", "hello goodbye",
                "--apply-config", config_path, "--summary", str(summary_path),
            ])
        assert exc.value.code == 0
        written = json.loads(summary_path.read_text(encoding="utf-8"))
        assert written["representation"] == "edges"

    def test_missing_corpus_exits_1(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["--corpus", str(tmp_path / "missing.txt"), "--input", "a b"])
        assert exc.value.code == 1

    def test_corpus_required(self):
        with pytest.raises(SystemExit) as exc:
            main(["--input", "a b"])
        assert exc.value.code == 2
