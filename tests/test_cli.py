"""Tests for the command-line interface.

WHY: The CLI is the user-facing entry point. Wrong output naming
overwrites earlier results; status text leaking to stdout breaks piping.

HOW: main() is called with explicit argv on tmp_path files. stdout and
stderr are captured with capsys; exit codes are checked via SystemExit.

RULES:
- All file I/O tests use tmp_path fixtures for isolation.
"""

import json

import pytest

from wordify.adapters.dmp_adapter import diff_chars
from wordify.cli import _resolve_output_path, build_parser, main
from wordify.config import DEFAULT_DIFF_TIMEOUT


@pytest.fixture
def text_pair(tmp_path):
    old = tmp_path / "draft.txt"
    new = tmp_path / "final.txt"
    old.write_text("Hello world", encoding="utf-8")
    new.write_text("Hello word", encoding="utf-8")
    return old, new


class TestParser:
    """build_parser() exposes the documented flags."""

    def test_defaults(self):
        args = build_parser().parse_args(["a.txt", "b.txt"])
        assert args.files == ["a.txt", "b.txt"]
        assert args.chunks is None
        assert args.formats is None
        assert args.stdout is False
        assert args.timeout is None
        assert args.semantic is None

    def test_no_semantic_flag(self):
        args = build_parser().parse_args(["--no-semantic", "a", "b"])
        assert args.semantic is False

    def test_timeout_flag_is_parsed(self):
        args = build_parser().parse_args(["--timeout", "2.5", "a", "b"])
        assert args.timeout == pytest.approx(2.5)

    @pytest.mark.parametrize("value, message", [
        ("-1", "must not be negative"),
        ("soon", "must be a number of seconds"),
    ])
    def test_bad_timeout_is_a_usage_error(self, value, message, capsys):
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--timeout", value, "a", "b"])
        assert excinfo.value.code == 2
        assert message in capsys.readouterr().err

    def test_negative_timeout_never_reaches_diff(self, text_pair, capsys):
        old, new = text_pair
        with pytest.raises(SystemExit) as excinfo:
            main([str(old), str(new), "--timeout", "-1", "--stdout"])
        assert excinfo.value.code == 2
        assert capsys.readouterr().out == ""


class TestStdout:
    """--stdout writes one format to stdout and status to stderr."""

    def test_wdiff_to_stdout(self, text_pair, capsys):
        old, new = text_pair
        main([str(old), str(new), "--formats", "wdiff", "--stdout", "--timeout", "0"])
        captured = capsys.readouterr()
        assert captured.out == "Hello [-world-]{+word+}\n"
        assert "word-level runs" in captured.err
        assert "11 characters old, 10 characters new" in captured.err

    def test_json_to_stdout(self, text_pair, capsys):
        old, new = text_pair
        main([str(old), str(new), "--formats", "json", "--stdout"])
        document = json.loads(capsys.readouterr().out)
        assert document["old"] == "draft.txt"
        assert document["new"] == "final.txt"
        assert document["runs"][1] == {"op": "delete", "text": "world"}


class TestSaveFiles:
    """Output files are saved as {stem}{suffix} without overwriting."""

    def test_saves_all_formats_next_to_new_file(self, text_pair, tmp_path):
        old, new = text_pair
        main([str(old), str(new)])
        assert (tmp_path / "final-wordiff.json").is_file()
        assert (tmp_path / "final-wordiff.txt").is_file()
        assert (tmp_path / "final-wordiff.html").is_file()

    def test_output_dir(self, text_pair, tmp_path):
        old, new = text_pair
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        main([str(old), str(new), "--formats", "wdiff", "--output-dir", str(out_dir)])
        saved = out_dir / "final-wordiff.txt"
        assert saved.read_text(encoding="utf-8") == "Hello [-world-]{+word+}\n"

    def test_second_run_gets_numeric_suffix(self, text_pair, tmp_path):
        old, new = text_pair
        main([str(old), str(new), "--formats", "json"])
        main([str(old), str(new), "--formats", "json"])
        assert (tmp_path / "final-wordiff.json").is_file()
        assert (tmp_path / "final-wordiff-2.json").is_file()

    def test_resolve_output_path_counter(self, tmp_path):
        (tmp_path / "x-wordiff.txt").touch()
        (tmp_path / "x-wordiff-2.txt").touch()
        assert _resolve_output_path("x", "-wordiff.txt", tmp_path) == tmp_path / "x-wordiff-3.txt"

    def test_resolve_output_path_without_extension(self, tmp_path):
        (tmp_path / "x-wordiff").touch()
        assert _resolve_output_path("x", "-wordiff", tmp_path) == tmp_path / "x-wordiff-2"


class TestChunkDocumentInput:
    """--chunks regroups a JSON chunk document."""

    def test_chunks_to_stdout(self, tmp_path, capsys):
        path = tmp_path / "script.json"
        path.write_text(json.dumps({"chunks": [
            {"op": "equal", "text": "Hello wor"},
            {"op": "delete", "text": "l"},
            {"op": "equal", "text": "d"},
        ]}), encoding="utf-8")
        main(["--chunks", str(path), "--formats", "wdiff", "--stdout"])
        assert capsys.readouterr().out == "Hello [-world-]{+word+}\n"

    def test_invalid_document_exits_1(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"op": "swap", "text": "x"}]), encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main(["--chunks", str(path), "--stdout"])
        assert excinfo.value.code == 1
        assert "Invalid chunk document" in capsys.readouterr().err


class TestErrors:
    """Bad invocations print an error to stderr and exit 1."""

    def test_unknown_format(self, text_pair, capsys):
        old, new = text_pair
        with pytest.raises(SystemExit) as excinfo:
            main([str(old), str(new), "--formats", "pdf"])
        assert excinfo.value.code == 1
        assert "Unknown format 'pdf'" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([str(tmp_path / "nope.txt"), str(tmp_path / "also-nope.txt")])
        assert excinfo.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_wrong_number_of_files(self, text_pair):
        old, _ = text_pair
        with pytest.raises(SystemExit) as excinfo:
            main([str(old)])
        assert excinfo.value.code == 1

    def test_files_and_chunks_together(self, text_pair, tmp_path):
        old, new = text_pair
        with pytest.raises(SystemExit) as excinfo:
            main([str(old), str(new), "--chunks", str(tmp_path / "x.json")])
        assert excinfo.value.code == 1

    def test_missing_output_dir(self, text_pair, tmp_path):
        old, new = text_pair
        with pytest.raises(SystemExit) as excinfo:
            main([str(old), str(new), "--output-dir", str(tmp_path / "missing")])
        assert excinfo.value.code == 1


class TestConfiguredDefaults:
    """Environment-backed defaults reach the pipeline; bad values exit 1."""

    @pytest.fixture
    def diff_calls(self, monkeypatch):
        """Record the keyword arguments the CLI passes to diff_chars."""
        monkeypatch.delenv("WORDIFY_DIFF_TIMEOUT", raising=False)
        monkeypatch.delenv("WORDIFY_SEMANTIC_CLEANUP", raising=False)
        calls = []

        def recording_diff_chars(text_a, text_b, timeout=None, semantic=None):
            calls.append({"timeout": timeout, "semantic": semantic})
            return diff_chars(text_a, text_b, timeout=timeout, semantic=semantic)

        monkeypatch.setattr("wordify.cli.diff_chars", recording_diff_chars)
        return calls

    def test_semantic_flag_reaches_diff_engine(self, text_pair, diff_calls, capsys):
        old, new = text_pair
        main([str(old), str(new), "--semantic", "--formats", "wdiff", "--stdout"])
        assert diff_calls == [{"timeout": DEFAULT_DIFF_TIMEOUT, "semantic": True}]
        assert capsys.readouterr().out == "Hello [-world-]{+word+}\n"

    def test_semantic_from_environment(self, text_pair, diff_calls, monkeypatch):
        monkeypatch.setenv("WORDIFY_SEMANTIC_CLEANUP", "true")
        old, new = text_pair
        main([str(old), str(new), "--formats", "wdiff", "--stdout"])
        assert diff_calls[0]["semantic"] is True

    def test_no_semantic_overrides_environment(self, text_pair, diff_calls, monkeypatch):
        monkeypatch.setenv("WORDIFY_SEMANTIC_CLEANUP", "true")
        old, new = text_pair
        main([str(old), str(new), "--no-semantic", "--formats", "wdiff", "--stdout"])
        assert diff_calls[0]["semantic"] is False

    def test_bad_semantic_environment_exits_1(self, text_pair, monkeypatch, capsys):
        monkeypatch.setenv("WORDIFY_SEMANTIC_CLEANUP", "yes")
        old, new = text_pair
        with pytest.raises(SystemExit) as excinfo:
            main([str(old), str(new), "--stdout"])
        assert excinfo.value.code == 1
        assert "Error: WORDIFY_SEMANTIC_CLEANUP must be 'true' or 'false'" in capsys.readouterr().err

    def test_timeout_flag_reaches_diff_engine(self, text_pair, diff_calls):
        old, new = text_pair
        main([str(old), str(new), "--timeout", "2.5", "--stdout"])
        assert diff_calls[0]["timeout"] == pytest.approx(2.5)

    def test_default_formats(self, text_pair, tmp_path, monkeypatch):
        monkeypatch.setattr("wordify.cli.DEFAULT_FORMATS", ["wdiff"])
        old, new = text_pair
        main([str(old), str(new)])
        assert (tmp_path / "final-wordiff.txt").is_file()
        assert not (tmp_path / "final-wordiff.json").exists()
        assert not (tmp_path / "final-wordiff.html").exists()

    def test_formats_flag_beats_default_formats(self, text_pair, tmp_path, monkeypatch):
        monkeypatch.setattr("wordify.cli.DEFAULT_FORMATS", ["wdiff"])
        old, new = text_pair
        main([str(old), str(new), "--formats", "json"])
        assert (tmp_path / "final-wordiff.json").is_file()
        assert not (tmp_path / "final-wordiff.txt").exists()

    def test_unknown_default_format_exits_1(self, text_pair, monkeypatch, capsys):
        monkeypatch.setattr("wordify.cli.DEFAULT_FORMATS", ["pdf"])
        old, new = text_pair
        with pytest.raises(SystemExit) as excinfo:
            main([str(old), str(new)])
        assert excinfo.value.code == 1
        assert "Unknown format 'pdf'" in capsys.readouterr().err

    def test_log_level_flag(self, text_pair, capsys):
        old, new = text_pair
        main([str(old), str(new), "--log-level", "debug", "--formats", "wdiff", "--stdout"])
        assert capsys.readouterr().out == "Hello [-world-]{+word+}\n"

    def test_unknown_log_level_exits_1(self, text_pair, capsys):
        old, new = text_pair
        with pytest.raises(SystemExit) as excinfo:
            main([str(old), str(new), "--log-level", "BOGUS", "--stdout"])
        assert excinfo.value.code == 1
        assert "Error: Unknown log level 'BOGUS'" in capsys.readouterr().err
