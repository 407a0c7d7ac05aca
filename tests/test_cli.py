"""Tests for the glow command-line interface."""

import io

import pytest

from glow.ansi import cyan
from glow.cli import build_parser, main


class TestArguments:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.files == []
        assert args.no_color is False
        assert args.max_matches is None


class TestMain:
    def test_highlights_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "core.clj"
        path.write_text("nil\n", encoding="utf-8")
        assert main([str(path)]) == 0
        assert capsys.readouterr().out == cyan("nil") + "\n"

    def test_no_color(self, tmp_path, capsys) -> None:
        path = tmp_path / "core.clj"
        path.write_text('(defn f [] "x")\n', encoding="utf-8")
        assert main(["--no-color", str(path)]) == 0
        assert capsys.readouterr().out == '(defn f [] "x")\n'

    def test_reads_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("42"))
        assert main([]) == 0
        assert capsys.readouterr().out == cyan("42")

    def test_max_matches(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("1 2"))
        assert main(["--max-matches", "1"]) == 0
        assert capsys.readouterr().out == cyan("1") + " 2"

    def test_negative_max_matches(self, capsys) -> None:
        assert main(["--max-matches", "-1"]) == 2
        assert "max_matches" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys) -> None:
        missing = tmp_path / "nope.clj"
        assert main([str(missing)]) == 1
        assert "nope.clj" in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path, capsys) -> None:
        bad = tmp_path / "bad.clj"
        bad.write_bytes(b"(def x \xff)")
        good = tmp_path / "good.clj"
        good.write_text("nil", encoding="utf-8")
        assert main([str(bad), str(good)]) == 1
        captured = capsys.readouterr()
        assert "bad.clj" in captured.err
        assert "UTF-8" in captured.err
        assert captured.out == cyan("nil")

    def test_bad_option_exits(self) -> None:
        with pytest.raises(SystemExit):
            main(["--colour"])
