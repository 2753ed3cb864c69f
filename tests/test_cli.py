from __future__ import annotations

import io
from pathlib import Path

from htmlliteral.cli import main


def test_file_to_file_with_lf(tmp_path: Path) -> None:
    src = tmp_path / "in.html"
    dst = tmp_path / "out.js"
    src.write_text("<p>\n  Hello\n</p>", encoding="utf-8")

    code = main([str(src), "-o", str(dst), "--parser", "html.parser", "--newline", "lf"])

    assert code == 0
    assert dst.read_bytes() == b'p([\ntextNode("Hello"),\n])'


def test_crlf_is_written_untranslated(tmp_path: Path) -> None:
    src = tmp_path / "in.html"
    dst = tmp_path / "out.js"
    src.write_text("<p>Hi</p>", encoding="utf-8")

    assert main([str(src), "-o", str(dst), "--parser", "html.parser"]) == 0
    assert dst.read_bytes() == b'p([\r\ntextNode("Hi"),\r\n])'


def test_stdin_to_stdout(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("<b> x </b>"))

    assert main(["--parser", "html.parser", "--newline", "lf"]) == 0
    assert capsys.readouterr().out == 'b([\ntextNode("x"),\n])\n'


def test_missing_input_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "nope.html")]) == 1


def test_unknown_tree_builder(tmp_path: Path) -> None:
    src = tmp_path / "in.html"
    src.write_text("<p>Hi</p>", encoding="utf-8")

    assert main([str(src), "--parser", "no-such-builder"]) == 1


def test_deeply_nested_markup_fails_cleanly(tmp_path: Path) -> None:
    src = tmp_path / "deep.html"
    src.write_text("<span>" * 5000 + "x" + "</span>" * 5000, encoding="utf-8")

    assert main([str(src), "--parser", "html.parser"]) == 1
