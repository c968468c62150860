"""Tests for file reading and the reformat command line."""

import pytest

import reformat
from scripts.sgftree.lexer import LexerError
from scripts.sgftree.nodes import Collection, Node, Tree
from scripts.sgftree.parser import ParseError
from scripts.sgftree.parser_manager import ParserManager, SgfFileError, parse_sgf_file

QUIET = {"lexer_config": {"enable_logger": False}, "parser_config": {"enable_logger": False}}


class TestParserManager:
    def test_reads_and_parses(self, tmp_path):
        path = tmp_path / "game.sgf"
        path.write_text("(;)", encoding="utf-8")
        manager = ParserManager(path, config=QUIET)
        assert manager.text == "(;)"
        assert len(manager.tokens) == 3
        assert manager.collection == Collection(trees=[Tree(nodes=[Node()])])

    def test_parse_sgf_file_accepts_str_path(self, tmp_path):
        path = tmp_path / "game.sgf"
        path.write_text("(;GN[Kogo])", encoding="utf-8")
        collection = parse_sgf_file(str(path), config=QUIET)
        assert collection.trees[0].nodes[0].properties[0].values == ["Kogo"]

    def test_missing_file_is_wrapped(self, tmp_path):
        with pytest.raises(SgfFileError) as exc_info:
            parse_sgf_file(tmp_path / "missing.sgf", config=QUIET)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_undecodable_file_is_wrapped(self, tmp_path):
        path = tmp_path / "latin.sgf"
        path.write_bytes(b"(;C[\xff])")
        with pytest.raises(SgfFileError):
            parse_sgf_file(path, config=QUIET)

    def test_encoding_is_configurable(self, tmp_path):
        path = tmp_path / "latin.sgf"
        path.write_bytes(b"(;C[\xe9])")
        collection = parse_sgf_file(path, config={**QUIET, "encoding": "latin-1"})
        assert collection.trees[0].nodes[0].properties[0].values == ["é"]

    def test_syntax_errors_are_not_wrapped(self, tmp_path):
        lex_bad = tmp_path / "lex.sgf"
        lex_bad.write_text("(;ff[1])", encoding="utf-8")
        parse_bad = tmp_path / "parse.sgf"
        parse_bad.write_text("(;FF)", encoding="utf-8")
        with pytest.raises(LexerError):
            parse_sgf_file(lex_bad, config=QUIET)
        with pytest.raises(ParseError):
            parse_sgf_file(parse_bad, config=QUIET)


class TestReformatCli:
    def test_reformats_directory(self, tmp_path, capsys):
        source = tmp_path / "in"
        source.mkdir()
        (source / "b.sgf").write_text("(;FF[4](;B[qd];W[ob])(;W[pe]))", encoding="utf-8")
        (source / "a.sgf").write_text("(;FF[4]\n;GM[1])", encoding="utf-8")
        (source / "notes.txt").write_text("ignored", encoding="utf-8")
        output = tmp_path / "out"

        reformat.main([str(source), "-o", str(output)])

        assert (output / "a.sgf").read_text(encoding="utf-8") == "(;FF[4]\n ;GM[1])\n"
        assert (output / "b.sgf").read_text(encoding="utf-8") == "(;FF[4]\n    (;B[qd]\n     ;W[ob])\n    (;W[pe]))\n"
        assert not (output / "notes.txt").exists()
        printed = capsys.readouterr().out.splitlines()
        assert all(line.startswith("Wrote ") for line in printed)
        assert [line.rsplit("/", 1)[-1] for line in printed] == ["a.sgf", "b.sgf"]

    def test_no_newline_flags(self, tmp_path):
        source = tmp_path / "game.sgf"
        source.write_text("(;FF[4]\n ;GM[1]\n    (;B[aa]))", encoding="utf-8")
        output = tmp_path / "out"
        reformat.main([str(source), "-o", str(output), "--no-tree-newlines"])
        assert (output / "game.sgf").read_text(encoding="utf-8") == "(;FF[4];GM[1](;B[aa]))\n"

    def test_indent_width(self, tmp_path):
        source = tmp_path / "game.sgf"
        source.write_text("(;A[1](;B[2];C[3]))", encoding="utf-8")
        output = tmp_path / "out"
        reformat.main([str(source), "-o", str(output), "--indent-width", "2", "--no-node-newlines"])
        assert (output / "game.sgf").read_text(encoding="utf-8") == "(;A[1]\n  (;B[2];C[3]))\n"

    def test_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            reformat.main([str(tmp_path / "nothing")])

    def test_empty_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="No .sgf files"):
            reformat.collect_inputs(tmp_path)

    def test_broken_file_names_source(self, tmp_path):
        source = tmp_path / "broken.sgf"
        source.write_text("(;", encoding="utf-8")
        with pytest.raises(RuntimeError, match="broken.sgf") as exc_info:
            reformat.main([str(source), "-o", str(tmp_path / "out")])
        assert isinstance(exc_info.value.__cause__, ParseError)
