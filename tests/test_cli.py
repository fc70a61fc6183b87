"""
Tests for the jlang command line demo.
"""

import sys
import os

import pytest
from click.testing import CliRunner

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from jlang import __version__
from jlang.cli import main


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


class TestDemo:

    def test_default_demo(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "Demo code: let test 0xABCD" in result.output
        assert "Tokens: [ Keyword(let), test, 43981 ]" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestSnippets:

    def test_expression(self, runner):
        result = runner.invoke(main, ["-e", "1 + 2.5f * 0x10"])
        assert result.exit_code == 0
        assert "Tokens: [ 1, +, 2.5, *, 16 ]" in result.output

    def test_whitespace_only_snippet(self, runner):
        result = runner.invoke(main, ["-e", "  \n "])
        assert result.exit_code == 0
        assert "Tokens: [ ]\n" in result.output

    def test_keywords_option(self, runner):
        result = runner.invoke(main, ["-e", "fn main", "-k", "fn"])
        assert result.exit_code == 0
        assert "Tokens: [ Keyword(fn), main ]" in result.output

    def test_error_is_rendered(self, runner):
        result = runner.invoke(main, ["-e", "1 + 0x1.5", "--ascii"])
        assert result.exit_code == 1
        assert "NumberFormat Error: Hex number cannot be a float." in result.output
        assert "File <expr>, line 1" in result.output
        assert "    \\__/" in result.output

    def test_path_and_expr_conflict(self, runner, tmp_path):
        source = tmp_path / "prog.j"
        source.write_text("1")
        result = runner.invoke(main, [str(source), "-e", "2"])
        assert result.exit_code == 2
        assert "not both" in result.output


class TestFiles:

    def test_lexes_file(self, runner, tmp_path):
        source = tmp_path / "prog.j"
        source.write_text("x * 2\n", encoding="utf-8")
        result = runner.invoke(main, [str(source)])
        assert result.exit_code == 0
        assert "Tokens: [ x, *, 2 ]" in result.output

    def test_error_names_file_and_line(self, runner, tmp_path):
        source = tmp_path / "bad.j"
        source.write_text("1 +\n  7.\n", encoding="utf-8")
        result = runner.invoke(main, [str(source), "--ascii"])
        assert result.exit_code == 1
        assert f"File {source}, line 2" in result.output
        assert "7.\n\\/\n" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.j")])
        assert result.exit_code == 2
