"""
Tests for the objkit command-line entry point.
"""

import json
import re

import pytest

from objkit.cli import main


@pytest.fixture
def sample_files(tmp_path):
    original = tmp_path / "original.yaml"
    original.write_text("a: 1\nb: 2\nnested:\n  c: true\n")
    target = tmp_path / "target.json"
    target.write_text('{"a": 1, "b": 3, "nested": {"c": true}, "z": 0}')
    return original, target


class TestObjectCommands:
    """Test commands that read mapping files."""

    def test_diff_json(self, sample_files, capsys):
        original, target = sample_files
        assert main(["diff", str(original), str(target), "--format", "json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"b": 3, "z": 0}

    def test_diff_yaml(self, sample_files, capsys):
        original, target = sample_files
        assert main(["diff", str(original), str(target)]) == 0
        assert capsys.readouterr().out == "b: 3\nz: 0\n"

    def test_query(self, sample_files, capsys):
        _, target = sample_files
        assert main(["query", str(target)]) == 0
        assert capsys.readouterr().out == 'a=1&b=3&nested={"c":true}\n'

    def test_string(self, sample_files, capsys):
        original, _ = sample_files
        assert main(["string", str(original), "--separator", ","]) == 0
        assert capsys.readouterr().out == 'a:1,b:2,nested:{"c":true},\n'

    def test_leaves(self, sample_files, capsys):
        original, _ = sample_files
        assert main(["leaves", str(original)]) == 0
        assert capsys.readouterr().out.splitlines() == ["a:1", "b:2", "c:true"]

    def test_reset(self, sample_files, capsys):
        original, _ = sample_files
        assert main(["reset", str(original), "--format", "json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"a": None, "b": None, "nested": None}

    def test_missing_file(self, tmp_path, capsys):
        assert main(["query", str(tmp_path / "nope.yaml")]) == 1
        assert "error:" in capsys.readouterr().err

    def test_non_mapping_file(self, tmp_path, capsys):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        assert main(["leaves", str(path)]) == 1
        assert "Expected a mapping" in capsys.readouterr().err


class TestRandomCommands:
    """Test the random value commands."""

    def test_random_num(self, capsys):
        assert main(["random-num", "3", "3"]) == 0
        assert capsys.readouterr().out == "3\n"

    def test_random_color(self, capsys):
        assert main(["random-color"]) == 0
        assert re.fullmatch(r"#[0-9a-f]{6}\n", capsys.readouterr().out)

    def test_random_word_fixed_length(self, capsys):
        assert main(["random-word", "8"]) == 0
        assert len(capsys.readouterr().out.strip()) == 8

    def test_random_word_variable_length(self, capsys):
        assert main(["random-word", "2", "4", "--random"]) == 0
        assert 2 <= len(capsys.readouterr().out.strip()) <= 4

    def test_random_word_needs_max(self, capsys):
        assert main(["random-word", "2", "--random"]) == 2
        assert "needs MAX" in capsys.readouterr().err

    def test_seed_is_reproducible(self, capsys):
        main(["--seed", "42", "random-word", "12"])
        first = capsys.readouterr().out
        main(["--seed", "42", "random-word", "12"])
        assert capsys.readouterr().out == first
