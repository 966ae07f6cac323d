"""
Command-Line Test Suite

This module contains tests for the name-sorter command:
- Successful runs with default and explicit output paths
- Printing sorted names
- Exit status and messages on failure
"""

import pytest

from namesort.cli import main


def test_cli_sorts_file(tmp_path):
    input_path = tmp_path / "in.txt"
    output_path = tmp_path / "out.txt"
    input_path.write_text("Janet Parsons\nMarin Alvarez\nAdonis Julius Archer\n", encoding="utf-8")

    assert main([str(input_path), "-o", str(output_path)]) == 0
    assert output_path.read_text(encoding="utf-8") == "Marin Alvarez\nAdonis Julius Archer\nJanet Parsons\n"


def test_cli_default_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "unsorted-names-list.txt").write_text("Leo Gardner\nVaughn Lewis\n", encoding="utf-8")

    assert main(["unsorted-names-list.txt"]) == 0
    assert (tmp_path / "sorted-names-list.txt").read_text(encoding="utf-8") == "Leo Gardner\nVaughn Lewis\n"


def test_cli_print(tmp_path, capsys):
    input_path = tmp_path / "in.txt"
    input_path.write_text("Vaughn Lewis\nLeo Gardner\n", encoding="utf-8")

    assert main([str(input_path), "-o", str(tmp_path / "out.txt"), "--print"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Leo Gardner", "Vaughn Lewis"]


def test_cli_missing_input_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt"), "-o", str(tmp_path / "out.txt")]) == 1

    err = capsys.readouterr().err
    assert "Application error: File does not exist" in err
    assert not (tmp_path / "out.txt").exists()


def test_cli_invalid_name(tmp_path, capsys):
    input_path = tmp_path / "in.txt"
    input_path.write_text("John Doe\nA B C D E\n", encoding="utf-8")

    assert main([str(input_path), "-o", str(tmp_path / "out.txt")]) == 1
    assert "Application error: Given names more than 3 for 'A B C D E'" in capsys.readouterr().err
    assert not (tmp_path / "out.txt").exists()


def test_cli_requires_input_argument():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2
