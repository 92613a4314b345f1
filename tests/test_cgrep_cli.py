import io
import os
import re

import pytest

from practools.cgrep.cli import exec_search, main, render
from practools.cgrep.errorlog import ErrorLog
from practools.cgrep.result import Line, Result


@pytest.fixture
def sample_tree(tmp_path):
    root = tmp_path / "testdata"
    sub = root / "dir"
    sub.mkdir(parents=True)
    (root / "text.txt").write_text(
        "sample_text_1-1\n  sample_text_1-2\nsample_text_1-3\n", encoding="utf-8"
    )
    (sub / "text.txt").write_text("sample_text_2-1\nsample_text_2-2\n", encoding="utf-8")
    return root


def test_exec_search_matched(sample_tree):
    result, errors = Result(), ErrorLog()
    exec_search(str(sample_tree), r"_1\-\d", result, errors, str(sample_tree.parent))
    assert result.data == {
        os.path.join("testdata", "text.txt"): [
            Line("sample_text_1-1", 1),
            Line("  sample_text_1-2", 2),
            Line("sample_text_1-3", 3),
        ]
    }
    assert errors.error() is None


def test_exec_search_bad_pattern(sample_tree):
    with pytest.raises(re.error):
        exec_search(str(sample_tree), "(", Result(), ErrorLog(), str(sample_tree))


def test_render_file_names_only():
    result = Result(data={"filename1": [], "dir/filename2": []})
    buf = io.StringIO()
    render(result, buf, False)
    assert buf.getvalue() == "dir/filename2\nfilename1\n"


def test_render_with_content():
    result = Result(
        data={
            "dir/filename1": [
                Line("sample_text_1-1", 1),
                Line("  sample_text_1-2", 2),
                Line("sample_text_1-3", 3),
            ],
            "filename2": [
                Line("sample_text_2-1", 1),
                Line("  sample_text_2-2", 2),
                Line("sample_text_2-3", 3),
            ],
        }
    )
    buf = io.StringIO()
    render(result, buf, True)
    assert buf.getvalue() == (
        "dir/filename1\n1: sample_text_1-1\n2:   sample_text_1-2\n3: sample_text_1-3\n"
        "\nfilename2\n1: sample_text_2-1\n2:   sample_text_2-2\n3: sample_text_2-3\n"
    )


def test_main_prints_matching_files(sample_tree, monkeypatch, capsys):
    monkeypatch.chdir(sample_tree)
    assert main(["-d", str(sample_tree), "_2"]) == 0
    assert capsys.readouterr().out == os.path.join("dir", "text.txt") + "\n"


def test_main_with_content(sample_tree, monkeypatch, capsys):
    monkeypatch.chdir(sample_tree)
    assert main(["--dir", ".", "-c", "_2-2"]) == 0
    expected = os.path.join("dir", "text.txt") + "\n2: sample_text_2-2\n"
    assert capsys.readouterr().out == expected


def test_main_invalid_pattern(sample_tree, monkeypatch, capsys):
    monkeypatch.chdir(sample_tree)
    assert main(["("]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_requires_pattern():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2