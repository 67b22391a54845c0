import json

import pytest

from grammarkit.cfg import CFG
from grammarkit.cli import main
from grammarkit.pda import PDA

PDA_DATA = {
    "States": ["q", "p"],
    "Alphabet": ["0", "1"],
    "StackAlphabet": ["Z", "X"],
    "StartState": "q",
    "StartStack": "Z",
    "Transitions": [
        {"from": "q", "input": "0", "stacktop": "Z", "to": "q", "replacement": ["X", "Z"]},
        {"from": "q", "input": "1", "stacktop": "X", "to": "p", "replacement": []},
    ],
}

CFG_DATA = {
    "Variables": ["S", "A", "B"],
    "Terminals": ["a", "b"],
    "Start": "S",
    "Productions": [
        {"head": "S", "body": ["A", "B"]},
        {"head": "A", "body": ["a"]},
        {"head": "B", "body": ["b"]},
    ],
}


@pytest.fixture
def pda_path(tmp_path):
    path = tmp_path / "pda.json"
    path.write_text(json.dumps(PDA_DATA), encoding="utf-8")
    return path


@pytest.fixture
def cfg_path(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps(CFG_DATA), encoding="utf-8")
    return path


def test_default_mode_prints_converted_grammar(pda_path, capsys):
    assert main([str(pda_path)]) == 0
    expected = PDA.from_file(pda_path).to_cfg().describe()
    assert capsys.readouterr().out == expected + "\n"


def test_cfg_mode_prints_grammar(cfg_path, capsys):
    assert main([str(cfg_path), "--cfg"]) == 0
    assert capsys.readouterr().out == CFG.from_file(cfg_path).describe() + "\n"


@pytest.mark.parametrize("word, verdict", [("ab", "true"), ("ba", "false")])
def test_cyk_mode(cfg_path, capsys, word, verdict):
    assert main([str(cfg_path), "--cyk", word]) == 0
    assert capsys.readouterr().out.rstrip("\n").split("\n")[-1] == verdict


def test_ll_mode(cfg_path, capsys):
    assert main([str(cfg_path), "--ll"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(">>> Building LL(1) Table")
    assert "<EOS>" in out


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json")]) == 1
    assert capsys.readouterr().err.startswith("grammarkit:")


def test_empty_cyk_string_reports_error(cfg_path, capsys):
    assert main([str(cfg_path), "--cyk", ""]) == 1
    assert "grammarkit:" in capsys.readouterr().err