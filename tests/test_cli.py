import pytest

from quickparse.cli import main

RULES = "WORD ^[a-z]+$\nSPACE ^ $\n"


@pytest.fixture
def files(tmp_path):
    def make(source_text):
        source = tmp_path / "prog.src"
        source.write_text(source_text, encoding="utf-8")
        rules = tmp_path / "rules.lex"
        rules.write_text(RULES, encoding="utf-8")
        return str(source), str(rules)

    return make


def test_success_message(files, capsys):
    source, rules = files("ab cd")
    assert main([source, rules]) == 0
    out = capsys.readouterr().out
    assert "SUCCESSFUL" in out


def test_failure_message_names_file(files, capsys):
    source, rules = files("ab!")
    assert main([source, rules]) == 0
    out = capsys.readouterr().out
    assert f"failure to lex file '{source}'" in out


def test_token_listing(files, capsys):
    source, rules = files("ab cd")
    main([source, rules, "--tokens"])
    out = capsys.readouterr().out
    assert "'WORD'" in out
    assert "'ab'" in out


def test_missing_file_returns_error(tmp_path, capsys):
    assert main([str(tmp_path / "nope.src"), str(tmp_path / "nope.lex")]) == 1
    assert "Error" in capsys.readouterr().err


def test_prompts_for_files(files, monkeypatch, capsys):
    source, rules = files("ab cd")
    answers = iter([source, rules])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "source code file" in out
    assert "SUCCESSFUL" in out


def test_end_of_input_exits(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main([]) == 0
    assert "Exiting..." in capsys.readouterr().out


def test_empty_answer_is_an_error(files, monkeypatch, capsys):
    source, _ = files("ab")
    monkeypatch.setattr("builtins.input", lambda prompt="": "")
    assert main([source]) == 1
    assert "required" in capsys.readouterr().err