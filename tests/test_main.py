# tests/test_main.py
import json

import pytest

from tag_browser import main as cli

from .conftest import DATA


def run(capsys, *argv):
    code = cli.main(["--catalog", str(DATA), *argv])
    out, err = capsys.readouterr()
    return code, out, err


def test_list_json_forms(capsys):
    code, out, _ = run(capsys, "list", "--category", "Формы", "--format", "json")
    assert code == 0
    assert [r["name"] for r in json.loads(out)] == ["input", "button", "form", "select", "textarea"]


def test_list_table_query(capsys):
    code, out, _ = run(capsys, "list", "-q", "DIV")
    assert code == 0
    assert "div" in out


def test_list_empty(capsys):
    code, out, _ = run(capsys, "list", "-q", "zzzznotfound")
    assert code == 0
    assert "Ничего не найдено" in out


def test_list_csv_header(capsys):
    code, out, _ = run(capsys, "list", "--format", "csv")
    assert code == 0
    assert out.splitlines()[0] == "name,category,description,example,attributes"
    assert len(out.splitlines()) == 31


def test_show_found(capsys):
    code, out, _ = run(capsys, "show", "p")
    assert code == 0
    assert out.startswith("<p>")
    assert "== Описание ==" in out
    assert "== Поддержка браузерами ==" in out


def test_show_missing(capsys):
    code, out, err = run(capsys, "show", "nonexistent-tag")
    assert code == 1
    assert out == ""
    assert "nonexistent-tag" in err


def test_categories(capsys):
    code, out, _ = run(capsys, "categories")
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == "Все теги\t30"
    assert "Формы\t5" in lines


def test_bad_catalog(capsys, tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("categories: [a]\ntags:\n  - {name: x, category: b, description: d, example: e}\n", encoding="utf-8")
    code = cli.main(["--catalog", str(bad), "categories"])
    _, err = capsys.readouterr()
    assert code == 2
    assert "unknown category" in err


def test_serve_builds_streamlit_command(monkeypatch):
    seen = {}
    monkeypatch.setattr(cli.subprocess, "call", lambda cmd: seen.setdefault("cmd", cmd) and 0)
    assert cli.main(["serve", "--port", "8600"]) == 0
    cmd = seen["cmd"]
    assert cmd[1:4] == ["-m", "streamlit", "run"]
    assert cmd[4].endswith("app.py")
    assert "8600" in cmd


def test_command_required():
    with pytest.raises(SystemExit):
        cli.main([])
