import io
import json
from pathlib import Path

import pytest

from tracedsl.cli import main

DOC = {
    "statements": [
        {
            "kind": "try",
            "body": [{"kind": "expr", "expr": "x()"}],
            "catch": {"variable": {"name": "e", "type": "T"}, "body": [{"kind": "expr", "expr": "log(e)"}]},
        }
    ]
}


def _write(tmp_path: Path, doc) -> str:
    p = tmp_path / "tree.json"
    p.write_text(json.dumps(doc), encoding="utf-8")
    return str(p)


def test_render_default_dialect(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", _write(tmp_path, DOC)]) == 0
    assert capsys.readouterr().out == "try {\n  x();\n} catch(final T e) {\n  log(e);\n}\n"


def test_render_indent_options(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", _write(tmp_path, DOC), "--dialect", "kotlin", "--indent", "1", "--indent-width", "4"]) == 0
    assert capsys.readouterr().out == "    try {\n        x()\n    } catch(e: T) {\n        log(e)\n    }\n"


def test_render_python_check(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", _write(tmp_path, DOC), "--dialect", "python", "--check"]) == 0
    assert "except T as e:" in capsys.readouterr().out


def test_check_requires_python(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", _write(tmp_path, DOC), "--check"]) == 2
    assert "only supported for the python dialect" in capsys.readouterr().err


def test_render_from_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"statements": [{"kind": "expr", "expr": "a()"}]})))
    assert main(["render", "-"]) == 0
    assert capsys.readouterr().out == "a();\n"


def test_invalid_tree(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", _write(tmp_path, {"statements": [{"kind": "try", "body": []}]})]) == 2
    assert "statements[0].catch" in capsys.readouterr().err


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", str(tmp_path / "nope.json")]) == 2
    assert "Cannot read" in capsys.readouterr().err


def test_list_dialects(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["dialects"]) == 0
    assert capsys.readouterr().out.splitlines() == ["java (default)", "kotlin", "python"]


def test_render_rejects_invalid_utf8_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "tree.json"
    p.write_bytes(b'{"statements": [{"kind": "expr", "expr": "\xff"}]}')
    assert main(["render", str(p)]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "invalid UTF-8" in captured.err


def test_render_rejects_invalid_utf8_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b'{"statements": ["\xff"]}'), encoding="utf-8"))
    assert main(["render", "-"]) == 2
    assert "<stdin>: invalid UTF-8" in capsys.readouterr().err


def test_check_with_other_dialect_prints_nothing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["render", _write(tmp_path, DOC), "--dialect", "kotlin", "--check"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "only supported for the python dialect" in captured.err
