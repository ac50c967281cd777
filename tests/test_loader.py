import json
from pathlib import Path

import pytest

from tracedsl import TreeSpecError, TryBlock, dict_to_block, dict_to_statement, load_block, loads_block

DOC = {
    "statements": [
        {"kind": "declare", "variable": {"name": "time", "type": "int"}, "init": "0"},
        {
            "kind": "try",
            "body": [
                {"kind": "assign", "variable": {"name": "time", "type": "int"}, "value": "next()"},
                {"kind": "scope", "body": [{"kind": "expr", "expr": "peek(time)"}]},
            ],
            "catch": {
                "variable": {"name": "t", "type": "Throwable"},
                "body": [{"kind": "declare", "variable": {"name": "err", "type": "Throwable"},
                          "final": True, "init": "t"}],
            },
        },
    ]
}


def test_dict_to_block_renders() -> None:
    block = dict_to_block(DOC)
    assert isinstance(block.statements[1], TryBlock)
    assert block.to_code() == (
        "int time = 0;\n"
        "try {\n"
        "  time = next();\n"
        "  {\n"
        "    peek(time);\n"
        "  }\n"
        "} catch(final Throwable t) {\n"
        "  final Throwable err = t;\n"
        "}\n"
    )


def test_load_block_from_file(tmp_path: Path) -> None:
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(DOC), encoding="utf-8")
    assert load_block(path).to_code() == dict_to_block(DOC).to_code()


@pytest.mark.parametrize(
    "doc, path",
    [
        ([], "<root>"),
        ({"statements": {}}, "statements"),
        ({"statements": [{"expr": "x()"}]}, "statements[0].kind"),
        ({"statements": [{"kind": "expr"}]}, "statements[0].expr"),
        ({"statements": [{"kind": "try", "body": []}]}, "statements[0].catch"),
        ({"statements": [{"kind": "try", "body": [], "catch": {"body": []}}]}, "statements[0].catch.variable"),
        (
            {"statements": [{"kind": "try", "body": [], "catch": {"variable": {"name": "e"}, "body": []}}]},
            "statements[0].catch.variable.type",
        ),
        ({"statements": [{"kind": "scope", "body": [{"kind": "loop"}]}]}, "statements[0].body[0].kind"),
        ({"statements": [{"kind": "declare", "variable": {"name": "a", "type": "A"}, "final": "yes"}]},
         "statements[0].final"),
    ],
)
def test_malformed_documents(doc, path: str) -> None:
    with pytest.raises(TreeSpecError) as exc:
        dict_to_block(doc)
    assert exc.value.path == path


def test_invalid_json() -> None:
    with pytest.raises(TreeSpecError, match="invalid JSON"):
        loads_block("{not json")


def test_single_statement() -> None:
    st = dict_to_statement({"kind": "expr", "expr": "tick()"})
    assert st.to_code(1) == "  tick();\n"


def test_load_block_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "tree.json"
    path.write_bytes(b'{"statements": [{"kind": "expr", "expr": "\xff"}]}')
    with pytest.raises(TreeSpecError, match="invalid UTF-8") as exc:
        load_block(path)
    assert exc.value.path == "<root>"
