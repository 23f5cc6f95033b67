import json

import pytest

from quill import csnodes
from quill.errors import InvalidArgument
from quill.loader import load_code_unit, load_code_unit_file, load_statement

UNIT = {
    "usings": ["System"],
    "namespaces": [
        {
            "name": "Guards",
            "types": [
                {
                    "name": "Check",
                    "modifiers": ["public", "static"],
                    "members": [
                        {
                            "name": "MustBePositive",
                            "return_type": "int",
                            "parameters": [{"type": "int", "name": "value"}],
                            "doc": {
                                "summary": "Checks the value.",
                                "parameters": {"value": "The value."},
                            },
                            "body": [
                                {
                                    "if": "value <= 0",
                                    "then": [
                                        {"throw": "new ArgumentOutOfRangeException()"}
                                    ],
                                },
                                {"return": "value"},
                            ],
                        }
                    ],
                }
            ],
        }
    ],
}


def test_load_code_unit():
    unit = load_code_unit(UNIT)
    ty = unit.namespaces[0].types[0]
    method = ty.members[0]
    assert unit.usings == ["System"]
    assert ty.modifiers == ["public", "static"]
    assert method.return_type == "int"
    assert method.parameters == [csnodes.Parameter("int", "value")]
    assert method.doc is not None
    assert method.doc.parameters == [csnodes.DocEntry("value", "The value.")]
    assert isinstance(method.body[0], csnodes.IfStatement)
    assert method.body[1] == csnodes.ReturnStatement("value")


def test_defaults():
    ty = {"name": "C", "members": [{"name": "M"}]}
    unit = load_code_unit({"namespaces": [{"name": "N", "types": [ty]}]})
    method = unit.namespaces[0].types[0].members[0]
    assert method.return_type == "void"
    assert method.modifiers == ["public", "static"]
    assert method.doc is None


@pytest.mark.parametrize(
    "data, expected",
    [
        ("x();", csnodes.RawStatement("x();")),
        ({"return": None}, csnodes.ReturnStatement()),
        ({"throw": "e"}, csnodes.ThrowStatement("e")),
        (
            {"if": "c", "then": ["a();"], "else": ["b();"]},
            csnodes.IfStatement(
                "c", [csnodes.RawStatement("a();")], [csnodes.RawStatement("b();")]
            ),
        ),
    ],
)
def test_load_statement(data, expected):
    assert load_statement(data, "$") == expected


def test_unknown_statement():
    with pytest.raises(InvalidArgument, match="Unknown statement"):
        load_statement({"while": "true"}, "$")


def test_missing_key_names_path():
    with pytest.raises(InvalidArgument) as exc_info:
        load_code_unit({"namespaces": [{"types": []}]})
    assert exc_info.value.parameter_name == "$.namespaces[0].name"


def test_wrong_type_names_path():
    with pytest.raises(InvalidArgument) as exc_info:
        load_code_unit({"usings": ["System", 3]})
    assert exc_info.value.parameter_name == "$.usings[1]"


def test_load_file(tmp_path):
    path = tmp_path / "unit.json"
    path.write_text(json.dumps(UNIT))
    assert load_code_unit_file(path) == load_code_unit(UNIT)
