# Builds csnodes trees from JSON-compatible data
#
# Statements are either a plain string (written as is) or an object with one
# of the keys "return", "throw" or "if":
#
#     {"if": "value == null", "then": [{"throw": "new ArgumentNullException()"}]}

import json
import typing as t
from pathlib import Path

from quill import csnodes
from quill.errors import InvalidArgument

_Data = t.Mapping[str, t.Any]


def _expect(value: t.Any, kind: type, path: str) -> t.Any:
    if not isinstance(value, kind):
        raise InvalidArgument(
            path, f"Expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _required(data: _Data, key: str, path: str) -> str:
    if key not in data:
        raise InvalidArgument(f"{path}.{key}", "Missing required key")
    return _expect(data[key], str, f"{path}.{key}")


def _optional(data: _Data, key: str, path: str) -> t.Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    return _expect(value, str, f"{path}.{key}")


def _list(data: _Data, key: str, path: str) -> t.List[t.Any]:
    return _expect(data.get(key, []), list, f"{path}.{key}")


def _strings(data: _Data, key: str, path: str) -> t.List[str]:
    return [
        _expect(item, str, f"{path}.{key}[{i}]")
        for i, item in enumerate(_list(data, key, path))
    ]


def _entries(data: _Data, key: str, path: str) -> t.List[csnodes.DocEntry]:
    entries = _expect(data.get(key, {}), dict, f"{path}.{key}")
    return [
        csnodes.DocEntry(name, _expect(comment, str, f"{path}.{key}.{name}"))
        for name, comment in entries.items()
    ]


def load_documentation(data: _Data, path: str) -> csnodes.Documentation:
    _expect(data, dict, path)
    return csnodes.Documentation(
        summary=_required(data, "summary", path),
        type_parameters=_entries(data, "type_parameters", path),
        parameters=_entries(data, "parameters", path),
        returns=_optional(data, "returns", path),
        exceptions=_entries(data, "exceptions", path),
        remarks=_optional(data, "remarks", path),
    )


def _doc(data: _Data, path: str) -> t.Optional[csnodes.Documentation]:
    if data.get("doc") is None:
        return None
    return load_documentation(data["doc"], f"{path}.doc")


def load_statement(data: t.Any, path: str) -> csnodes.CsStmt:
    if isinstance(data, str):
        return csnodes.RawStatement(data)
    _expect(data, dict, path)
    if "return" in data:
        return csnodes.ReturnStatement(_optional(data, "return", path))
    if "throw" in data:
        return csnodes.ThrowStatement(_required(data, "throw", path))
    if "if" in data:
        else_ = None
        if "else" in data:
            else_ = _statements(data, "else", path)
        return csnodes.IfStatement(
            condition=_required(data, "if", path),
            then=_statements(data, "then", path),
            else_=else_,
        )
    raise InvalidArgument(path, "Unknown statement, expected return, throw or if")


def _statements(data: _Data, key: str, path: str) -> t.List[csnodes.CsStmt]:
    return [
        load_statement(item, f"{path}.{key}[{i}]")
        for i, item in enumerate(_list(data, key, path))
    ]


def load_parameter(data: _Data, path: str) -> csnodes.Parameter:
    _expect(data, dict, path)
    return csnodes.Parameter(
        type=_required(data, "type", path),
        name=_required(data, "name", path),
        default=_optional(data, "default", path),
    )


def load_method(data: _Data, path: str) -> csnodes.Method:
    _expect(data, dict, path)
    method = csnodes.Method(
        name=_required(data, "name", path),
        return_type=_optional(data, "return_type", path) or "void",
        parameters=[
            load_parameter(item, f"{path}.parameters[{i}]")
            for i, item in enumerate(_list(data, "parameters", path))
        ],
        body=_statements(data, "body", path),
        type_parameters=_strings(data, "type_parameters", path),
        doc=_doc(data, path),
    )
    if "modifiers" in data:
        method.modifiers = _strings(data, "modifiers", path)
    return method


def load_type(data: _Data, path: str) -> csnodes.TypeDeclaration:
    _expect(data, dict, path)
    ty = csnodes.TypeDeclaration(
        name=_required(data, "name", path),
        kind=_optional(data, "kind", path) or "class",
        members=[
            load_method(item, f"{path}.members[{i}]")
            for i, item in enumerate(_list(data, "members", path))
        ],
        doc=_doc(data, path),
    )
    if "modifiers" in data:
        ty.modifiers = _strings(data, "modifiers", path)
    return ty


def load_namespace(data: _Data, path: str) -> csnodes.Namespace:
    _expect(data, dict, path)
    return csnodes.Namespace(
        name=_required(data, "name", path),
        types=[
            load_type(item, f"{path}.types[{i}]")
            for i, item in enumerate(_list(data, "types", path))
        ],
    )


def load_code_unit(data: _Data) -> csnodes.CodeUnit:
    path = "$"
    _expect(data, dict, path)
    return csnodes.CodeUnit(
        usings=_strings(data, "usings", path),
        namespaces=[
            load_namespace(item, f"{path}.namespaces[{i}]")
            for i, item in enumerate(_list(data, "namespaces", path))
        ],
    )


def load_code_unit_file(path: t.Union[str, Path]) -> csnodes.CodeUnit:
    with open(path, "r") as f:
        return load_code_unit(json.load(f))
