import json
import os

from quill.__main__ import main

UNIT = {
    "namespaces": [
        {
            "name": "Guards",
            "types": [
                {
                    "name": "Check",
                    "members": [{"name": "M", "body": [{"return": None}]}],
                }
            ],
        }
    ]
}

EXPECTED = (
    "namespace Guards\n"
    "{\n"
    "\tpublic class Check\n"
    "\t{\n"
    "\t\tpublic static void M()\n"
    "\t\t{\n"
    "\t\t\treturn;\n"
    "\t\t}\n"
    "\t}\n"
    "}\n"
)


def _write_unit(tmp_path, data=UNIT):
    path = tmp_path / "unit.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_stdout(tmp_path, capsys):
    assert main([_write_unit(tmp_path), "--tabs", "--newline", "lf"]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_output_file(tmp_path):
    output = tmp_path / "Check.cs"
    argv = [
        _write_unit(tmp_path),
        "-o",
        str(output),
        "--indent",
        "  ",
        "--newline",
        "crlf",
    ]
    assert main(argv) == 0
    text = output.read_bytes().decode()
    assert text.startswith("namespace Guards\r\n{\r\n  public class Check\r\n")
    assert text.endswith("}\r\n")


def test_invalid_input(tmp_path, capsys):
    assert main([_write_unit(tmp_path, {"namespaces": [{}]})]) == 1
    assert "error:" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert "error:" in capsys.readouterr().err


def test_native_newline_file(tmp_path):
    output = tmp_path / "Check.cs"
    assert main([_write_unit(tmp_path), "-o", str(output), "--tabs"]) == 0
    assert output.read_bytes().decode() == EXPECTED.replace("\n", os.linesep)


def test_failed_run_leaves_no_output_file(tmp_path, capsys):
    unit = {
        "namespaces": [
            {
                "name": "N",
                "types": [
                    {
                        "name": "C",
                        "members": [{"name": "M", "doc": {"summary": ""}}],
                    }
                ],
            }
        ]
    }
    output = tmp_path / "Check.cs"
    assert main([_write_unit(tmp_path, unit), "-o", str(output)]) == 1
    assert not output.exists()
    assert "error:" in capsys.readouterr().err
