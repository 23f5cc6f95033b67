import io
import sys
import typing as t
from argparse import ArgumentParser

from quill import diagnostics
from quill.emit import CodeWriter
from quill.errors import QuillException
from quill.loader import load_code_unit_file

_newlines = {
    "lf": "\n",
    "crlf": "\r\n",
    "native": "\n",
}

arg_parser = ArgumentParser(prog="quill")
arg_parser.add_argument("FILE", type=str, help="JSON description of the code unit")
arg_parser.add_argument(
    "-o", "--output", type=str, help="Write to this file instead of stdout"
)
arg_parser.add_argument(
    "--indent", type=str, default="    ", help="Indentation unit (default: 4 spaces)"
)
arg_parser.add_argument(
    "--tabs", action="store_true", help="Indent with tabs, overrides --indent"
)
arg_parser.add_argument(
    "--newline", choices=sorted(_newlines), default="native", help="Line terminator"
)
arg_parser.add_argument(
    "--no-warnings", action="store_true", help="Disable all diagnostics"
)


def generate(args) -> str:
    code_unit = load_code_unit_file(args.FILE)
    buf = io.StringIO()
    writer = CodeWriter(
        buf,
        indentation_characters="\t" if args.tabs else args.indent,
        newline=_newlines[args.newline],
    )
    code_unit.emit(writer)
    return buf.getvalue()


def main(argv: t.Optional[t.List[str]] = None) -> int:
    args = arg_parser.parse_args(argv)
    if args.no_warnings:
        diagnostics.disable_all()

    try:
        code = generate(args)
        if args.output:
            # "native" leaves the translation of "\n" to the text layer
            newline = None if args.newline == "native" else ""
            with open(args.output, "w", newline=newline) as f:
                f.write(code)
        else:
            sys.stdout.write(code)
    except (QuillException, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
