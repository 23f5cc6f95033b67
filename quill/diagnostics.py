import enum
import sys


class Diagnostic(enum.Enum):
    embedded_line_break = "embedded-line-break"
    redundant_scope_close = "redundant-scope-close"
    unclosed_scopes = "unclosed-scopes"

    @property
    def message(self) -> str:
        return _diagnostic_messages[self]

    def __call__(self, *args, **kwargs) -> None:
        warn(self, *args, **kwargs)  # type: ignore


def warn(type: Diagnostic, *args, **kwargs) -> None:
    if type not in enabled_diagnostics:
        return

    if args or kwargs:  # type: ignore
        assert (bool(args) ^ bool(kwargs))  # type: ignore

    diagnostic_message = type.message % (args or kwargs)  # type: ignore
    print(f"WARN({type.value}): {diagnostic_message}", file=sys.stderr)


def disable_all() -> None:
    enabled_diagnostics.clear()


enabled_diagnostics = {
    Diagnostic.embedded_line_break,
    Diagnostic.redundant_scope_close,
    Diagnostic.unclosed_scopes,
}


_diagnostic_messages = {
    Diagnostic.embedded_line_break: "Text %r contains a line break, the lines after it are not indented",
    Diagnostic.redundant_scope_close: "No scopes are open at indentation level 0, nothing was closed",
    Diagnostic.unclosed_scopes: "Scopes still open: %s",
}
