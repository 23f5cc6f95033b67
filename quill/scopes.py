import typing as t
from contextlib import contextmanager

from patina import None_, Option, Some
from typing_extensions import Self

from quill._utils import must_not_be_empty, must_not_be_none
from quill.diagnostics import Diagnostic
from quill.emit import CodeWriter
from quill.errors import InvalidOperation, ScopeMismatch


def open_scope_and_indent(writer: CodeWriter, brace: str = "{") -> CodeWriter:
    must_not_be_none(writer, "writer")
    return writer.write_line(brace).increase_indentation()


def close_scope(writer: CodeWriter, brace: str = "}") -> CodeWriter:
    must_not_be_none(writer, "writer")
    return writer.decrease_indentation().write_line(brace)


def close_remaining_scopes(
    writer: CodeWriter,
    start_on_previous_indentation_level: bool = True,
    brace: str = "}",
) -> CodeWriter:
    """Write closing braces until the indentation level is back at zero.

    With `start_on_previous_indentation_level` the writer is assumed to sit
    inside the body of the innermost scope, so one closing line per level is
    written, starting one level shallower. Without it the writer is assumed
    to already sit at the depth of the innermost closing brace, which gives
    one line more than the current level.
    """

    must_not_be_none(writer, "writer")
    if start_on_previous_indentation_level:
        if writer.indentation_level == 0:
            Diagnostic.redundant_scope_close()
            return writer
        writer.decrease_indentation()

    while True:
        writer.write_line(brace)
        if writer.indentation_level == 0:
            return writer
        writer.decrease_indentation()


def _open(writer: CodeWriter, header: t.Optional[str], brace: str) -> None:
    if header:
        writer.write_line(header)
    open_scope_and_indent(writer, brace)


@contextmanager
def scope(
    writer: CodeWriter,
    header: t.Optional[str] = None,
    brace: str = "{",
    closing_brace: str = "}",
) -> t.Generator[CodeWriter, None, None]:
    """Write `header` and an opening brace, indent, and close the scope when
    the block ends. An exception in the block skips the close."""

    must_not_be_none(writer, "writer")
    _open(writer, header, brace)
    yield writer
    close_scope(writer, closing_brace)


class ScopeStack:
    """Tracks named scopes on top of a writer and checks that they are closed
    innermost first.

    Only scopes opened through the stack are tracked; indentation changed
    directly on the writer is not seen here.
    """

    def __init__(
        self, writer: CodeWriter, brace: str = "{", closing_brace: str = "}"
    ):
        self._writer = must_not_be_none(writer, "writer")
        self._brace = brace
        self._closing_brace = closing_brace
        self._tags: t.List[str] = []

    @property
    def writer(self) -> CodeWriter:
        return self._writer

    @property
    def depth(self) -> int:
        return len(self._tags)

    @property
    def tags(self) -> t.Tuple[str, ...]:
        return tuple(self._tags)

    @property
    def innermost(self) -> Option[str]:
        if not self._tags:
            return None_()
        return Some(self._tags[-1])

    def open(self, tag: str, header: t.Optional[str] = None) -> Self:
        must_not_be_empty(tag, "tag")
        _open(self._writer, header, self._brace)
        self._tags.append(tag)
        return self

    def close(self, tag: str) -> Self:
        must_not_be_empty(tag, "tag")
        innermost = self.innermost
        if innermost.is_none() or innermost.unwrap() != tag:
            raise ScopeMismatch(tag, innermost.unwrap_or(None))
        if self._writer.indentation_level == 0:
            raise InvalidOperation(
                f"Cannot close scope '{tag}', the writer is at indentation level 0"
            )
        close_scope(self._writer, self._closing_brace)
        self._tags.pop()
        return self

    def close_all(self) -> Self:
        while self._tags:
            self.close(self._tags[-1])
        return self

    def finish(self) -> t.List[str]:
        remaining = list(self._tags)
        if remaining:
            Diagnostic.unclosed_scopes(", ".join(remaining))
        return remaining

    def __section(
        self, tag: str, header: t.Optional[str] = None
    ) -> t.Generator["ScopeStack", None, None]:
        self.open(tag, header)
        yield self
        self.close(tag)

    section = t.cast(
        t.Callable[..., t.ContextManager["ScopeStack"]],
        contextmanager(__section),
    )
