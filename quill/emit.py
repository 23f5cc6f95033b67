import typing as t
from contextlib import contextmanager

from typing_extensions import Self

from quill._utils import must_not_be_none
from quill.diagnostics import Diagnostic
from quill.errors import InvalidArgument, InvalidOperation

# Same bound as an unsigned 32 bit counter; the level must stay below it.
MAX_INDENTATION_LEVEL = 2**32 - 1


class TextSink(t.Protocol):
    def write(self, text: str, /) -> t.Any:
        ...


class CodeWriter:
    """Writes text to a sink, indenting each line lazily.

    Indentation is written once per line, right before the first non-empty
    text on that line, so several `write` calls can compose a single line and
    empty lines carry no leading whitespace.

    The default line terminator is a bare line feed; text-mode sinks translate
    it to the platform terminator themselves.
    """

    def __init__(
        self,
        sink: TextSink,
        initial_indentation_level: int = 0,
        indentation_characters: str = "    ",
        newline: str = "\n",
    ):
        self._sink = must_not_be_none(sink, "sink")
        self._indentation_characters = must_not_be_none(
            indentation_characters, "indentation_characters"
        )
        if not newline:
            raise InvalidArgument("newline", "Line terminator must not be empty")
        self._newline = newline
        if not 0 <= initial_indentation_level < MAX_INDENTATION_LEVEL:
            raise InvalidArgument(
                "initial_indentation_level",
                f"Indentation level must be in [0, {MAX_INDENTATION_LEVEL})",
            )
        self._indentation_level = initial_indentation_level
        self._is_at_line_start = True

    @property
    def indentation_level(self) -> int:
        return self._indentation_level

    @property
    def indentation_characters(self) -> str:
        return self._indentation_characters

    @property
    def newline(self) -> str:
        return self._newline

    @property
    def is_at_line_start(self) -> bool:
        return self._is_at_line_start

    def increase_indentation(self) -> Self:
        if self._indentation_level + 1 >= MAX_INDENTATION_LEVEL:
            raise InvalidOperation(
                f"The indentation level must not reach {MAX_INDENTATION_LEVEL}"
            )
        self._indentation_level += 1
        return self

    def decrease_indentation(self) -> Self:
        if self._indentation_level == 0:
            raise InvalidOperation("The indentation level cannot be less than zero")
        self._indentation_level -= 1
        return self

    def __indent(self) -> t.Generator[None, None, None]:
        # An exception in the body skips the dedent.
        self.increase_indentation()
        yield
        self.decrease_indentation()

    indent = t.cast(
        t.Callable[["CodeWriter"], t.ContextManager[None]],
        contextmanager(__indent),
    )

    def write(self, text: str) -> Self:
        if text is None:
            raise InvalidArgument("text", "Value must not be None")
        if not text:
            return self
        if "\n" in text or "\r" in text:
            Diagnostic.embedded_line_break(text)
        self._write_indentation_if_necessary()
        self._sink.write(text)
        return self

    def write_line(self, text: str = "") -> Self:
        self.write(text)
        self._sink.write(self._newline)
        self._is_at_line_start = True
        return self

    def write_empty_line(self) -> Self:
        if not self._is_at_line_start:
            self.write_line()
        return self.write_line()

    def write_lines(self, text: str) -> Self:
        for line in must_not_be_none(text, "text").splitlines():
            self.write_line(line)
        return self

    def _write_indentation_if_necessary(self) -> None:
        if not self._is_at_line_start:
            return

        self._is_at_line_start = False
        if self._indentation_level == 0:
            return

        self._sink.write(self._indentation_characters * self._indentation_level)
