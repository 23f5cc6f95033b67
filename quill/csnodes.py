import abc
import typing as t
from dataclasses import dataclass, field

from quill import xmldoc
from quill.emit import CodeWriter
from quill.errors import InvalidOperation
from quill.scopes import (
    close_remaining_scopes,
    close_scope,
    open_scope_and_indent,
    scope,
)


@dataclass
class DocEntry:
    name: str
    comment: str


@dataclass
class Documentation:
    summary: str
    type_parameters: t.List[DocEntry] = field(default_factory=list)
    parameters: t.List[DocEntry] = field(default_factory=list)
    returns: t.Optional[str] = None
    exceptions: t.List[DocEntry] = field(default_factory=list)
    remarks: t.Optional[str] = None

    def emit(self, writer: CodeWriter) -> None:
        xmldoc.write_summary(writer, self.summary)
        for entry in self.type_parameters:
            xmldoc.write_type_param(writer, entry.name, entry.comment)
        for entry in self.parameters:
            xmldoc.write_param(writer, entry.name, entry.comment)
        if self.returns:
            xmldoc.write_returns(writer, self.returns)
        for entry in self.exceptions:
            xmldoc.write_exception(writer, entry.name, entry.comment)
        if self.remarks:
            xmldoc.write_remarks(writer, self.remarks)


class CsStmt(abc.ABC):
    @abc.abstractmethod
    def emit(self, writer: CodeWriter) -> None:
        ...


@dataclass
class RawStatement(CsStmt):
    text: str

    def emit(self, writer: CodeWriter) -> None:
        writer.write_lines(self.text)


@dataclass
class ReturnStatement(CsStmt):
    value: t.Optional[str] = None

    def emit(self, writer: CodeWriter) -> None:
        if self.value:
            writer.write_line("return %s;" % self.value)
        else:
            writer.write_line("return;")


@dataclass
class ThrowStatement(CsStmt):
    expression: str

    def emit(self, writer: CodeWriter) -> None:
        writer.write_line("throw %s;" % self.expression)


@dataclass
class IfStatement(CsStmt):
    condition: str
    then: t.List[CsStmt]
    else_: t.Optional[t.List[CsStmt]] = None

    def emit(self, writer: CodeWriter) -> None:
        with scope(writer, "if (%s)" % self.condition):
            for stmt in self.then:
                stmt.emit(writer)
        if self.else_:
            with scope(writer, "else"):
                for stmt in self.else_:
                    stmt.emit(writer)


@dataclass
class Parameter:
    type: str
    name: str
    default: t.Optional[str] = None

    def render(self) -> str:
        if self.default is None:
            return f"{self.type} {self.name}"
        return f"{self.type} {self.name} = {self.default}"


def _modifiers(modifiers: t.List[str]) -> str:
    return "".join(f"{m} " for m in modifiers)


@dataclass
class Method:
    name: str
    return_type: str = "void"
    parameters: t.List[Parameter] = field(default_factory=list)
    body: t.List[CsStmt] = field(default_factory=list)
    modifiers: t.List[str] = field(default_factory=lambda: ["public", "static"])
    type_parameters: t.List[str] = field(default_factory=list)
    doc: t.Optional[Documentation] = None

    def signature(self) -> str:
        params = ", ".join([p.render() for p in self.parameters])
        generics = ""
        if self.type_parameters:
            generics = "<%s>" % ", ".join(self.type_parameters)
        return (
            f"{_modifiers(self.modifiers)}{self.return_type} "
            f"{self.name}{generics}({params})"
        )

    def emit(self, writer: CodeWriter) -> None:
        if self.doc:
            self.doc.emit(writer)
        writer.write_line(self.signature())
        open_scope_and_indent(writer)
        for stmt in self.body:
            stmt.emit(writer)
        close_scope(writer)


@dataclass
class TypeDeclaration:
    name: str
    kind: str = "class"
    modifiers: t.List[str] = field(default_factory=lambda: ["public"])
    members: t.List[Method] = field(default_factory=list)
    doc: t.Optional[Documentation] = None

    def emit(self, writer: CodeWriter) -> None:
        if self.doc:
            self.doc.emit(writer)
        writer.write_line(f"{_modifiers(self.modifiers)}{self.kind} {self.name}")
        open_scope_and_indent(writer)
        for i, member in enumerate(self.members):
            if i:
                writer.write_empty_line()
            member.emit(writer)
        close_scope(writer)


@dataclass
class Namespace:
    name: str
    types: t.List[TypeDeclaration] = field(default_factory=list)

    def emit(self, writer: CodeWriter) -> None:
        if writer.indentation_level != 0:
            raise InvalidOperation(
                f"Namespace {self.name} must be emitted at indentation level 0"
            )
        writer.write_line(f"namespace {self.name}")
        open_scope_and_indent(writer)
        for i, ty in enumerate(self.types):
            if i:
                writer.write_empty_line()
            ty.emit(writer)
        close_remaining_scopes(writer)


@dataclass
class CodeUnit:
    usings: t.List[str] = field(default_factory=list)
    namespaces: t.List[Namespace] = field(default_factory=list)

    def emit(self, writer: CodeWriter) -> None:
        for using in self.usings:
            writer.write_line(f"using {using};")
        for i, namespace in enumerate(self.namespaces):
            if i or self.usings:
                writer.write_empty_line()
            namespace.emit(writer)
