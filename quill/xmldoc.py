# XML documentation comments, one "///" line per call

from quill._utils import must_not_be_empty, must_not_be_none
from quill.emit import CodeWriter

PREFIX = "/// "


def _doc_line(writer: CodeWriter, text: str) -> CodeWriter:
    return writer.write_line(PREFIX + text)


def _block(writer: CodeWriter, tag: str, text: str) -> CodeWriter:
    _doc_line(writer, f"<{tag}>")
    _doc_line(writer, text)
    return _doc_line(writer, f"</{tag}>")


def write_summary(writer: CodeWriter, summary: str) -> CodeWriter:
    must_not_be_none(writer, "writer")
    must_not_be_empty(summary, "summary")
    return _block(writer, "summary", summary)


def write_remarks(writer: CodeWriter, remarks: str) -> CodeWriter:
    must_not_be_none(writer, "writer")
    must_not_be_empty(remarks, "remarks")
    return _block(writer, "remarks", remarks)


def write_param(writer: CodeWriter, parameter_name: str, comment: str) -> CodeWriter:
    must_not_be_none(writer, "writer")
    must_not_be_empty(parameter_name, "parameter_name")
    must_not_be_empty(comment, "comment")
    return _doc_line(writer, f'<param name="{parameter_name}">{comment}</param>')


def write_type_param(
    writer: CodeWriter, type_parameter_name: str, comment: str
) -> CodeWriter:
    must_not_be_none(writer, "writer")
    must_not_be_empty(type_parameter_name, "type_parameter_name")
    must_not_be_empty(comment, "comment")
    return _doc_line(
        writer, f'<typeparam name="{type_parameter_name}">{comment}</typeparam>'
    )


def write_exception(
    writer: CodeWriter, exception_type_name: str, comment: str
) -> CodeWriter:
    must_not_be_none(writer, "writer")
    must_not_be_empty(exception_type_name, "exception_type_name")
    must_not_be_empty(comment, "comment")
    return _doc_line(
        writer, f'<exception cref="{exception_type_name}">{comment}</exception>'
    )


def write_returns(writer: CodeWriter, description: str) -> CodeWriter:
    must_not_be_none(writer, "writer")
    must_not_be_empty(description, "description")
    return _doc_line(writer, f"<returns>{description}</returns>")


def to_param_ref(parameter_name: str) -> str:
    must_not_be_empty(parameter_name, "parameter_name")
    return f'<paramref name="{parameter_name}" />'


def to_type_param_ref(type_parameter_name: str) -> str:
    must_not_be_empty(type_parameter_name, "type_parameter_name")
    return f'<typeparamref name="{type_parameter_name}" />'


def to_see(reference: str) -> str:
    must_not_be_empty(reference, "reference")
    return f'<see cref="{reference}" />'
