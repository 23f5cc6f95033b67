from quill.emit import CodeWriter
from quill.errors import InvalidArgument, InvalidOperation, QuillException

__all__ = ["CodeWriter", "InvalidArgument", "InvalidOperation", "QuillException"]
