import typing as t


class QuillException(Exception):
    pass


class InvalidArgument(QuillException, ValueError):
    def __init__(self, parameter_name: str, message: str):
        super().__init__(f"{message} (parameter '{parameter_name}')")
        self.parameter_name = parameter_name


class InvalidOperation(QuillException):
    pass


class ScopeMismatch(InvalidOperation):
    def __init__(self, expected: str, actual: t.Optional[str]):
        if actual is None:
            message = f"Cannot close scope '{expected}', no scope is open"
        else:
            message = f"Cannot close scope '{expected}', innermost scope is '{actual}'"
        super().__init__(message)
        self.expected = expected
        self.actual = actual
