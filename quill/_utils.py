import typing as t

from quill.errors import InvalidArgument

T = t.TypeVar("T")


def must_not_be_none(value: t.Optional[T], parameter_name: str) -> T:
    if value is None:
        raise InvalidArgument(parameter_name, "Value must not be None")
    return value


def must_not_be_empty(value: t.Optional[str], parameter_name: str) -> str:
    value = must_not_be_none(value, parameter_name)
    if not isinstance(value, str):
        raise InvalidArgument(
            parameter_name, f"Expected a string, got {type(value).__name__}"
        )
    if not value:
        raise InvalidArgument(parameter_name, "String must not be empty")
    return value
