from typing import Generic, Never, TypeVar, Union

from calgrid.exceptions import CalendarError

T = TypeVar("T")
E = TypeVar("E", bound=CalendarError)


class Ok(Generic[T]):
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def unwrap(self) -> T:
        return self.value


class Err(Generic[E]):
    """Holds a validation error instead of raising it right away"""

    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        self.error = error

    def unwrap(self) -> Never:
        raise self.error


Result = Union[Ok[T], Err[E]]
