from __future__ import annotations

from typing import Iterable, TypeVar

from result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


def unwrap(result: Result[T, E], /) -> T:
    """Returns the success value, or raises the carried error."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise error


def partition(items: Iterable[Result[T, E]], /) -> tuple[list[T], list[E]]:
    """Splits results into success values and errors, keeping their order."""
    values: list[T] = []
    errors: list[E] = []

    for result in items:
        match result:
            case Ok(value):
                values.append(value)
            case Err(error):
                errors.append(error)

    return values, errors
