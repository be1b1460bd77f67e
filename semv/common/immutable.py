from __future__ import annotations

from dataclasses import Field, dataclass, field
from functools import wraps
from typing import Any, Callable, TypeAlias, TypeVar, dataclass_transform, final, overload

T = TypeVar("T")

# a standard class decorator
Decorator: TypeAlias = Callable[[type[T]], type[T]]


class _FieldValues(dict[str, Any]):
    """Field values collected by a hand written '__init__', assigned like attributes."""

    __slots__ = ()

    def __setattr__(self, name: str, value: Any, /) -> None:
        self[name] = value

    def __getattr__(self, name: str, /) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None


def _collect_then_init(cls: type[T], collect: Callable[..., None], /) -> None:
    """The generated '__init__' receives whatever 'collect' assigned."""
    generated = cls.__init__

    @wraps(collect)
    def __init__(self: T, *args: Any, **kwargs: Any) -> None:
        values = _FieldValues()
        collect(values, *args, **kwargs)
        generated(self, **values)

    cls.__init__ = __init__  # type: ignore


# fmt: off
@overload
def immutable(cls: type[T], /) -> type[T]: ...
@overload
def immutable(*, eq: bool = True) -> Decorator[T]: ...
# fmt: on
@dataclass_transform(frozen_default=True, field_specifiers=(Field[Any], field))
def immutable(cls: type[T] | None = None, /, *, eq: bool = True) -> type[T] | Decorator[T]:
    """
    Decorator to create a final, frozen and slotted dataclass.

    A class body may define '__init__' with the signature callers use. It
    receives the field values instead of the instance and assigns each
    dataclass field to it. Pass 'eq=False' to keep a hand written '__eq__'
    and '__hash__'.
    """

    def freeze(cls: type[T], /) -> type[T]:
        collect = cls.__dict__.get("__init__")
        if callable(collect):
            del cls.__init__  # type: ignore

        frozen = dataclass(frozen=True, slots=True, eq=eq)(cls)
        if callable(collect):
            _collect_then_init(frozen, collect)

        return final(frozen)

    if cls is not None:
        return freeze(cls)
    else:
        return freeze
