from typing import Iterable, Protocol, Self, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class FromComplement(Protocol):
    """Like building from an iterable, except the input is the complement of the set."""

    @classmethod
    def from_complement(cls, value: Iterable) -> Self: ...


def from_complement(cls: type, value: Iterable[T]):
    """Build an instance of `cls` that contains everything except `value`."""
    if not isinstance(cls, type) or not issubclass(cls, FromComplement):
        raise TypeError(f"{cls!r} cannot be built from a complement")
    return cls.from_complement(value)
