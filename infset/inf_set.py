from collections.abc import Set as AbstractSet
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Iterable, Iterator

from loguru import logger

from .errors import InfiniteSetError, NotAComplementError, NotAUnionError


class Kind(Enum):
    # elements that are part of the set
    UNION = 0
    # elements that are *not* part of the set
    COMPLEMENT = 1

    def flipped(self) -> "Kind":
        return Kind.COMPLEMENT if self is Kind.UNION else Kind.UNION


@total_ordering
@dataclass
class InfSet[T]:
    """
    A set that holds either a finite union of elements or the complement of one.

    The universe of `T` is assumed to be infinite. An empty complement
    contains literally everything, so `InfSet.from_complement([False, True])`
    is *not* the empty set even though `bool` only has two values. Prefer
    element types with an unbounded number of values (ints, strings, tuples).

    >>> s = InfSet.from_elements([1, 2, 3]) & InfSet.from_complement([2])
    >>> s
    {1, 3}
    >>> InfSet.from_elements([1]) | InfSet.from_complement([1])
    !{}
    """

    kind: Kind = Kind.UNION
    storage: set[T] = field(default_factory=set)

    def __post_init__(self):
        # always own a private copy of the payload
        self.storage = set(self.storage)

    #### Construction ####
    @classmethod
    def empty(cls) -> "InfSet[T]":
        return cls(Kind.UNION, set())

    @classmethod
    def universal(cls) -> "InfSet[T]":
        return cls(Kind.COMPLEMENT, set())

    @classmethod
    def from_elements(cls, items: Iterable[T]) -> "InfSet[T]":
        return cls(Kind.UNION, set(items))

    @classmethod
    def from_complement(cls, items: Iterable[T]) -> "InfSet[T]":
        """Every value *not* in `items` is a member."""
        return cls(Kind.COMPLEMENT, set(items))

    from_excluded_elements = from_complement

    def copy(self) -> "InfSet[T]":
        return InfSet(self.kind, self.storage)

    def clear(self) -> None:
        """Reset to the empty union, even when this set was a complement."""
        self.kind = Kind.UNION
        self.storage = set()

    #### Queries ####
    def contains(self, value: T) -> bool:
        match self.kind:
            case Kind.UNION:
                return value in self.storage
            case Kind.COMPLEMENT:
                return value not in self.storage

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def is_disjoint(self, other: "InfSet[T]") -> bool:
        """
        True if `self` and `other` have no element in common.

        A union and a complement are disjoint when every element of the union
        is excluded by the complement. Two complements always overlap, since
        each excludes only finitely many values.
        """
        match (self.kind, other.kind):
            case (Kind.UNION, Kind.UNION):
                return self.storage.isdisjoint(other.storage)
            case (Kind.UNION, Kind.COMPLEMENT):
                return self.storage <= other.storage
            case (Kind.COMPLEMENT, Kind.UNION):
                return other.storage <= self.storage
            case _:
                return False

    def is_subset(self, other: "InfSet[T]") -> bool:
        """True if `other` contains at least every element of `self`."""
        match (self.kind, other.kind):
            case (Kind.UNION, Kind.UNION):
                return self.storage <= other.storage
            case (Kind.UNION, Kind.COMPLEMENT):
                # nothing in the union may be excluded by the complement
                return self.storage.isdisjoint(other.storage)
            case (Kind.COMPLEMENT, Kind.UNION):
                # an infinite set never fits in a finite one
                return False
            case _:
                # excluding more makes the complement smaller
                return other.storage <= self.storage

    def is_superset(self, other: "InfSet[T]") -> bool:
        """True if `self` contains at least every element of `other`."""
        return other.is_subset(self)

    def is_empty(self) -> bool:
        return self.kind is Kind.UNION and not self.storage

    def is_all(self) -> bool:
        return self.kind is Kind.COMPLEMENT and not self.storage

    def is_union(self) -> bool:
        return self.kind is Kind.UNION

    def is_complement(self) -> bool:
        return self.kind is Kind.COMPLEMENT

    def __bool__(self) -> bool:
        return not self.is_empty()

    #### Storage access ####
    def as_union(self) -> set[T] | None:
        return self.storage if self.is_union() else None

    def as_complement(self) -> set[T] | None:
        return self.storage if self.is_complement() else None

    def as_storage(self) -> set[T]:
        return self.storage

    def into_storage(self) -> set[T]:
        return set(self.storage)

    def try_into_union(self) -> set[T]:
        """Narrow to a plain finite set; raises `NotAUnionError` for complements."""
        if self.is_complement():
            logger.debug(f"Refusing to narrow complement {self!r} to a finite set")
            raise NotAUnionError(self)
        return set(self.storage)

    def try_into_complement(self) -> set[T]:
        """Return the excluded elements; raises `NotAComplementError` for unions."""
        if self.is_union():
            logger.debug(f"Refusing to read excluded elements of union {self!r}")
            raise NotAComplementError(self)
        return set(self.storage)

    def __iter__(self) -> Iterator[T]:
        if self.is_complement():
            raise InfiniteSetError("cannot iterate over a complement set")
        return iter(sorted(self.storage))

    def __len__(self) -> int:
        if self.is_complement():
            raise InfiniteSetError("length of a complement set is infinite")
        return len(self.storage)

    #### Mutation ####
    def insert(self, value: T) -> None:
        """Make `value` a member of the set."""
        match self.kind:
            case Kind.UNION:
                self.storage.add(value)
            case Kind.COMPLEMENT:
                self.storage.discard(value)

    add = insert

    def discard(self, value: T) -> None:
        """Make sure `value` is not a member of the set."""
        match self.kind:
            case Kind.UNION:
                self.storage.discard(value)
            case Kind.COMPLEMENT:
                self.storage.add(value)

    #### Algebra ####
    @staticmethod
    def _coerce(other) -> "InfSet | None":
        if isinstance(other, InfSet):
            return other
        if isinstance(other, AbstractSet):
            return InfSet.from_elements(other)
        return None

    def complement(self) -> "InfSet[T]":
        return InfSet(self.kind.flipped(), self.storage)

    def __invert__(self) -> "InfSet[T]":
        return self.complement()

    def union(self, other: "InfSet[T]") -> "InfSet[T]":
        match (self.kind, other.kind):
            case (Kind.UNION, Kind.UNION):
                return InfSet(Kind.UNION, self.storage | other.storage)
            case (Kind.UNION, Kind.COMPLEMENT):
                return InfSet(Kind.COMPLEMENT, other.storage - self.storage)
            case (Kind.COMPLEMENT, Kind.UNION):
                return InfSet(Kind.COMPLEMENT, self.storage - other.storage)
            case _:
                # excluded only if both exclude it
                return InfSet(Kind.COMPLEMENT, self.storage & other.storage)

    def intersection(self, other: "InfSet[T]") -> "InfSet[T]":
        match (self.kind, other.kind):
            case (Kind.UNION, Kind.UNION):
                return InfSet(Kind.UNION, self.storage & other.storage)
            case (Kind.UNION, Kind.COMPLEMENT):
                return InfSet(Kind.UNION, self.storage - other.storage)
            case (Kind.COMPLEMENT, Kind.UNION):
                return InfSet(Kind.UNION, other.storage - self.storage)
            case _:
                # excluded if either excludes it
                return InfSet(Kind.COMPLEMENT, self.storage | other.storage)

    def _replace_with(self, result: "InfSet[T]") -> None:
        if result.kind is not self.kind:
            logger.debug(f"In-place combine flips {self!r} to {result!r}")
        self.kind = result.kind
        self.storage = result.storage

    def union_update(self, other: "InfSet[T]") -> None:
        if self.kind is other.kind is Kind.UNION:
            self.storage |= other.storage
        elif self.kind is other.kind is Kind.COMPLEMENT:
            self.storage &= other.storage
        elif self.is_complement():
            self.storage -= other.storage
        else:
            self._replace_with(self.union(other))

    def intersection_update(self, other: "InfSet[T]") -> None:
        if self.kind is other.kind is Kind.UNION:
            self.storage &= other.storage
        elif self.kind is other.kind is Kind.COMPLEMENT:
            self.storage |= other.storage
        elif self.is_union():
            self.storage -= other.storage
        else:
            self._replace_with(self.intersection(other))

    # join operator
    def __or__(self, other) -> "InfSet[T]":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.union(other)

    def __ror__(self, other) -> "InfSet[T]":
        return self.__or__(other)

    def __ior__(self, other) -> "InfSet[T]":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self.union_update(other)
        return self

    # meet operator
    def __and__(self, other) -> "InfSet[T]":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.intersection(other)

    def __rand__(self, other) -> "InfSet[T]":
        return self.__and__(other)

    def __iand__(self, other) -> "InfSet[T]":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self.intersection_update(other)
        return self

    #### Rendering & ordering ####
    def __repr__(self) -> str:
        prefix = "!" if self.is_complement() else ""
        return prefix + "{" + ", ".join(repr(x) for x in sorted(self.storage)) + "}"

    __str__ = __repr__

    def _sort_key(self):
        return (self.kind.value, sorted(self.storage))

    # structural order, not the subset relation
    def __lt__(self, other) -> bool:
        if not isinstance(other, InfSet):
            return NotImplemented
        return self._sort_key() < other._sort_key()
