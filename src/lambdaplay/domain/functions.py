"""Single-method function types.

Each protocol exposes exactly one operation, ``__call__``.  Any plain
function, lambda, or object with a matching ``__call__`` satisfies it
structurally; nothing needs to subclass these.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar

T_contra = TypeVar("T_contra", contravariant=True)
U = TypeVar("U")
R_co = TypeVar("R_co", covariant=True)


class Predicate(Protocol[T_contra]):
    """``item -> bool``; decides whether an item is kept by a filter."""

    def __call__(self, item: T_contra, /) -> bool: ...


class Transform(Protocol[T_contra, R_co]):
    """``item -> result``; one output per input."""

    def __call__(self, item: T_contra, /) -> R_co: ...


class Expansion(Protocol[T_contra, R_co]):
    """``item -> iterable``; zero or more outputs per input."""

    def __call__(self, item: T_contra, /) -> Iterable[R_co]: ...


class Accumulator(Protocol[U, T_contra]):
    """``(partial, item) -> partial``; folds one item into a running value."""

    def __call__(self, partial: U, item: T_contra, /) -> U: ...


class Combiner(Protocol[U]):
    """``(partial, partial) -> partial``; merges two independent partial results."""

    def __call__(self, left: U, right: U, /) -> U: ...
