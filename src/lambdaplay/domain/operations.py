"""Hand-written collection operations: filter, map, flat-map, reduce.

All operations are pure with respect to their input: they never mutate
``items`` and always return a new list (or a new accumulated value).
Exceptions raised by the supplied callables propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

from lambdaplay.domain.functions import Accumulator, Combiner, Expansion, Predicate, Transform

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def filter_items(items: Sequence[T], predicate: Predicate[T]) -> list[T]:
    """Keep the items for which *predicate* returns true, in input order.

    Examples:
        >>> filter_items([1, 2, 3, 4], lambda n: n % 2 == 0)
        [2, 4]
    """
    result: list[T] = []
    for item in items:
        if predicate(item):
            result.append(item)
    return result


def map_items(items: Sequence[T], transform: Transform[T, R]) -> list[R]:
    """Apply *transform* to every item; ``out[i] == transform(items[i])``.

    Examples:
        >>> map_items([1, 2, 3], lambda n: n * 10)
        [10, 20, 30]
    """
    result: list[R] = []
    for item in items:
        result.append(transform(item))
    return result


def project(items: Sequence[T], fn: Transform[T, R]) -> list[R]:
    """One-to-one projection, the counterpart of :func:`flat_map`."""
    return [fn(item) for item in items]


def flat_map(items: Sequence[T], expand: Expansion[T, R]) -> list[R]:
    """Expand each item into zero or more values and concatenate the results.

    Examples:
        >>> flat_map([1, 2, 3], lambda n: [n] * n)
        [1, 2, 2, 3, 3, 3]
        >>> flat_map([1, 2], lambda n: [])
        []
    """
    result: list[R] = []
    for item in items:
        result.extend(expand(item))
    return result


def partition(items: Sequence[T], parts: int) -> list[Sequence[T]]:
    """Split *items* into at most *parts* contiguous, non-empty chunks.

    Chunk sizes differ by at most one; earlier chunks take the remainder.

    Examples:
        >>> partition([1, 2, 3, 4, 5], 2)
        [[1, 2, 3], [4, 5]]
        >>> partition([1, 2], 5)
        [[1], [2]]
    """
    if parts < 1:
        raise ValueError(f"partitions must be >= 1, got {parts}")
    count = min(parts, len(items))
    if count == 0:
        return []
    size, extra = divmod(len(items), count)
    chunks: list[Sequence[T]] = []
    start = 0
    for index in range(count):
        end = start + size + (1 if index < extra else 0)
        chunks.append(items[start:end])
        start = end
    return chunks


def fold_left(items: Sequence[T], identity: U, accumulator: Accumulator[U, T]) -> U:
    """Strict left fold of *accumulator* over *items* starting at *identity*."""
    partial = identity
    for item in items:
        partial = accumulator(partial, item)
    return partial


def reduce(
    items: Sequence[T],
    identity: U,
    accumulator: Accumulator[U, T],
    combiner: Combiner[U],
    *,
    partitions: int = 1,
    parallel: bool = False,
    max_workers: int | None = None,
) -> U:
    """Reduce *items* to one value with an identity, accumulator, and combiner.

    With ``partitions == 1`` this is a strict left fold and *combiner* is
    never called.  With more partitions the input is split into contiguous
    chunks, each chunk is folded from *identity* (concurrently when
    *parallel* is set), and the partial results are merged left to right
    with *combiner*.  The order in which *accumulator* runs across chunks is
    then unspecified.

    The result equals the sequential fold for every partitioning provided
    *combiner* is associative, *identity* is neutral for it, and
    ``combiner(u, accumulator(identity, t)) == accumulator(u, t)``.

    Raises:
        ValueError: If *partitions* is less than 1.

    Examples:
        >>> reduce([1, 2, 3, 4], 0, lambda a, n: a + n, lambda a, b: a + b, partitions=3)
        10
    """
    if partitions < 1:
        raise ValueError(f"partitions must be >= 1, got {partitions}")
    if partitions == 1:
        return fold_left(items, identity, accumulator)

    chunks = partition(items, partitions)
    if not chunks:
        return identity
    logger.debug(
        "Reducing %d items in %d chunks (parallel=%s)", len(items), len(chunks), parallel
    )

    if parallel:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(fold_left, chunk, identity, accumulator) for chunk in chunks
            ]
            partials = [f.result() for f in futures]
    else:
        partials = [fold_left(chunk, identity, accumulator) for chunk in chunks]

    merged = partials[0]
    for partial in partials[1:]:
        merged = combiner(merged, partial)
    return merged
