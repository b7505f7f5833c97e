"""ReduceDemo: identity / accumulator / combiner reduction.

Two reductions run back to back: the sum of ``first`` over the records, and
the sum of the code points of ``A``, ``B``, ``C``.  The combiner only merges
partial results produced by separate partitions; with a single partition it
is never called and the reduction is a plain left fold.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lambdaplay.domain.functions import Combiner
from lambdaplay.domain.operations import reduce
from lambdaplay.domain.records import DEFAULT_CHARS, Record
from lambdaplay.services.base import BaseDemo
from lambdaplay.services.result import DemoResult
from lambdaplay.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def add(left: int, right: int) -> int:
    return left + right


class CombinerTrace:
    """Wrap an integer combiner and record each ``(a, b, c)`` invocation."""

    def __init__(self, combiner: Combiner[int] = add) -> None:
        self._combiner = combiner
        self.calls: list[dict[str, int]] = []

    def __call__(self, left: int, right: int, /) -> int:
        merged = self._combiner(left, right)
        self.calls.append({"a": left, "b": right, "c": merged})
        return merged


class ReduceDemo(BaseDemo):
    """Reduce the records and a fixed character sequence to integers."""

    op = "reduce"

    def __init__(self, records: Sequence[Record], chars: Sequence[str] = DEFAULT_CHARS) -> None:
        super().__init__(records)
        self._chars = tuple(chars)

    @traced
    def run(
        self,
        *,
        partitions: int = 1,
        parallel: bool = False,
        max_workers: int | None = None,
    ) -> DemoResult:
        trace = CombinerTrace()
        try:
            with trace_span("reduce_records") as span:
                total = reduce(
                    self.records,
                    0,
                    lambda acc, r: acc + r.first,
                    trace,
                    partitions=partitions,
                    parallel=parallel,
                    max_workers=max_workers,
                )
                if span:
                    span.annotate("combiner_calls", len(trace.calls))

            with trace_span("reduce_chars"):
                char_total = reduce(
                    self._chars,
                    0,
                    lambda acc, c: acc + ord(c),
                    add,
                    partitions=partitions,
                    parallel=parallel,
                    max_workers=max_workers,
                )
        except ValueError as exc:
            return self._fail("INVALID_PARTITIONS", str(exc), partitions=partitions)

        logger.debug(
            "Reduced records to %d and chars to %d (%d combiner calls)",
            total,
            char_total,
            len(trace.calls),
        )
        return self._ok(
            {
                "combiner_calls": trace.calls,
                "result": total,
                "chars": list(self._chars),
                "ascii_result": char_total,
                "partitions": partitions,
                "parallel": parallel,
            }
        )
