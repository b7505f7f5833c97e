"""FilterDemo: keep the records that pass a predicate."""

from __future__ import annotations

import logging

from lambdaplay.domain.functions import Predicate
from lambdaplay.domain.operations import filter_items
from lambdaplay.domain.records import Record
from lambdaplay.services.base import BaseDemo, encode_records
from lambdaplay.services.result import DemoResult
from lambdaplay.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def first_is_one(record: Record) -> bool:
    return record.first == 1


class FilterDemo(BaseDemo):
    """Run :func:`filter_items` over the records with a single-method predicate."""

    op = "filter"

    @traced
    def run(self, predicate: Predicate[Record] = first_is_one) -> DemoResult:
        with trace_span("filter_items") as span:
            kept = filter_items(self.records, predicate)
            if span:
                span.annotate("input", len(self.records))
                span.annotate("kept", len(kept))

        logger.debug("Filter kept %d of %d records", len(kept), len(self.records))
        return self._ok(
            {
                "before": self._encoded_records(),
                "result": encode_records(kept),
            }
        )
