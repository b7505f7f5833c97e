"""TransformDemo: map every record to an integer."""

from __future__ import annotations

import logging

from lambdaplay.domain.functions import Transform
from lambdaplay.domain.operations import map_items
from lambdaplay.domain.records import Record
from lambdaplay.services.base import BaseDemo
from lambdaplay.services.result import DemoResult
from lambdaplay.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def sum_fields(record: Record) -> int:
    return record.first + record.second


class TransformDemo(BaseDemo):
    """Run :func:`map_items` over the records with a single-method transform."""

    op = "map"

    @traced
    def run(self, transform: Transform[Record, int] = sum_fields) -> DemoResult:
        with trace_span("map_items") as span:
            mapped = map_items(self.records, transform)
            if span:
                span.annotate("input", len(self.records))

        logger.debug("Mapped %d records", len(mapped))
        return self._ok({"before": self._encoded_records(), "result": mapped})
