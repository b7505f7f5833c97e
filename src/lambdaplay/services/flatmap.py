"""FlatMapDemo: one-to-one projection versus expand-and-flatten."""

from __future__ import annotations

from lambdaplay.domain.operations import flat_map, project
from lambdaplay.services.base import BaseDemo
from lambdaplay.services.result import DemoResult
from lambdaplay.services.telemetry import trace_span, traced


class FlatMapDemo(BaseDemo):
    """Project each record's ``first`` field, then flat-map it as a singleton.

    With a singleton expansion the two sequences are element-wise equal.
    """

    op = "flatmap"

    @traced
    def run(self) -> DemoResult:
        with trace_span("project"):
            projected = project(self.records, lambda r: r.first)
        with trace_span("flat_map"):
            flattened = flat_map(self.records, lambda r: [r.first])

        warnings: list[str] = []
        if projected != flattened:
            warnings.append("Projected and flattened sequences differ")
        return self._ok(
            {
                "before": self._encoded_records(),
                "projected": projected,
                "flattened": flattened,
                "equal": projected == flattened,
            },
            warnings=warnings,
        )
