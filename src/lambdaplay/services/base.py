"""BaseDemo: shared foundation for every demo service.

Every demo receives the input records at construction time and returns a
:class:`DemoResult` from its ``run`` method.  Demos never keep the records
beyond their own lifetime and never mutate them.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, ClassVar

from lambdaplay.domain.records import Record
from lambdaplay.services.result import DemoError, DemoResult


class BaseDemo:
    """Abstract base for the demo services.

    Subclasses set ``op`` and implement ``run``::

        class FilterDemo(BaseDemo):
            op = "filter"

            def run(self) -> DemoResult:
                ...
                return self._ok({"result": ...})
    """

    op: ClassVar[str] = "demo"

    def __init__(self, records: Sequence[Record]) -> None:
        self._records = tuple(records)

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def _encoded_records(self) -> list[dict[str, int]]:
        return encode_records(self._records)

    def _ok(self, data: dict[str, Any], *, warnings: list[str] | None = None) -> DemoResult:
        return DemoResult(ok=True, op=self.op, data=data, warnings=warnings or [])

    def _fail(self, code: str, message: str, **detail: Any) -> DemoResult:
        return DemoResult(
            ok=False,
            op=self.op,
            error=DemoError(code=code, message=message, detail=detail),
        )


def encode_records(records: Sequence[Record]) -> list[dict[str, int]]:
    """Encode records into the JSON-safe payload form."""
    return [r.to_dict() for r in records]
