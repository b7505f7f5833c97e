"""Record: the immutable integer pair every demo operates on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, repr=False)
class Record:
    """An immutable pair of integers.

    Equality and hashing are by field value.  ``repr`` and ``str`` share the
    ``Val{v1=.., v2=..}`` form so lists of records print compactly.

    Examples:
        >>> Record(1, 2)
        Val{v1=1, v2=2}
        >>> Record(1, 2) == Record(first=1, second=2)
        True
    """

    first: int
    second: int

    def __repr__(self) -> str:
        return f"Val{{v1={self.first}, v2={self.second}}}"

    __str__ = __repr__

    def to_dict(self) -> dict[str, int]:
        return {"first": self.first, "second": self.second}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Record:
        return cls(int(data["first"]), int(data["second"]))


def default_records() -> list[Record]:
    """The fixed demo input: (1,1), (1,2), (2,1), (2,2) in that order."""
    return [Record(1, 1), Record(1, 2), Record(2, 1), Record(2, 2)]


DEFAULT_CHARS: tuple[str, ...] = ("A", "B", "C")


def format_records(records: list[Record]) -> str:
    """Render records the way the demos print them.

    Examples:
        >>> format_records([Record(1, 1), Record(2, 2)])
        '[Val{v1=1, v2=1}, Val{v1=2, v2=2}]'
    """
    return "[" + ", ".join(str(r) for r in records) + "]"
