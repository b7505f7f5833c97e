"""Tests for DemoResult and DemoError."""

import json

import pytest

from lambdaplay.services.result import DemoError, DemoResult


class TestDemoResult:
    def test_success_construction(self) -> None:
        result = DemoResult(ok=True, op="map", data={"result": [2, 3]})
        assert result.ok is True
        assert result.op == "map"
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        result = DemoResult(
            ok=False, op="reduce", error=DemoError(code="INVALID_PARTITIONS", message="bad")
        )
        assert result.error is not None
        assert result.error.code == "INVALID_PARTITIONS"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = DemoResult(ok=True, op="reduce", data={"result": 6})
        parsed = json.loads(result.model_dump_json())
        assert parsed["data"]["result"] == 6
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = DemoResult(ok=True, op="filter")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
