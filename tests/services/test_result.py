"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from surveyctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="analyze", data={"collected": 3})
        assert result.ok is True
        assert result.data == {"collected": 3}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("analyze", "INVALID_CONFIG", "bad limit", field="limit")
        assert result.ok is False
        assert result.error == ServiceError(
            code="INVALID_CONFIG", message="bad limit", detail={"field": "limit"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="generate", data={"count": 1}, meta={"x": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 1
        assert parsed["meta"]["x"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
