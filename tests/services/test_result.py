"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from staffctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success(self) -> None:
        result = ServiceResult.success("add_department", {"code": 181})
        assert result.ok is True
        assert result.op == "add_department"
        assert result.data == {"code": 181}
        assert result.error is None

    def test_success_without_data(self) -> None:
        assert ServiceResult.success("noop").data == {}

    def test_failure_detail_may_reuse_parameter_names(self) -> None:
        result = ServiceResult.failure("add_department", "duplicate_key", "taken", code=181)
        assert result.ok is False
        assert result.error == ServiceError(
            code="duplicate_key", message="taken", detail={"code": 181}
        )

    def test_frozen(self) -> None:
        result = ServiceResult.success("x")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_serializable(self) -> None:
        result = ServiceResult.failure("remove_staff", "not_found", "missing", number=1)
        assert '"not_found"' in result.model_dump_json()
