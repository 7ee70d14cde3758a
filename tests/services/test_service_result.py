"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mercyctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_output_on_success(self) -> None:
        result = ServiceResult(ok=True, op="decode", data={"output": "mercy"})
        assert result.output == "mercy"

    def test_output_on_error(self) -> None:
        err = ServiceError(code="UNSUPPORTED_PROTOCOL", message="Unable to decode message")
        result = ServiceResult(ok=False, op="decode", error=err)
        assert result.output == "Unable to decode message"

    def test_output_without_error(self) -> None:
        assert ServiceResult(ok=False, op="decode").output == "Unknown error"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="hash")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip(self) -> None:
        result = ServiceResult(
            ok=False,
            op="info",
            error=ServiceError(code="ENVIRONMENT_FAILURE", message="timed out"),
        )
        assert ServiceResult.model_validate_json(result.model_dump_json()) == result
