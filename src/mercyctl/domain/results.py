"""TransformRequest and TransformResult: the per-call value types.

INVARIANT: A TransformResult carries exactly one of ``value`` (success)
or ``reason`` (sentinel). Never both, never neither.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, model_validator

from mercyctl.domain.types import Category, ErrorCode

# Sentinels shared across transforms.
FILE_NOT_FOUND = "Unable to locate the file specified"
UNPARSEABLE_ARGUMENTS = "Unable to parse provided arguments"


class TransformRequest(BaseModel):
    """A single dispatch request. The protocol is checked only at dispatch."""

    model_config = {"frozen": True}

    category: Category
    protocol: str
    payload: str | bytes = ""


class TransformResult(BaseModel):
    """Outcome of one transform: ``ok(value)`` or ``unsupported(reason)``."""

    model_config = {"frozen": True}

    value: str | None = None
    reason: str | None = None
    code: ErrorCode | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> Self:
        if (self.value is None) == (self.reason is None):
            msg = "TransformResult needs exactly one of value or reason"
            raise ValueError(msg)
        if self.reason is not None and self.code is None:
            msg = "Unsupported results must carry an error code"
            raise ValueError(msg)
        return self

    @classmethod
    def ok(cls, value: str) -> TransformResult:
        return cls(value=value)

    @classmethod
    def unsupported(
        cls,
        reason: str,
        code: ErrorCode = ErrorCode.UNSUPPORTED_PROTOCOL,
    ) -> TransformResult:
        return cls(reason=reason, code=code)

    @property
    def is_ok(self) -> bool:
        return self.value is not None

    @property
    def text(self) -> str:
        """Display string: the value on success, the sentinel otherwise."""
        return self.value if self.value is not None else str(self.reason)
