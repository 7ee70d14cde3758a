"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: Public service methods return ServiceResult. Handled failures
(unknown protocol, missing file, bad input) arrive as ``ok=False`` with an
error code; they are never raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload: an ``ErrorCode`` value and the sentinel text."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, the dispatch category (e.g. ``"decode"``).
        data: Operation payload; transforms put their text in ``output``.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans under ``--verbose``).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def output(self) -> str:
        """Display text: the transform output, or the error message."""
        if self.ok:
            return str(self.data.get("output", ""))
        return self.error.message if self.error else "Unknown error"
