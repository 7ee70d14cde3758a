"""Timing spans for service calls: Span, @traced, trace_span.

Disabled by default; a single ContextVar lookup per call. ``--verbose``
enables it, and the span tree of each traced call lands in
``ServiceResult.meta["telemetry"]``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from mercyctl.services.result import ServiceResult

log = structlog.get_logger("mercyctl.telemetry")

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)


@dataclass
class Span:
    """A timed region with child spans and free-form annotations."""

    name: str
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "name": self.name,
            "duration_ms": round(self.duration_ms, 2),
        }
        if self.annotations:
            result["annotations"] = self.annotations
        if self.children:
            result["children"] = [c.to_dict() for c in self.children]
        return result


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Open a child span under the current one.

    Yields None when telemetry is off or no traced call is active.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name)
    parent.children.append(child)
    token = _current_span.set(child)
    try:
        yield child
    finally:
        child.end()
        _current_span.reset(token)


def _inject_meta(result: ServiceResult, span: Span) -> ServiceResult:
    merged = {**(result.meta or {}), "telemetry": span.to_dict()}
    return result.model_copy(update={"meta": merged})


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time a service method and attach its span tree to the ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        span = Span(name=func.__qualname__)
        token = _current_span.set(span)
        try:
            result = func(*args, **kwargs)
        except Exception:
            log.debug("span.failed", span_name=span.name)
            raise
        finally:
            span.end()
            _current_span.reset(token)

        ok = getattr(result, "ok", True)
        if isinstance(result, ServiceResult):
            result = _inject_meta(result, span)  # type: ignore[assignment]
        log.debug(
            "span.complete",
            span_name=span.name,
            duration_ms=round(span.duration_ms, 2),
            ok=ok,
            children=len(span.children),
        )
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn telemetry on (called by AppContext under ``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
