"""Dispatcher: routes ``(category, protocol, payload)`` to a transform.

Two entry points over the same registry:

- :meth:`Dispatcher.dispatch` returns display text, sentinel included.
- :meth:`Dispatcher.run` returns a :class:`ServiceResult` for the CLI.

INVARIANT: User-supplied category and protocol values never raise. Only
:class:`EnvironmentFailure` from a collaborator escapes ``dispatch``;
``run`` folds it into an ``ENVIRONMENT_FAILURE`` error result.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import structlog

from mercyctl.domain.mutator import match_extension
from mercyctl.domain.results import UNPARSEABLE_ARGUMENTS, TransformRequest, TransformResult
from mercyctl.domain.types import CATEGORY_ALIASES, Category, ErrorCode
from mercyctl.infrastructure.capabilities import EnvironmentFailure
from mercyctl.services.base import BaseService
from mercyctl.services.registry import (
    STATIC_TABLES,
    UNKNOWN_PROTOCOL,
    Registry,
    Transform,
    build_info_table,
)
from mercyctl.services.result import ServiceError, ServiceResult
from mercyctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mercyctl.infrastructure.toolkit import Toolkit

log = structlog.get_logger(__name__)


class Dispatcher(BaseService):
    """Command dispatcher over an immutable registry.

    The ``info`` table is built on the first ``info`` lookup, so codec,
    digest, dump and mutate calls never load collaborators or plugins.
    """

    def __init__(self, toolkit: Toolkit) -> None:
        super().__init__(toolkit)
        self._info: Mapping[str, Transform] | None = None

    @property
    def registry(self) -> Registry:
        """Every category's table, the ``info`` table included."""
        return MappingProxyType({**STATIC_TABLES, Category.INFO: self._table(Category.INFO)})

    def _table(self, category: Category) -> Mapping[str, Transform]:
        if category is not Category.INFO:
            return STATIC_TABLES[category]
        if self._info is None:
            self._info = build_info_table(
                self._toolkit.capabilities,
                self._toolkit.plugin_capabilities(),
            )
        return self._info

    def transform(
        self,
        category: str | Category,
        protocol: str,
        payload: str | bytes = "",
    ) -> TransformResult:
        """Look up and invoke the transform for *category* / *protocol*."""
        resolved = category if isinstance(category, Category) else Category.parse(category)
        if resolved is None:
            return TransformResult.unsupported(UNPARSEABLE_ARGUMENTS)
        func = self._table(resolved).get(protocol.strip())
        if func is None:
            return TransformResult.unsupported(UNKNOWN_PROTOCOL[resolved])
        return func(payload)

    def dispatch(
        self,
        category: str | Category,
        protocol: str,
        payload: str | bytes = "",
    ) -> str:
        """Display text for one request: the result, or its sentinel."""
        return self.transform(category, protocol, payload).text

    def execute(self, request: TransformRequest) -> ServiceResult:
        return self.run(request.category, request.protocol, request.payload)

    @traced
    def run(
        self,
        category: str | Category,
        protocol: str,
        payload: str | bytes = "",
    ) -> ServiceResult:
        """Structured twin of :meth:`dispatch`."""
        resolved = category if isinstance(category, Category) else Category.parse(category)
        op = resolved.value if resolved else "dispatch"
        detail: dict[str, Any] = {"category": str(category), "protocol": protocol}

        with trace_span("transform") as span:
            try:
                result = self.transform(category, protocol, payload)
            except EnvironmentFailure as exc:
                log.warning(
                    "dispatch.environment_failure",
                    op=op,
                    protocol=protocol,
                    error=str(exc),
                )
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code=ErrorCode.ENVIRONMENT_FAILURE.value,
                        message=str(exc),
                        detail=detail,
                    ),
                )
            if span is not None:
                span.annotate("protocol", protocol)
                span.annotate("ok", result.is_ok)

        if not result.is_ok:
            log.debug("dispatch.unsupported", op=op, protocol=protocol, code=result.code)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=(result.code or ErrorCode.UNSUPPORTED_PROTOCOL).value,
                    message=result.text,
                    detail=detail,
                ),
            )

        log.debug("dispatch.ok", op=op, protocol=protocol)
        data: dict[str, Any] = {"protocol": protocol, "output": result.text}
        if resolved is Category.MUTATE:
            data["candidates"] = [
                {"domain": line, "extension": match_extension(line)}
                for line in result.text.splitlines()
            ]
            data["count"] = len(data["candidates"])
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def catalog(self) -> ServiceResult:
        """Every category with its aliases and registered protocols."""
        registry = self.registry
        methods = [
            {
                "method": category.value,
                "aliases": sorted(a for a, c in CATEGORY_ALIASES.items() if c is category),
                "protocols": sorted(registry[category]),
            }
            for category in Category
        ]
        return ServiceResult(ok=True, op="catalog", data={"methods": methods})
