"""BaseService: foundation for mercyctl services.

Every service receives a :class:`Toolkit` at construction time and reaches
collaborators only through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mercyctl.infrastructure.toolkit import Toolkit


class BaseService:
    """Base for service-layer classes.

    Usage::

        class Dispatcher(BaseService):
            def dispatch(self, category: str, protocol: str, payload: str) -> str:
                system = self._toolkit.capabilities.system
                ...
    """

    def __init__(self, toolkit: Toolkit) -> None:
        self._toolkit = toolkit
