"""Pluggy hook specifications for mercyctl.

Plugins contribute named ``info`` capabilities such as language detection,
string identification, or ciphertext heuristics. Each capability takes the
raw input string and returns display text.
"""

from __future__ import annotations

from collections.abc import Callable

import pluggy

hookspec = pluggy.HookspecMarker("mercyctl")


class MercyHookSpec:
    """Hook specifications for the mercyctl plugin system."""

    @hookspec
    def register_capabilities(self) -> dict[str, Callable[[str], str]] | None:
        """Return protocol name -> capability mappings for the ``info`` method."""
