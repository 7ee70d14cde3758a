"""Extension layer: capability plugins via pluggy.

Discovery: entry points (``mercyctl.plugins``) and single-file plugins in
the local plugin directory.
INVARIANT: Plugin failures are warnings, never errors.
"""

import pluggy

hookimpl = pluggy.HookimplMarker("mercyctl")

from mercyctl.plugins.manager import PluginManager  # noqa: E402

__all__ = ["PluginManager", "hookimpl"]
