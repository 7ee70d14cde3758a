"""Config file discovery.

Walk-up finder locates mercyctl.toml, similar to how git finds .git/.
Supports the MERCYCTL_CONFIG env var and the --config CLI flag.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "mercyctl.toml"
CONFIG_ENV_VAR = "MERCYCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for mercyctl.toml.

    Returns the path to the config file, or None if not found.
    Checks MERCYCTL_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
