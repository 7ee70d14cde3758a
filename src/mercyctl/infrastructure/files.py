"""Whole-file reads for the byte inspector, archive and mail helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from mercyctl.infrastructure.capabilities import EnvironmentFailure

logger = logging.getLogger(__name__)


def read_file_bytes(path: Path) -> bytes:
    """Read *path* in a single call.

    Callers check existence first; a failure here means the file vanished
    or became unreadable in between, which is an environment failure.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        msg = f"Unable to read {path}: {exc.strerror or exc}"
        raise EnvironmentFailure(msg) from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return data
