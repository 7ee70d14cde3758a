"""Zip archive extraction."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from mercyctl.infrastructure.capabilities import EnvironmentFailure

logger = logging.getLogger(__name__)


def extraction_dir(archive: Path) -> Path:
    """Directory an archive is unpacked into: its stem plus ``_extracted``."""
    return archive.with_name(f"{archive.stem}_extracted")


def extract_zip(archive: Path, destination: Path) -> list[str]:
    """Extract every member of *archive* into *destination*.

    Returns the member names written. Raises :class:`zipfile.BadZipFile`
    for corrupt archives and :class:`EnvironmentFailure` on I/O errors.
    Member paths are sanitised by :mod:`zipfile` (no ``..`` escapes).
    """
    try:
        with zipfile.ZipFile(archive) as zf:
            members = [info.filename for info in zf.infolist() if not info.is_dir()]
            destination.mkdir(parents=True, exist_ok=True)
            zf.extractall(destination)
    except OSError as exc:
        raise EnvironmentFailure(f"Unable to extract {archive}: {exc}") from exc
    logger.debug("Extracted %d members from %s into %s", len(members), archive, destination)
    return members
