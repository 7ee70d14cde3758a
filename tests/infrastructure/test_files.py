"""Tests for whole-file reads."""

from __future__ import annotations

from pathlib import Path

import pytest

from mercyctl.infrastructure.capabilities import EnvironmentFailure
from mercyctl.infrastructure.files import read_file_bytes


class TestReadFileBytes:
    def test_reads_everything(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.bin"
        data = bytes(range(256)) * 64
        path.write_bytes(data)
        assert read_file_bytes(path) == data

    def test_missing_file_is_environment_failure(self, tmp_path: Path) -> None:
        with pytest.raises(EnvironmentFailure, match="Unable to read"):
            read_file_bytes(tmp_path / "gone.bin")

    def test_directory_is_environment_failure(self, tmp_path: Path) -> None:
        with pytest.raises(EnvironmentFailure):
            read_file_bytes(tmp_path)
