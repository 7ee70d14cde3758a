"""Host metadata backed by psutil, platform, and socket."""

from __future__ import annotations

import platform
import socket

import psutil

from mercyctl.infrastructure.capabilities import EnvironmentFailure


class PsutilSystemInfo:
    """:class:`SystemInfoProvider` for the local machine."""

    def hostname(self) -> str:
        return socket.gethostname()

    def cpu_count(self) -> int:
        count = psutil.cpu_count(logical=True)
        if count is None:
            msg = "CPU count is not available on this platform"
            raise EnvironmentFailure(msg)
        return count

    def cpu_speed(self) -> int:
        try:
            freq = psutil.cpu_freq()
        except (OSError, NotImplementedError) as exc:
            raise EnvironmentFailure(f"Unable to read CPU frequency: {exc}") from exc
        if freq is None:
            msg = "CPU frequency is not available on this platform"
            raise EnvironmentFailure(msg)
        return round(freq.current)

    def os_release(self) -> str:
        return platform.release()

    def process_count(self) -> int:
        try:
            return len(psutil.pids())
        except psutil.Error as exc:
            raise EnvironmentFailure(f"Unable to list processes: {exc}") from exc
