"""A job run as a local program found on the search path."""

from __future__ import annotations

import logging
import shutil
import subprocess
import time
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Callable

from fieldrobot.job import IlvoJob, utc_timestamp
from fieldrobot.jobdata import IlvoJobData

__all__ = ["IlvoProcess", "HEARTBEAT_TIMEOUT"]

log = logging.getLogger(__name__)

HEARTBEAT_TIMEOUT = 5.0


class _HeartbeatDetector:
    """Expires when the heartbeat value has not changed for ``timeout`` seconds."""

    def __init__(self, timeout: float, clock: Callable[[], float]) -> None:
        self.timeout = timeout
        self._clock = clock
        self._last_value: bool | None = None
        self._last_change = clock()

    def expired(self, value: bool) -> bool:
        now = self._clock()
        if value != self._last_value:
            self._last_value = value
            self._last_change = now
            return False
        return now - self._last_change > self.timeout


class IlvoProcess(IlvoJob):
    """A program started by name, watched by its exit status and optionally a heartbeat."""

    def __init__(
        self,
        job: IlvoJobData | Mapping[str, Any],
        *,
        heartbeat_timeout: float = HEARTBEAT_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(job)
        self.check_heartbeat = (
            bool(job.get("CheckHeartbeat", False)) if isinstance(job, Mapping) else False
        )
        self._heartbeat = _HeartbeatDetector(heartbeat_timeout, clock)
        self._process: subprocess.Popen | None = None

    def __enter__(self) -> IlvoProcess:
        return self

    def __exit__(self, *exc_info) -> None:
        if self.runs():
            self.stop()

    def to_json(self) -> dict[str, Any]:
        result = self.data.to_json()
        result["CheckHeartbeat"] = self.check_heartbeat
        return result

    def start(self) -> None:
        name = self.data.name
        program = shutil.which(name)
        if program is None:
            self.data.error_message = f"Program {name} not found"
            log.warning('Failed to start process "%s"', name)
            log.error("%s", self.data.error_message)
            return

        self._process = subprocess.Popen([program])
        if self._process.poll() is None:
            log.info('Process "%s" started successfully.', name)
            self.data.running = True
        else:
            log.error(
                'Failed to start process "%s". Exit code %s', name, self._process.returncode
            )
            self.data.running = False
        self.data.pid = self._process.pid
        self.start_time = datetime.now(timezone.utc)
        self.data.start_time_iso = utc_timestamp(self.start_time)
        log.info('Started process "%s"', name)

    def stop(self) -> None:
        if self.runs() and self._process is not None:
            self._process.kill()
            self._process.wait()
            log.info('Stopped process "%s"', self.data.name)
        else:
            log.info('Process "%s" was already stopped', self.data.name)
        self.data.running = False

    def runs(self) -> bool:
        if self.data.pid == -1:
            self.data.running = False
        elif self._process is not None and self._process.poll() is None:
            self.data.running = True
            self.data.pid = self._process.pid
        else:
            self.data.running = False
            if self._process is not None:
                self.data.exit_code = self._process.returncode
            log.error(
                'Process "%s" stopped with exit code %s', self.data.name, self.data.exit_code
            )
        return self.data.running

    def heartbeat_healthy(self, heartbeat_value: bool) -> bool:
        """False when heartbeats are checked and none has come in time."""
        if not self.check_heartbeat:
            return True
        if self._heartbeat.expired(heartbeat_value):
            self.data.running = False
            log.error(
                'Process "%s" stopped because no heartbeat was received', self.data.name
            )
            return False
        return True

    def update_software(self) -> None:
        """Local programs are updated outside this job; nothing to do."""

    def exists(self) -> bool:
        """True when some process with this job's name is running on the system."""
        try:
            result = subprocess.run(
                ["pidof", self.data.name], capture_output=True, text=True, check=False
            )
        except OSError:
            log.error("Error: Unable to execute pidof command.")
            return False
        return bool(result.stdout.strip())

    def kill(self) -> None:
        """Kill every system process with this job's name."""
        name = self.data.name
        if not self.exists():
            log.info("No process with name %s found.", name)
            return
        try:
            code = subprocess.run(["killall", name], check=False).returncode
        except OSError:
            code = -1
        if code == 0:
            log.info("Process %s killed successfully.", name)
        else:
            log.error("Error: Unable to execute killall command.")