"""State and commands of a supervised job, as exchanged in the system JSON."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["IlvoJobData"]


@dataclass
class IlvoJobData:
    """Name, process state and pending commands of one job."""

    name: str
    pid: int = -1
    exit_code: int = -1
    auto_start: bool = True
    running: bool = False
    error_message: str = ""
    update_command: bool = False
    start_command: bool = False
    stop_command: bool = False
    start_time_iso: str = ""

    @classmethod
    def from_json(cls, job: Mapping[str, Any]) -> IlvoJobData:
        """Build from a JSON object; ``Name`` is required, other keys are optional.

        ``StartTimeISO`` is not read: it is only ever set by starting the job.
        """
        return cls(
            name=str(job["Name"]),
            pid=int(job.get("Pid", -1)),
            exit_code=int(job.get("ExitCode", -1)),
            auto_start=bool(job.get("AutoStart", True)),
            running=bool(job.get("Running", False)),
            error_message=str(job.get("ErrorMessage", "")),
            update_command=bool(job.get("UpdateCommand", False)),
            start_command=bool(job.get("StartCommand", False)),
            stop_command=bool(job.get("StopCommand", False)),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "Name": self.name,
            "Pid": self.pid,
            "ExitCode": self.exit_code,
            "AutoStart": self.auto_start,
            "Running": self.running,
            "StartCommand": self.start_command,
            "StopCommand": self.stop_command,
            "StartTimeISO": self.start_time_iso,
            "ErrorMessage": self.error_message,
            "UpdateCommand": self.update_command,
        }