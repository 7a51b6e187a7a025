"""Common behaviour of supervised jobs: applying start, stop and update commands."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from fieldrobot.jobdata import IlvoJobData

__all__ = ["IlvoJob", "utc_timestamp"]

log = logging.getLogger(__name__)


def utc_timestamp(moment: datetime | None = None) -> str:
    """ISO 8601 UTC timestamp of ``moment`` (now by default), to the second."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _as_job_data(job: IlvoJobData | Mapping[str, Any]) -> IlvoJobData:
    return job if isinstance(job, IlvoJobData) else IlvoJobData.from_json(job)


class IlvoJob(ABC):
    """A job that can be started, stopped, checked and updated."""

    def __init__(self, job: IlvoJobData | Mapping[str, Any]) -> None:
        self.data = _as_job_data(job)
        self.start_time: datetime | None = None

    def update(self, update_job: IlvoJobData | Mapping[str, Any]) -> bool:
        """Apply the commands in ``update_job``; True when anything was done."""
        request = _as_job_data(update_job)
        updated = False
        self.data.running = self.runs()

        if self.data.running:
            if request.stop_command:
                self.stop()
                updated = True
            self.data.stop_command = False
        else:
            if request.start_command:
                self.start()
                updated = True
            self.data.start_command = False

        if request.update_command:
            log.debug("Update command was set in job: %s", self.data.name)
            self.update_software()
            updated = True
        self.data.update_command = False

        return updated

    @abstractmethod
    def start(self) -> None:
        """Start the job."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the job."""

    @abstractmethod
    def runs(self) -> bool:
        """Refresh and return whether the job is running."""

    @abstractmethod
    def update_software(self) -> None:
        """Bring the job's software up to date."""