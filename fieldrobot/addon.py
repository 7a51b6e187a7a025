"""A job run as a Docker container."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from fieldrobot.docker import DockerClient, DockerRegistry
from fieldrobot.job import IlvoJob, utc_timestamp

__all__ = ["IlvoAddon"]

log = logging.getLogger(__name__)


class IlvoAddon(IlvoJob):
    """A container created from ``DockerConfig`` and named after the job."""

    def __init__(self, addon: Mapping[str, Any], docker_client: DockerClient) -> None:
        super().__init__(addon)
        self.docker_client = docker_client
        self.docker_config: dict[str, Any] = dict(addon["DockerConfig"])
        self.image_name = str(self.docker_config["Image"])
        self.docker_registry = DockerRegistry()
        self.docker_registry.parse(addon.get("DockerRegistry"))
        self.container_id = ""
        known_id = addon.get("ContainerId")
        if known_id and docker_client.exists_container(str(known_id)):
            self.container_id = str(known_id)

    def __enter__(self) -> IlvoAddon:
        return self

    def __exit__(self, *exc_info) -> None:
        if self.runs():
            self.stop()

    def to_json(self) -> dict[str, Any]:
        result = self.data.to_json()
        result["ContainerId"] = self.container_id
        result["DockerRegistry"] = self.docker_registry.to_json()
        result["DockerConfig"] = self.docker_config
        return result

    def pull(self) -> None:
        """Pull the image, with registry credentials when present."""
        doc = self.docker_client.pull_image(self.docker_registry.as_header(), self.image_name)
        if doc.get("code") == 200:
            log.info("Pulled image: %s successfully", self.image_name)
        else:
            log.warning("Failed to pull image: %s", self.image_name)

    def update_software(self) -> None:
        """Stop, pull the image, remove the container and start a fresh one."""
        log.debug("Update image: %s", self.image_name)
        self.stop()
        self.pull()
        doc = self.docker_client.delete_container(self.container_id)
        if doc.get("code") == 204:
            log.info("Deleted container: %s", self.container_id)
            self.container_id = ""
        else:
            log.warning(
                "Failed to delete container: %s with code %s", self.container_id, doc.get("code")
            )
            return
        self.start()

    def create_container(self, image_name: str) -> None:
        """Create the container, pulling the image first when it is missing."""
        while True:
            doc = self.docker_client.create_container(self.docker_config, self.data.name)
            code = doc.get("code")
            log.debug("Create container code: %s", code)
            if code == 201:
                self.container_id = str(doc["data"]["Id"])
                log.info('Created container "%s" (%s)', self.data.name, self.container_id)
                return
            if code in (404, 409):
                self.pull()
                continue
            self.data.error_message = (
                f"Container creation of image {image_name} failed. Does the image exist?"
            )
            log.warning("%s", self.data.error_message)
            log.warning("Command used: %s", getattr(self.docker_client, "last_command", ""))
            log.warning("%s", json.dumps(doc, default=str))
            log.warning("Is the config correct?")
            log.warning("%s", json.dumps(self.docker_config, default=str))
            return

    def _find_container(self) -> None:
        doc = self.docker_client.list_containers()
        if doc.get("code") != 200:
            return
        wanted_name = "/" + self.data.name
        for container in doc.get("data") or []:
            if container.get("Image") == self.image_name and wanted_name in (
                container.get("Names") or []
            ):
                self.container_id = str(container["Id"])
                return

    def start(self) -> None:
        self._find_container()
        if not self.container_id:
            self.create_container(self.data.name)
        else:
            log.info('Container "%s" was found (%s)', self.data.name, self.container_id)

        doc = self.docker_client.start_container(self.container_id)
        code = doc.get("code")
        log.debug("Start container code: %s", code)
        if code == 204:
            log.info('Started container "%s" (%s)', self.data.name, self.container_id)
            self.start_time = datetime.now(timezone.utc)
            self.data.start_time_iso = utc_timestamp(self.start_time)
            self.data.running = True
        elif code == 304:
            log.info("Container %s was already running.", self.container_id)
        else:
            log.warning("Failed to start container: %s", self.container_id)

    def stop(self) -> None:
        doc = self.docker_client.stop_container(self.container_id)
        if doc.get("code") == 204:
            log.info('Stopped container "%s"', self.data.name)
        else:
            log.info('Container "%s" was already stopped', self.data.name)
        self.data.running = False

    def runs(self) -> bool:
        if not self.container_id:
            self.data.running = False
        else:
            doc = self.docker_client.inspect_container(self.container_id)
            if doc.get("success") and doc.get("code") == 200:
                state = doc["data"]["State"]
                self.data.exit_code = int(state["ExitCode"])
                self.data.pid = int(state["Pid"])
                self.data.running = bool(state["Running"])
            else:
                self.data.running = False
        return self.data.running