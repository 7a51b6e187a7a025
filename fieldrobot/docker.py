"""Minimal client for the Docker Engine HTTP API, plus registry credentials."""

from __future__ import annotations

import base64
import http.client
import json
import logging
import os
import socket
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_SOCKET_PATH",
    "param",
    "DockerClient",
    "DockerRegistry",
]

log = logging.getLogger(__name__)

DEFAULT_API_VERSION = "v1.41"
DEFAULT_SOCKET_PATH = "/var/run/docker.sock"
API_VERSION_ENV = "ILVO_DOCKER_API_VERSION"


def _dump(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def param(name: str, value: Any) -> str:
    """One ``&name=value`` query fragment, or ``""`` when the value is unset.

    Strings are unset when empty, integers when -1 and anything when None.
    A mapping contributes its entry under ``name`` as compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return f"&{name}={'true' if value else 'false'}"
    if isinstance(value, int):
        return "" if value == -1 else f"&{name}={value}"
    if isinstance(value, str):
        return f"&{name}={value}" if value else ""
    if isinstance(value, Mapping):
        return f"&{name}={_dump(value.get(name))}"
    raise TypeError(f"unsupported query parameter type: {type(value).__name__}")


class _UnixHTTPConnection(http.client.HTTPConnection):
    """HTTP connection over a Unix domain socket."""

    def __init__(self, socket_path: str, timeout: float | None) -> None:
        super().__init__("localhost")
        self._socket_path = socket_path
        self._unix_timeout = timeout

    def connect(self) -> None:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        sock.settimeout(self._unix_timeout)
        try:
            sock.connect(self._socket_path)
        except OSError:
            sock.close()
            raise
        self.sock = sock


class DockerClient:
    """Talks to the local Docker daemon socket or to a remote Docker host.

    Every call returns ``{"success": bool, "code": int, "data": ...}``. A
    transport failure gives code 0.
    """

    def __init__(
        self,
        host: str | None = None,
        api_version: str | None = None,
        socket_path: str = DEFAULT_SOCKET_PATH,
        timeout: float | None = None,
    ) -> None:
        if api_version is None:
            api_version = os.environ.get(API_VERSION_ENV) or DEFAULT_API_VERSION
        self.api_version = api_version
        self.is_remote = host is not None
        self.host_uri = f"{host}/{api_version}" if host is not None else f"http:/{api_version}"
        self.socket_path = socket_path
        self.timeout = timeout
        self.last_command = ""

    # System

    def system_info(self) -> dict:
        return self._request_json("GET", "/info")

    def docker_version(self) -> dict:
        return self._request_json("GET", "/version")

    # Images

    def list_images(self) -> dict:
        return self._request_json("GET", "/images/json")

    def pull_image(self, headers: Mapping[str, str], image_name: str) -> dict:
        """Pull ``image_name:latest``; ``headers`` typically carries registry auth."""
        request_headers = dict(headers)
        request_headers["Content-Type"] = "application/tar"
        path = "/images/create?" + param("fromImage", image_name) + param("tag", "latest")
        return self._request_json("POST", path, 200, None, request_headers)

    # Containers

    def list_containers(
        self,
        all: bool = False,
        limit: int = -1,
        size: int = -1,
        filters: Mapping[str, Any] | None = None,
    ) -> dict:
        path = "/containers/json?" + param("all", all)
        if limit > 0:
            path += param("limit", limit)
        if size > 0:
            path += param("size", size)
        if filters:
            path += param("filters", filters)
        return self._request_json("GET", path)

    def inspect_container(self, container_id: str) -> dict:
        return self._request_json("GET", f"/containers/{container_id}/json")

    def top_container(self, container_id: str) -> dict:
        return self._request_json("GET", f"/containers/{container_id}/top")

    def logs_container(
        self,
        container_id: str,
        follow: bool = False,
        stdout: bool = False,
        stderr: bool = False,
        timestamps: bool = False,
        tail: str = "all",
    ) -> dict:
        path = (
            f"/containers/{container_id}/logs?"
            + param("follow", follow)
            + param("stdout", stdout)
            + param("stderr", stderr)
            + param("timestamps", timestamps)
            + param("tail", tail)
        )
        return self._request("POST" if False else "GET", path, 101)

    def create_container(self, body: Mapping[str, Any], name: str = "") -> dict:
        path = "/containers/create" + (f"?name={name}" if name else "")
        return self._request_json("POST", path, 201, body)

    def start_container(self, container_id: str) -> dict:
        return self._request("POST", f"/containers/{container_id}/start", 204)

    def get_container_changes(self, container_id: str) -> dict:
        return self._request_json("GET", f"/containers/{container_id}/changes")

    def stop_container(self, container_id: str) -> dict:
        return self._request("POST", f"/containers/{container_id}/stop", 204)

    def kill_container(self, container_id: str, signal: int = -1) -> dict:
        path = f"/containers/{container_id}/kill?" + param("signal", signal)
        return self._request("POST", path, 204)

    def pause_container(self, container_id: str) -> dict:
        return self._request("POST", f"/containers/{container_id}/pause", 204)

    def wait_container(self, container_id: str) -> dict:
        return self._request_json("POST", f"/containers/{container_id}/wait")

    def delete_container(self, container_id: str, v: bool = False, force: bool = False) -> dict:
        path = f"/containers/{container_id}?" + param("v", v) + param("force", force)
        return self._request("DELETE", path, 204)

    def unpause_container(self, container_id: str) -> dict:
        return self._request("POST", f"/containers/{container_id}/unpause?", 204)

    def restart_container(self, container_id: str, delay: int = -1) -> dict:
        path = f"/containers/{container_id}/restart?" + param("t", delay)
        return self._request("POST", path, 204)

    def attach_to_container(
        self,
        container_id: str,
        logs: bool = False,
        stream: bool = False,
        stdin: bool = False,
        stdout: bool = False,
        stderr: bool = False,
    ) -> dict:
        path = (
            f"/containers/{container_id}/attach?"
            + param("logs", logs)
            + param("stream", stream)
            + param("stdin", stdin)
            + param("stdout", stdout)
            + param("stderr", stderr)
        )
        return self._request("POST", path, 101)

    def exists_container(self, container_id: str) -> bool:
        """True when some container's id contains ``container_id``."""
        containers = self.list_containers().get("data") or []
        if not isinstance(containers, list):
            return False
        return any(container_id in str(c.get("Id", "")) for c in containers)

    # Transport

    def _request_json(
        self,
        method: str,
        path: str,
        success_code: int = 200,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict:
        if not headers:
            headers = {"Accept": "application/json", "Content-Type": "application/json"}
        return self._request(method, path, success_code, body, headers)

    def _connection(self) -> tuple[http.client.HTTPConnection, str]:
        if not self.is_remote:
            return _UnixHTTPConnection(self.socket_path, self.timeout), f"/{self.api_version}"
        split = urlsplit(self.host_uri)
        kind = (
            http.client.HTTPSConnection if split.scheme == "https" else http.client.HTTPConnection
        )
        return kind(split.hostname or "localhost", split.port, timeout=self.timeout), split.path

    def _request(
        self,
        method: str,
        path: str,
        success_code: int = 200,
        body: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict:
        request_headers = (
            {key: str(value) for key, value in headers.items()}
            if headers
            else {"Content-Type": "application/json"}
        )
        payload = _dump(body).encode("utf-8") if body else b""

        if self.is_remote:
            self.last_command = f"curl {self.host_uri}{path}"
        else:
            self.last_command = f"curl -s --unix-socket {self.socket_path} {self.host_uri}{path}"

        status = 0
        raw = b""
        connection, prefix = self._connection()
        try:
            connection.request(
                method,
                prefix + path,
                body=payload if method == "POST" else None,
                headers=request_headers,
            )
            response = connection.getresponse()
            status = response.status
            raw = response.read()
        except (OSError, http.client.HTTPException) as exc:
            log.warning("request %s %s failed: %s", method, path, exc)
        finally:
            connection.close()

        if status in (success_code, 200):
            text = raw.decode("utf-8", errors="replace")
            try:
                data = json.loads(text or "{}")
            except json.JSONDecodeError:
                data = text
            return {"success": True, "data": data, "code": status}
        return {"success": False, "code": status, "data": None}


class DockerRegistry:
    """Registry login data and the ``X-Registry-Auth`` header built from it."""

    def __init__(self, registry: Mapping[str, Any] | None = None) -> None:
        self.registry: dict[str, Any] = {}
        self._auth_header: dict[str, str] = {}
        self.parse(registry or {})

    def parse(self, registry: Mapping[str, Any] | None) -> None:
        """Take new registry data; an auth header is made when it has a username."""
        self.registry = dict(registry or {})
        if "username" in self.registry:
            encoded = json.dumps(
                self.registry, separators=(",", ":"), sort_keys=True, ensure_ascii=False
            ).encode("utf-8")
            self._auth_header["X-Registry-Auth"] = base64.b64encode(encoded).decode("ascii")

    def as_header(self) -> dict[str, str]:
        return self._auth_header

    def to_json(self) -> dict[str, Any]:
        return self.registry