"""NTRIP client that relays RTCM corrections to a GNSS receiver."""

from __future__ import annotations

import base64
import logging
import socket
import sys
import threading
import time
from dataclasses import dataclass
from typing import BinaryIO, Callable, Protocol

__all__ = [
    "AGENT_STRING",
    "REVISION_STRING",
    "NtripCredentials",
    "GgaSerial",
    "encode_credentials",
    "build_request",
    "Ntrip",
]

log = logging.getLogger(__name__)

AGENT_STRING = "NTRIP NtripClientPOSIX"
REVISION_STRING = "1.0"
RECEIVE_SIZE = 4096
MAX_READ_FAILURES = 50
SOURCETABLE_END = b"ENDSOURCETABLE\r\n"


@dataclass
class NtripCredentials:
    """Caster address and login."""

    host: str
    port: int = 2101
    user: str = ""
    password: str = ""
    mountpoint: str = ""


class GgaSerial(Protocol):
    """The receiver side: supplies GGA sentences and accepts RTCM data."""

    def get_gga_line(self) -> str: ...

    def write_rtcm(self, data: bytes) -> None: ...


def encode_credentials(user: str, password: str) -> str:
    """Base64 of ``user:password`` for HTTP basic authentication.

    Empty credentials give an empty string. With no password and a user whose
    length is a multiple of three, the separator is left out.
    """
    if not user and not password:
        return ""
    if not password and len(user) % 3 == 0:
        text = user
    else:
        text = f"{user}:{password}"
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def build_request(credentials: NtripCredentials) -> bytes:
    """The request sent to the caster: a mountpoint request or a sourcetable request."""
    agent = f"User-Agent: {AGENT_STRING}/{REVISION_STRING}\r\n"
    if not credentials.mountpoint:
        text = (
            "GET / HTTP/1.1\r\n"
            + agent
            + "Accept: */*\r\n"
            "Connection: close \r\n"
            "\r\n"
        )
    else:
        text = (
            f"GET /{credentials.mountpoint} HTTP/1.1\r\n"
            + agent
            + "Authorization: Basic "
            + encode_credentials(credentials.user, credentials.password)
            + "\r\n\r\n"
        )
    return text.encode("utf-8")


class Ntrip:
    """Connection to an NTRIP caster.

    After :meth:`connect` and :meth:`init`, :meth:`run` forwards received
    corrections to ``serial`` until stopped or the caster goes silent. Without
    a mountpoint the caster's sourcetable is written to ``sourcetable_output``.
    """

    def __init__(
        self,
        credentials: NtripCredentials,
        serial: GgaSerial,
        delay: float = 10,
        *,
        retry_delay: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
        sourcetable_output: BinaryIO | None = None,
        timeout: float | None = None,
    ) -> None:
        self.credentials = credentials
        self.serial = serial
        self.delay = delay
        self.retry_delay = retry_delay
        self.timeout = timeout
        self._clock = clock
        self._sourcetable_output = sourcetable_output
        self._gga_sent_time = clock()
        self._sock: socket.socket | None = None
        self._running = threading.Event()

    @property
    def running(self) -> bool:
        return self._running.is_set()

    def connect(self) -> None:
        """Open the TCP connection to the caster."""
        self._sock = socket.create_connection(
            (self.credentials.host, self.credentials.port), timeout=self.timeout
        )
        self._running.set()

    def init(self) -> None:
        """Send the request and the first GGA sentence."""
        if self._sock is None:
            log.warning("send failed: not connected")
            return
        try:
            self._sock.sendall(build_request(self.credentials))
        except OSError as exc:
            log.warning("send failed: %s", exc)
            return
        self.send_gga(True)

    def _receive(self) -> bytes:
        sock = self._sock
        if sock is None:
            return b""
        try:
            return sock.recv(RECEIVE_SIZE - 1)
        except OSError:
            return b""

    def run(self) -> None:
        """Relay corrections (or print the sourcetable) until done, then stop."""
        if self.credentials.mountpoint:
            read_failures = 0
            while self.running:
                data = self._receive()
                if data:
                    if len(data) == 14:
                        log.info("Received NTRIP data: %r", data)
                    self.serial.write_rtcm(data)
                    continue
                log.info(
                    "(%d/%d) NTRIP connection attempts. Trying to restart the NTRIP server",
                    read_failures,
                    MAX_READ_FAILURES,
                )
                time.sleep(self.retry_delay)
                read_failures += 1
                if read_failures > MAX_READ_FAILURES:
                    log.info(
                        "More than %d NTRIP connection failures occurred, stopping",
                        MAX_READ_FAILURES,
                    )
                    break
        else:
            output = self._sourcetable_output or sys.stdout.buffer
            while True:
                data = self._receive()
                if not data:
                    break
                output.write(data)
                if data.endswith(SOURCETABLE_END):
                    break
            output.flush()

        self.stop()
        log.info("NTRIP connection closed: No data received anymore!")

    def send_gga(self, first_time: bool = False) -> bool:
        """Send the receiver's GGA sentence when ``delay`` seconds have passed.

        Returns False only when a sentence was due but there is no connection.
        """
        now = self._clock()
        seconds = int(now - self._gga_sent_time)
        if seconds > self.delay or first_time:
            gga_line = self.serial.get_gga_line()
            if self._sock is None:
                log.warning("File descriptor for NTRIP connection failure")
                return False
            try:
                self._sock.sendall(gga_line.encode("ascii"))
            except OSError:
                log.info("Send NTRIP GGA line failed")
            else:
                log.info("Successfully sent GGA line to NTRIP server: %s", gga_line)
            self._gga_sent_time = now
        return True

    def stop(self) -> None:
        """Stop running and close the connection."""
        self._running.clear()
        sock, self._sock = self._sock, None
        if sock is not None:
            try:
                sock.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
            sock.close()