"""Sending datagrams to a named host over UDP."""

from __future__ import annotations

import socket
import sys
from typing import Callable

__all__ = ["UdpSender"]

SendHandler = Callable[[OSError | None, int], None]


class UdpSender:
    """A UDP socket bound to ``local_port`` (0 lets the system choose)."""

    def __init__(self, local_port: int = 0, host: str = "0.0.0.0") -> None:
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._socket.bind((host, local_port))

    @property
    def local_address(self) -> tuple[str, int]:
        """Host and port the socket is bound to."""
        host, port = self._socket.getsockname()[:2]
        return host, port

    def __enter__(self) -> UdpSender:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send(
        self,
        data: bytes,
        host: str,
        port: int,
        handler: SendHandler | None = None,
    ) -> int:
        """Resolve ``host`` and send ``data`` to it as one datagram.

        ``handler`` receives ``(error, bytes_sent)``: ``(None, n)`` on
        success, or the raised error and 0 when resolving or sending fails.
        Returns the number of bytes sent.
        """
        try:
            infos = socket.getaddrinfo(host, port, socket.AF_INET, socket.SOCK_DGRAM)
            sent = self._socket.sendto(data, infos[0][4])
        except OSError as exc:
            if handler is not None:
                handler(exc, 0)
            return 0
        if handler is not None:
            handler(None, sent)
        return sent

    def close(self) -> None:
        """Close the socket, reporting any failure on stderr."""
        try:
            self._socket.close()
        except OSError as exc:
            print(f"Error closing socket: {exc}", file=sys.stderr)