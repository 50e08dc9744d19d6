"""TCP server that streams binary packets to a single connected client."""

from __future__ import annotations

import socket
import sys
import threading
from typing import Callable

__all__ = ["TcpSender"]

_ACCEPT_POLL = 0.1


class TcpSender:
    """Listens on ``port`` and sends data to the first client that connects.

    Accepting happens on a background thread; :meth:`send` silently does
    nothing while no client is connected.
    """

    def __init__(self, port: int = 1234, host: str = "0.0.0.0") -> None:
        self._listener = socket.create_server((host, port))
        self._listener.settimeout(_ACCEPT_POLL)
        self._conn: socket.socket | None = None
        self._lock = threading.Lock()
        self._send_lock = threading.Lock()
        self._closed = threading.Event()
        self._accept_thread: threading.Thread | None = None
        self.start_accept()

    @property
    def address(self) -> tuple[str, int]:
        """Host and port the server listens on."""
        host, port = self._listener.getsockname()[:2]
        return host, port

    def __enter__(self) -> TcpSender:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def start_accept(self) -> None:
        """Begin waiting for a client in the background, unless already waiting."""
        if self._closed.is_set():
            raise RuntimeError("sender is closed")
        print(f"\nServer Running on {self.address[1]}.", flush=True)
        if self._accept_thread is not None and self._accept_thread.is_alive():
            return
        self._accept_thread = threading.Thread(target=self._accept_loop, daemon=True)
        self._accept_thread.start()

    def _accept_loop(self) -> None:
        while not self._closed.is_set():
            try:
                conn, _ = self._listener.accept()
            except socket.timeout:
                continue
            except OSError as exc:
                if not self._closed.is_set():
                    print(f"Accept error: {exc}", file=sys.stderr, flush=True)
                return
            conn.settimeout(None)
            with self._lock:
                if self._closed.is_set():
                    conn.close()
                    return
                previous, self._conn = self._conn, conn
            if previous is not None:
                previous.close()
            print("\nConnected...", flush=True)
            return

    def is_connected(self) -> bool:
        """Whether a client is connected and its socket is still usable."""
        with self._lock:
            conn = self._conn
        if conn is None:
            return False
        try:
            conn.getpeername()
        except OSError:
            return False
        return True

    def send(self, data: bytes, handler: Callable[[], None] | None = None) -> bool:
        """Send ``data`` in full to the client and then call ``handler``.

        Returns False, without calling ``handler``, when no client is
        connected or the send fails.
        """
        if not self.is_connected():
            return False
        with self._lock:
            conn = self._conn
        if conn is None:
            return False
        try:
            with self._send_lock:
                conn.sendall(data)
        except OSError as exc:
            print(f"\n\nError: {exc}", file=sys.stderr, flush=True)
            return False
        if handler is not None:
            handler()
        return True

    def close(self) -> None:
        """Stop accepting and close the client connection."""
        self._closed.set()
        self._listener.close()
        with self._lock:
            conn, self._conn = self._conn, None
        if conn is not None:
            conn.close()
        thread = self._accept_thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=1.0)