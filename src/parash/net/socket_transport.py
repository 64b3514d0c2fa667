from __future__ import annotations

"""HTTP transport implementation over a bare TCP socket.

The transport is intentionally minimal and synchronous: one connection per
request, a single HTTP/1.1 GET with `Host` and `Connection: Close`, and the
raw response handed back as a binary file object. There is no TLS, no
redirect handling, no status check and no timeout.
"""

import socket
from typing import BinaryIO, Callable, Optional

from parash.core.interfaces.logging import LoggerLikeProtocol
from parash.core.interfaces.net import HTTPStreamTransportProtocol
from parash.core.models import HttpGetRequest
from parash.errors import FetchError
from parash.logging.helpers import get_logger, trace_io


class _SocketResponse:
    """Binary reader over a socket that closes the socket along with the reader."""

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._fp = sock.makefile('rb')

    def readline(self, size: int = -1) -> bytes:
        return self._fp.readline(size)

    def read(self, size: int = -1) -> bytes:
        return self._fp.read(size)

    def readable(self) -> bool:
        return True

    @property
    def closed(self) -> bool:
        return self._fp.closed

    def close(self) -> None:
        try:
            self._fp.close()
        finally:
            self._sock.close()


class SocketHTTPTransport(HTTPStreamTransportProtocol):
    """socket-based transport that satisfies HTTPStreamTransportProtocol."""

    def __init__(
        self,
        *,
        connect: Optional[Callable[[tuple], socket.socket]] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._connect = connect or socket.create_connection
        self._log = logger or get_logger('http')

    def open(self, req: HttpGetRequest) -> BinaryIO:
        try:
            port = int(req.port)
        except ValueError as exc:
            raise FetchError(f'invalid port {req.port!r} for host {req.host!r}') from exc

        trace_io(self._log, 'connecting', host=req.host, port=port)
        try:
            sock = self._connect((req.host, port))
        except (OSError, ValueError) as exc:
            # ValueError covers IDNA failures on over-long or empty host labels.
            raise FetchError(f'could not connect to {req.host}:{port}: {exc}') from exc

        try:
            sock.sendall(req.render())
        except (OSError, ValueError) as exc:
            sock.close()
            raise FetchError(f'could not send request to {req.host}:{port}: {exc}') from exc

        trace_io(self._log, 'request sent', host=req.host, port=port, path=req.path)
        return _SocketResponse(sock)  # type: ignore[return-value]
