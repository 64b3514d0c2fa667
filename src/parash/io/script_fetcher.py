from __future__ import annotations
"""
Script fetching for SERIAL/PARALLEL directives.

`ScriptFetcher.open` turns a directive argument into a LineStream:

* `http://...`  → one GET through the HTTP transport; response headers are
  read and discarded up to the first empty line, the body is the script.
* anything else → a local file opened for text reading.

Every failure degrades to an empty stream (logged, never raised), so the
nested invocation simply runs zero commands.
"""
from pathlib import Path
from typing import BinaryIO, Optional

from parash.constants import HTTP_PREFIX
from parash.core.interfaces.logging import LoggerLikeProtocol
from parash.core.interfaces.net import HTTPStreamTransportProtocol, ScriptFetcherProtocol
from parash.core.models import HttpGetRequest
from parash.io.line_stream import LineStream
from parash.logging.helpers import get_logger, trace_io
from parash.net.socket_transport import SocketHTTPTransport
from parash.net.url import resolve_url


class _DecodedBody:
    """Text `readline()` over a binary response body."""

    def __init__(self, raw: BinaryIO, *, encoding: str = 'utf-8') -> None:
        self._raw = raw
        self._encoding = encoding

    def readline(self) -> str:
        return self._raw.readline().decode(self._encoding, 'replace')

    def close(self) -> None:
        self._raw.close()


def skip_headers(raw: BinaryIO) -> int:
    """Consume response header lines up to the first blank line or EOF.

    Returns the number of lines discarded (status line included).
    """
    count = 0
    while True:
        hdr = raw.readline()
        if not hdr:
            return count
        count += 1
        if hdr in (b'\n', b'\r\n', b'\r'):
            return count


class ScriptFetcher(ScriptFetcherProtocol):
    def __init__(
        self,
        *,
        transport: Optional[HTTPStreamTransportProtocol] = None,
        logger: Optional[LoggerLikeProtocol] = None,
        encoding: str = 'utf-8',
    ) -> None:
        self._log = logger or get_logger('fetcher')
        self._http: HTTPStreamTransportProtocol = transport or SocketHTTPTransport(logger=self._log)
        self._encoding = encoding

    def open(self, file_or_url: str) -> LineStream:
        if file_or_url.startswith(HTTP_PREFIX):
            return self._open_url(file_or_url)
        return self._open_file(file_or_url)

    def _open_url(self, url: str) -> LineStream:
        parts = resolve_url(url)
        try:
            raw = self._http.open(HttpGetRequest.for_url(parts))
        except (OSError, ValueError) as exc:
            self._log.warning('⚠  could not fetch %s: %s', url, exc)
            return LineStream.empty(name=url)

        try:
            dropped = skip_headers(raw)
        except (OSError, ValueError) as exc:
            self._log.warning('⚠  could not read response headers from %s: %s', url, exc)
            raw.close()
            return LineStream.empty(name=url)

        trace_io(self._log, 'headers skipped', url=url, lines=dropped)
        self._log.info('✔ fetched %s', url)
        return LineStream(_DecodedBody(raw, encoding=self._encoding), name=url, logger=self._log)

    def _open_file(self, path: str) -> LineStream:
        try:
            fp = Path(path).open('r', encoding=self._encoding, errors='replace')
        except (OSError, ValueError) as exc:
            self._log.warning('⚠  could not open script %s: %s', path, exc)
            return LineStream.empty(name=path)
        self._log.info('✔ opened %s', path)
        return LineStream(fp, name=path, logger=self._log)
