from __future__ import annotations

"""Line-oriented input for the interpreter.

A LineStream wraps any text source (stdin, an open file, a decoded socket
body, or an in-memory list) behind a single `readline()` call that returns
`None` at end of stream. Read errors in the middle of a script are logged
and treated as end of stream so the caller still drains its pending children.
"""

import io
from typing import IO, TYPE_CHECKING, Iterable, Iterator, List, Optional

from parash.logging.helpers import get_logger

if TYPE_CHECKING:
    from parash.core.interfaces.logging import LoggerLikeProtocol


def _chomp(raw: str) -> str:
    if raw.endswith('\n'):
        raw = raw[:-1]
    if raw.endswith('\r'):
        raw = raw[:-1]
    return raw


class LineStream:
    def __init__(
        self,
        source: Optional[IO[str]] = None,
        *,
        name: Optional[str] = None,
        resources: Iterable[object] = (),
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._src = source
        self.name = name
        # Extra objects (sockets, binary files) closed along with the stream.
        self._resources: List[object] = list(resources)
        self._log = logger or get_logger('stream')
        self._exhausted = source is None
        self._closed = False

    @classmethod
    def empty(cls, *, name: Optional[str] = None) -> 'LineStream':
        """A stream that is already at its end (failed fetches)."""
        return cls(None, name=name)

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, name: Optional[str] = None) -> 'LineStream':
        body = ''.join(line if line.endswith('\n') else line + '\n' for line in lines)
        return cls(io.StringIO(body), name=name)

    @classmethod
    def from_text(cls, text: str, *, name: Optional[str] = None) -> 'LineStream':
        return cls(io.StringIO(text), name=name)

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def readline(self) -> Optional[str]:
        """Return the next line without its line terminator, or None at the end."""
        if self._exhausted or self._src is None:
            return None
        try:
            raw = self._src.readline()
        except (OSError, ValueError, UnicodeDecodeError) as exc:
            self._log.warning('⚠  read error on %s: %s; treating as end of stream', self.name or '<stream>', exc)
            raw = ''
        if raw == '':
            self._exhausted = True
            return None
        return _chomp(raw)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._exhausted = True
        for obj in [self._src, *self._resources]:
            closer = getattr(obj, 'close', None)
            if closer is None:
                continue
            try:
                closer()
            except OSError as exc:
                self._log.debug('close failed on %s: %s', self.name or '<stream>', exc)

    def __enter__(self) -> 'LineStream':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
