from __future__ import annotations
from typing import BinaryIO, Protocol, runtime_checkable

from parash.core.models import HttpGetRequest
from parash.io.line_stream import LineStream


@runtime_checkable
class HTTPStreamTransportProtocol(Protocol):
    def open(self, req: HttpGetRequest) -> BinaryIO:
        """Send *req* and return the raw response stream, headers included.

        Raises FetchError (or any OSError) when the connection cannot be made.
        """
        ...


@runtime_checkable
class ScriptFetcherProtocol(Protocol):
    def open(self, file_or_url: str) -> LineStream:
        """Return a line stream for a local path or an http:// URL."""
        ...
