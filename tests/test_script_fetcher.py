#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ScriptFetcher tests: local files, a live HTTP/1.1 server on localhost and a
scripted transport for header-parsing edge cases.
"""
from __future__ import annotations

import io
import socket
import socketserver
import sys
import tempfile
import threading
import unittest
from pathlib import Path
from typing import List

PROJECT_SRC = Path(__file__).resolve().parents[1] / "src"
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

from parash.core.models import HttpGetRequest  # noqa: E402
from parash.errors import FetchError  # noqa: E402
from parash.io.script_fetcher import ScriptFetcher, skip_headers  # noqa: E402
from parash.net.socket_transport import SocketHTTPTransport  # noqa: E402


class _ScriptHandler(socketserver.StreamRequestHandler):
    def handle(self) -> None:
        raw: List[bytes] = []
        while True:
            line = self.rfile.readline()
            raw.append(line)
            if line in (b"\r\n", b"\n", b""):
                break
        self.server.requests.append(b"".join(raw))  # type: ignore[attr-defined]
        self.wfile.write(self.server.response)  # type: ignore[attr-defined]


class _Server(socketserver.ThreadingTCPServer):
    daemon_threads = True
    allow_reuse_address = True


def _serve(response: bytes) -> _Server:
    srv = _Server(("127.0.0.1", 0), _ScriptHandler)
    srv.requests = []  # type: ignore[attr-defined]
    srv.response = response  # type: ignore[attr-defined]
    threading.Thread(target=srv.serve_forever, daemon=True).start()
    return srv


def _free_port() -> int:
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


class _CannedTransport:
    def __init__(self, payload: bytes) -> None:
        self.payload = payload
        self.requests: List[HttpGetRequest] = []

    def open(self, req: HttpGetRequest):
        self.requests.append(req)
        return io.BytesIO(self.payload)


class _FailingTransport:
    def open(self, req: HttpGetRequest):
        raise FetchError("boom")


class LocalFileTests(unittest.TestCase):
    def test_reads_lines_without_terminators(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "s.txt"
            p.write_text("echo one\r\necho two\n\nlast", encoding="utf-8")
            with ScriptFetcher().open(str(p)) as stream:
                self.assertEqual(list(stream), ["echo one", "echo two", "", "last"])

    def test_missing_file_gives_empty_stream(self) -> None:
        with ScriptFetcher().open("/definitely/not/here.txt") as stream:
            self.assertIsNone(stream.readline())
            self.assertTrue(stream.exhausted)

    def test_path_with_nul_byte_gives_empty_stream(self) -> None:
        with self.assertLogs("parash", "WARNING"):
            with ScriptFetcher().open("a\x00b") as stream:
                self.assertIsNone(stream.readline())

    def test_relative_name_that_looks_like_url_is_a_file(self) -> None:
        transport = _CannedTransport(b"")
        with ScriptFetcher(transport=transport).open("https://h/x") as stream:
            self.assertEqual(list(stream), [])
        self.assertEqual(transport.requests, [])


class HeaderSkippingTests(unittest.TestCase):
    def test_body_follows_blank_line(self) -> None:
        transport = _CannedTransport(
            b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\necho a\r\necho b\r\n"
        )
        with ScriptFetcher(transport=transport).open("http://h:8080/dir/s.txt") as stream:
            self.assertEqual(list(stream), ["echo a", "echo b"])
        self.assertEqual(transport.requests, [HttpGetRequest("h", "8080", "/dir/s.txt")])

    def test_bare_lf_headers(self) -> None:
        transport = _CannedTransport(b"HTTP/1.0 200 OK\nServer: x\n\ncmd\n")
        with ScriptFetcher(transport=transport).open("http://h/s") as stream:
            self.assertEqual(list(stream), ["cmd"])

    def test_headers_without_terminator_leave_nothing(self) -> None:
        transport = _CannedTransport(b"HTTP/1.1 200 OK\r\nX-A: 1\r\n")
        with ScriptFetcher(transport=transport).open("http://h/s") as stream:
            self.assertEqual(list(stream), [])

    def test_error_status_body_is_not_validated(self) -> None:
        transport = _CannedTransport(b"HTTP/1.1 404 Not Found\r\n\r\n# not found\r\n")
        with ScriptFetcher(transport=transport).open("http://h/missing") as stream:
            self.assertEqual(list(stream), ["# not found"])

    def test_skip_headers_counts_lines(self) -> None:
        buf = io.BytesIO(b"HTTP/1.1 200 OK\r\nA: b\r\n\r\nbody\r\n")
        self.assertEqual(skip_headers(buf), 3)
        self.assertEqual(buf.read(), b"body\r\n")

    def test_transport_failure_gives_empty_stream(self) -> None:
        with ScriptFetcher(transport=_FailingTransport()).open("http://h/s") as stream:
            self.assertIsNone(stream.readline())


class LiveHttpTests(unittest.TestCase):
    def test_get_request_and_body(self) -> None:
        body = b"echo remote\r\n# comment\r\nexit\r\n"
        srv = _serve(
            b"HTTP/1.1 200 OK\r\nContent-Length: %d\r\nConnection: close\r\n\r\n" % len(body) + body
        )
        try:
            port = srv.server_address[1]
            with ScriptFetcher().open(f"http://127.0.0.1:{port}/scripts/a.txt") as stream:
                lines = list(stream)
        finally:
            srv.shutdown()
            srv.server_close()

        self.assertEqual(lines, ["echo remote", "# comment", "exit"])
        self.assertEqual(
            srv.requests,  # type: ignore[attr-defined]
            [b"GET /scripts/a.txt HTTP/1.1\r\nHost: 127.0.0.1\r\nConnection: Close\r\n\r\n"],
        )

    def test_connection_refused_gives_empty_stream(self) -> None:
        port = _free_port()
        with ScriptFetcher().open(f"http://127.0.0.1:{port}/x") as stream:
            self.assertEqual(list(stream), [])

    def test_non_numeric_port_raises_fetch_error_in_transport(self) -> None:
        with self.assertRaises(FetchError):
            SocketHTTPTransport().open(HttpGetRequest("h", "abc", "/"))

    def test_idna_failure_raises_fetch_error_in_transport(self) -> None:
        host = "a" * 70 + ".example"

        def connect(addr):
            raise UnicodeError("encoding with 'idna' codec failed (label empty or too long)")

        with self.assertRaises(FetchError):
            SocketHTTPTransport(connect=connect).open(HttpGetRequest(host, "80", "/x"))

    def test_over_long_host_label_gives_empty_stream(self) -> None:
        url = "http://" + "a" * 70 + ".example/x"
        with self.assertLogs("parash", "WARNING"):
            with ScriptFetcher().open(url) as stream:
                self.assertEqual(list(stream), [])


if __name__ == "__main__":
    unittest.main()
