from __future__ import annotations

"""URL decomposition for remote scripts.

`resolve_url` is plain substring arithmetic: it never validates its input and
never looks at the scheme. Gating on `http://` is the fetcher's job.

Examples:
    resolve_url("http://localhost:8080/~raodm/one.txt")
        -> UrlParts("localhost", "8080", "/~raodm/one.txt")
    resolve_url("ftp://ftp.files.miamioh.edu/index.html")
        -> UrlParts("ftp.files.miamioh.edu", "80", "/index.html")
"""

from parash.constants import DEFAULT_HTTP_PATH, DEFAULT_HTTP_PORT
from parash.core.models import UrlParts


def resolve_url(url: str) -> UrlParts:
    # str.find returns -1 when '//' is missing, so the host starts at 1,
    # mirroring the classic `find("//") + 2` arithmetic.
    host_start = url.find('//') + 2
    path_start = url.find('/', host_start)
    host_stop = path_start if path_start != -1 else len(url)

    port_pos = url.find(':', host_start, host_stop)
    host_end = port_pos if port_pos != -1 else host_stop

    host = url[host_start:host_end]
    port = url[port_pos + 1:host_stop] if port_pos != -1 else DEFAULT_HTTP_PORT
    path = url[path_start:] if path_start != -1 else DEFAULT_HTTP_PATH
    return UrlParts(host=host, port=port, path=path)
