from dataclasses import dataclass


@dataclass(frozen=True)
class UrlParts:
    """(host, port, path) triple derived from a script URL."""
    host: str
    port: str = '80'
    path: str = '/'


@dataclass(frozen=True)
class HttpGetRequest:
    host: str
    port: str
    path: str

    def render(self) -> bytes:
        """Return the exact request bytes sent on the wire."""
        return (
            f'GET {self.path} HTTP/1.1\r\n'
            f'Host: {self.host}\r\n'
            'Connection: Close\r\n'
            '\r\n'
        ).encode('utf-8')

    @classmethod
    def for_url(cls, parts: UrlParts) -> 'HttpGetRequest':
        return cls(host=parts.host, port=parts.port, path=parts.path)
