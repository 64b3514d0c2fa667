from __future__ import annotations


class ParashError(Exception):
    """Base class for parash errors."""


class HandleAlreadyWaitedError(ParashError, RuntimeError):
    """Raised when a child handle is waited on more than once."""


class FetchError(ParashError, OSError):
    """Raised by transports when a remote script cannot be opened."""
