from __future__ import annotations
from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ChildHandleProtocol(Protocol):
    """Opaque reference to a spawned child process."""

    id: int
    argv: List[str]


@runtime_checkable
class ProcessLauncherProtocol(Protocol):
    """Starts commands as child processes and waits on them.

    Failures to start a command are reported through the exit status returned
    by `wait`, never raised from `spawn`.
    """

    def spawn(self, argv: Sequence[str]) -> ChildHandleProtocol:
        ...

    def wait(self, handle: ChildHandleProtocol) -> int:
        ...
