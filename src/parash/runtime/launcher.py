from __future__ import annotations

"""Process launcher backed by `subprocess.Popen`.

Children inherit the interpreter's stdin/stdout/stderr and run without a
shell, so argv[0] is looked up on PATH and the remaining words are passed
verbatim. A command that cannot be started still yields a handle; its
failure shows up as the exit status returned by `wait`.
"""

import itertools
import subprocess
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from parash.constants import EXIT_CANNOT_EXECUTE, EXIT_NOT_FOUND
from parash.core.interfaces.launcher import ProcessLauncherProtocol
from parash.core.interfaces.logging import LoggerLikeProtocol
from parash.errors import HandleAlreadyWaitedError
from parash.logging.helpers import get_logger

_ids = itertools.count(1)


@dataclass(eq=False)
class ChildHandle:
    """A spawned child. `proc` is None when the command never started."""
    argv: List[str]
    proc: Optional[subprocess.Popen] = None
    failed_status: Optional[int] = None
    id: int = field(default_factory=lambda: next(_ids))
    waited: bool = False

    @property
    def pid(self) -> Optional[int]:
        return self.proc.pid if self.proc is not None else None


class SubprocessLauncher(ProcessLauncherProtocol):
    def __init__(
        self,
        *,
        popen: Callable[..., subprocess.Popen] = subprocess.Popen,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._popen = popen
        self._log = logger or get_logger('launcher')

    def spawn(self, argv: Sequence[str]) -> ChildHandle:
        args = list(argv)
        try:
            proc = self._popen(args)
        except FileNotFoundError as exc:
            self._log.warning('⚠  command not found: %s (%s)', args[0] if args else '', exc)
            return ChildHandle(argv=args, failed_status=EXIT_NOT_FOUND)
        except (OSError, ValueError) as exc:
            self._log.warning('⚠  could not execute %s: %s', args[0] if args else '', exc)
            return ChildHandle(argv=args, failed_status=EXIT_CANNOT_EXECUTE)

        handle = ChildHandle(argv=args, proc=proc)
        self._log.debug('spawned #%d pid=%s: %s', handle.id, handle.pid, args)
        return handle

    def wait(self, handle: ChildHandle) -> int:
        if handle.waited:
            raise HandleAlreadyWaitedError(f'child #{handle.id} was already waited on')
        handle.waited = True
        if handle.proc is None:
            return int(handle.failed_status if handle.failed_status is not None else EXIT_CANNOT_EXECUTE)
        code = handle.proc.wait()
        self._log.debug('child #%d pid=%s exited with %s', handle.id, handle.pid, code)
        return int(code)
