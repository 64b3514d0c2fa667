from __future__ import annotations

"""
Interpreter loop – reads command lines and runs them as child processes.

One call to `Interpreter.run` consumes one LineStream in one mode:

* serial   – every command is spawned and awaited before the next line.
* parallel – commands are spawned and appended to a pending list that is
             drained, in spawn order, once the stream ends or `exit` is read.

`SERIAL x` / `PARALLEL x` lines open *x* through the fetcher and recurse
synchronously with an empty prompt. Each call owns its own pending list and
stream, so a nested PARALLEL script is fully drained before control returns
to the line that invoked it.
"""

import sys
from typing import List, Optional, TextIO

from parash.constants import DEFAULT_MAX_DEPTH
from parash.core.interfaces.launcher import ChildHandleProtocol, ProcessLauncherProtocol
from parash.core.interfaces.logging import LoggerLikeProtocol
from parash.core.interfaces.net import ScriptFetcherProtocol
from parash.core.report import RunReport
from parash.io.line_stream import LineStream
from parash.logging.helpers import get_logger
from parash.parsing.directives import LineKind, ParsedLine, classify_line
from parash.parsing.source import ScriptSource


class Interpreter:
    def __init__(
        self,
        *,
        launcher: ProcessLauncherProtocol,
        fetcher: ScriptFetcherProtocol,
        output: Optional[TextIO] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._launcher = launcher
        self._fetcher = fetcher
        self._out = output or sys.stdout
        self._max_depth = max_depth
        self._log = logger or get_logger('interpreter')

    # ---------- reporting ----------

    def _emit(self, text: str) -> None:
        self._out.write(text + '\n')
        self._out.flush()

    def _await(self, handle: ChildHandleProtocol, report: RunReport) -> int:
        code = self._launcher.wait(handle)
        self._emit(f'Exit code: {code}')
        report.add_result(handle.id, handle.argv, code)
        return code

    # ---------- dispatch ----------

    def _run_command(self, argv: List[str], parallel: bool, pending: List[ChildHandleProtocol], report: RunReport) -> None:
        self._emit('Running: ' + ' '.join(argv))
        handle = self._launcher.spawn(argv)
        report.spawned += 1
        if parallel:
            pending.append(handle)
        else:
            self._await(handle, report)

    def _run_script(self, parsed: ParsedLine, src: ScriptSource, depth: int, report: RunReport) -> None:
        target = parsed.target
        if target is None:
            msg = f'{parsed.argv[0]} without a script argument at {src.format()}'
            self._log.warning('⚠  %s; line ignored', msg)
            report.add_error(msg)
            return
        if depth + 1 > self._max_depth:
            msg = f'script nesting deeper than {self._max_depth} at {src.format()}: {target}'
            self._log.error('⚠  %s; directive skipped', msg)
            report.add_error(msg)
            return

        self._log.info('%s %s (depth %d)', parsed.argv[0], target, depth + 1)
        with self._fetcher.open(target) as sub_stream:
            child = self.run(sub_stream, '', parsed.parallel, depth=depth + 1)
        report.children.append(child)

    # ---------- public API ----------

    def run(self, stream: LineStream, prompt: str = '', parallel: bool = False, *, depth: int = 0) -> RunReport:
        """Run every line of *stream* and return the invocation's report.

        The stream is not closed here; whoever opened it owns it.
        """
        report = RunReport(source=stream.name or '<stdin>', parallel=parallel, depth=depth)
        src = ScriptSource(name=stream.name)
        pending: List[ChildHandleProtocol] = []

        lno = 0
        try:
            while True:
                if prompt:
                    self._out.write(prompt)
                    self._out.flush()
                line = stream.readline()
                if line is None:
                    break
                lno += 1
                report.lines_read = lno

                parsed = classify_line(line)
                if parsed.kind is LineKind.EXIT:
                    break
                if parsed.kind is LineKind.SKIP:
                    continue
                if parsed.kind is LineKind.DIRECTIVE:
                    self._run_script(parsed, src.with_line(lno), depth, report)
                else:
                    self._run_command(parsed.argv, parallel, pending, report)
        finally:
            # Serial invocations never append, so this only drains in parallel mode.
            for handle in pending:
                self._await(handle, report)
            report.finish()
        return report
