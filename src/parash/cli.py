from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, NoReturn, Optional, Sequence

from parash.constants import PARALLEL_DIRECTIVE, SERIAL_DIRECTIVE
from parash.core.report import RunReport
from parash.io.line_stream import LineStream
from parash.logging.factory import DefaultLoggerFactory
from parash.logging.helpers import get_logger
from parash.parsing.tokenizer import CommandTokenizer
from parash.runtime.config import InterpreterConfig
from parash.runtime.wiring import build_interpreter


logger = get_logger('parash')


def _configure_logging(enable_json: bool, level: int) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    prev = getattr(_configure_logging, '_configured_mode', None)
    if prev is not None and prev == (bool(enable_json), level):
        return
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('parash')
    setattr(_configure_logging, '_configured_mode', (bool(enable_json), level))


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='parash',
        description=(
            'parash – a minimal command interpreter with SERIAL and PARALLEL scripts.\n'
            'Without a script option, commands are read interactively from stdin.\n'
            'Inside any input, “SERIAL <file|url>” and “PARALLEL <file|url>” run a\n'
            'nested script; a line reading “exit” ends the current input.'
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        '--serial',
        metavar='FILE_OR_URL',
        dest='serial',
        help='Run the script at FILE_OR_URL one command after another, then exit.',
    )
    mode.add_argument(
        '--parallel',
        metavar='FILE_OR_URL',
        dest='parallel',
        help='Start every command of FILE_OR_URL at once, wait for all of them, then exit.',
    )
    p.add_argument(
        '-p',
        '--prompt',
        metavar='TEXT',
        dest='prompt',
        help="Interactive prompt (default '> ', env PARASH_PROMPT). Use '' to hide it.",
    )
    p.add_argument(
        '--max-depth',
        metavar='N',
        type=int,
        dest='max_depth',
        help='Maximum SERIAL/PARALLEL nesting depth (default 64, env PARASH_MAX_DEPTH).',
    )
    p.add_argument(
        '--json-logs',
        action='store_true',
        default=None,
        dest='json_logs',
        help='Emit diagnostics on stderr as JSON lines (env PARASH_JSON_LOGS=1).',
    )
    p.add_argument(
        '--report',
        action='store_true',
        dest='report',
        help='After the run, print the JSON run report (nested scripts included) on stderr.',
    )
    p.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        dest='verbose',
        help='Increase diagnostic verbosity (-v info, -vv debug).',
    )
    return p


def _level_for(verbose: int, default: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return default


class Parash:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str], *, stdin=None, config: Optional[InterpreterConfig] = None) -> RunReport:
        """Run the interpreter for an argv-like sequence and return the top-level report."""
        ns = _build_parser().parse_args(list(argv))
        base = config or InterpreterConfig.from_env()
        cfg = base.override(
            prompt=ns.prompt,
            max_depth=ns.max_depth,
            json_logs=ns.json_logs,
            log_level=_level_for(ns.verbose, base.log_level),
        )
        _configure_logging(cfg.json_logs, cfg.log_level)
        interp = build_interpreter(cfg)

        if ns.serial or ns.parallel:
            # A one-line script keeps directive semantics identical to interactive use.
            directive = SERIAL_DIRECTIVE if ns.serial else PARALLEL_DIRECTIVE
            target = ns.serial or ns.parallel
            lines: List[str] = [f"{directive} {CommandTokenizer.quote(target)}"]
            report = interp.run(LineStream.from_lines(lines, name='<argv>'), '', False)
        else:
            report = interp.run(LineStream(stdin or sys.stdin, name=None), cfg.prompt, False)

        if ns.report:
            sys.stderr.write(report.to_json() + '\n')
        return report


def main() -> NoReturn:
    """Entry point for `python -m parash` and the `parash` console script."""
    try:
        Parash.run(sys.argv[1:])
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
