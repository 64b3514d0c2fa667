from __future__ import annotations

"""Wiring helpers that build a ready-to-run Interpreter from configuration."""

from typing import Optional

from parash.core.interfaces.launcher import ProcessLauncherProtocol
from parash.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from parash.core.interfaces.net import HTTPStreamTransportProtocol
from parash.io.script_fetcher import ScriptFetcher
from parash.logging.factory import DefaultLoggerFactory
from parash.net.socket_transport import SocketHTTPTransport
from parash.runtime.config import InterpreterConfig
from parash.runtime.interpreter import Interpreter
from parash.runtime.launcher import SubprocessLauncher


def build_interpreter(
    cfg: InterpreterConfig,
    *,
    launcher: Optional[ProcessLauncherProtocol] = None,
    transport: Optional[HTTPStreamTransportProtocol] = None,
    logger: Optional[LoggerLikeProtocol] = None,
) -> Interpreter:
    """Build an Interpreter with default collaborators unless overridden."""
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=cfg.json_logs, level=cfg.log_level)
    log = logger or factory.get_logger('interpreter')
    fetcher = ScriptFetcher(
        transport=transport or SocketHTTPTransport(logger=factory.get_logger('http')),
        logger=factory.get_logger('fetcher'),
    )
    return Interpreter(
        launcher=launcher or SubprocessLauncher(logger=factory.get_logger('launcher')),
        fetcher=fetcher,
        output=cfg.output,
        max_depth=cfg.max_depth,
        logger=log,
    )
