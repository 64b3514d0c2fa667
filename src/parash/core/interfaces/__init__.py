from .launcher import ChildHandleProtocol, ProcessLauncherProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .net import HTTPStreamTransportProtocol, ScriptFetcherProtocol

__all__ = [
    'ChildHandleProtocol',
    'ProcessLauncherProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'HTTPStreamTransportProtocol',
    'ScriptFetcherProtocol',
]
