from __future__ import annotations

from parash.cli import Parash, main
from parash.core.models import UrlParts
from parash.core.report import RunReport
from parash.io.line_stream import LineStream
from parash.io.script_fetcher import ScriptFetcher
from parash.net.url import resolve_url
from parash.parsing.tokenizer import CommandTokenizer, split
from parash.runtime.config import InterpreterConfig
from parash.runtime.interpreter import Interpreter
from parash.runtime.launcher import ChildHandle, SubprocessLauncher
from parash.runtime.wiring import build_interpreter

__version__ = '1.0.0'

__all__ = [
    'Parash',
    'main',
    'UrlParts',
    'RunReport',
    'LineStream',
    'ScriptFetcher',
    'resolve_url',
    'CommandTokenizer',
    'split',
    'InterpreterConfig',
    'Interpreter',
    'ChildHandle',
    'SubprocessLauncher',
    'build_interpreter',
]
