from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, TextIO

from parash.constants import DEFAULT_MAX_DEPTH, DEFAULT_PROMPT

_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def _parse_level(raw: Optional[str], default: int) -> int:
    if not raw:
        return default
    return _LEVELS.get(raw.strip().lower(), default)


def _parse_int(raw: Optional[str], default: int) -> int:
    try:
        return int(raw) if raw not in (None, '') else default
    except ValueError:
        return default


@dataclass(frozen=True)
class InterpreterConfig:
    """Immutable settings used to build an Interpreter.

    Precedence: explicit CLI flags > PARASH_* environment variables > defaults.
    """
    prompt: str = DEFAULT_PROMPT
    max_depth: int = DEFAULT_MAX_DEPTH
    json_logs: bool = False
    log_level: int = logging.WARNING
    output: TextIO = field(default_factory=lambda: sys.stdout)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'InterpreterConfig':
        env = os.environ if environ is None else environ
        return cls(
            prompt=env.get('PARASH_PROMPT', DEFAULT_PROMPT),
            max_depth=max(0, _parse_int(env.get('PARASH_MAX_DEPTH'), DEFAULT_MAX_DEPTH)),
            json_logs=env.get('PARASH_JSON_LOGS') == '1',
            log_level=_parse_level(env.get('PARASH_LOG_LEVEL'), logging.WARNING),
        )

    def override(self, **changes) -> 'InterpreterConfig':
        """Return a copy with every non-None value in *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
