from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Prompt shown by the interactive session. Nested scripts always use "".
DEFAULT_PROMPT: str = '> '

# A line equal to this ends the current invocation without being dispatched.
EXIT_SENTINEL: str = 'exit'

COMMENT_PREFIX: str = '#'

SERIAL_DIRECTIVE: str = 'SERIAL'
PARALLEL_DIRECTIVE: str = 'PARALLEL'

HTTP_PREFIX: str = 'http://'
DEFAULT_HTTP_PORT: str = '80'
DEFAULT_HTTP_PATH: str = '/'

# Guard against unbounded SERIAL/PARALLEL self-inclusion.
DEFAULT_MAX_DEPTH: int = 64

# Status reported for a command that could not be started.
EXIT_NOT_FOUND: int = 127
EXIT_CANNOT_EXECUTE: int = 126
