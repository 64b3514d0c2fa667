from __future__ import annotations

"""Line classification for the interpreter loop.

A script line is one of: blank, comment, the `exit` sentinel, a nested
script directive (`SERIAL x` / `PARALLEL x`) or an ordinary command.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from parash.constants import (
    COMMENT_PREFIX,
    EXIT_SENTINEL,
    PARALLEL_DIRECTIVE,
    SERIAL_DIRECTIVE,
)
from parash.parsing.tokenizer import CommandTokenizer


class LineKind(Enum):
    SKIP = 'skip'
    EXIT = 'exit'
    DIRECTIVE = 'directive'
    COMMAND = 'command'


@dataclass
class ParsedLine:
    kind: LineKind
    argv: List[str] = field(default_factory=list)

    @property
    def target(self) -> Optional[str]:
        """Script path/URL named by a directive, if any."""
        if self.kind is LineKind.DIRECTIVE and len(self.argv) > 1:
            return self.argv[1]
        return None

    @property
    def parallel(self) -> bool:
        return self.kind is LineKind.DIRECTIVE and self.argv[0] == PARALLEL_DIRECTIVE


def is_directive(word: str) -> bool:
    return word in (SERIAL_DIRECTIVE, PARALLEL_DIRECTIVE)


def classify_line(line: str) -> ParsedLine:
    """Classify a raw line (trailing newline already removed).

    The sentinel is compared verbatim, before any stripping or tokenizing.
    """
    if line == EXIT_SENTINEL:
        return ParsedLine(LineKind.EXIT)
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return ParsedLine(LineKind.SKIP)
    argv = CommandTokenizer.split(line)
    if not argv:
        return ParsedLine(LineKind.SKIP)
    if is_directive(argv[0]):
        return ParsedLine(LineKind.DIRECTIVE, argv)
    return ParsedLine(LineKind.COMMAND, argv)
