from __future__ import annotations

"""
Per-invocation run report.

Each call to `Interpreter.run` produces one RunReport. Nested SERIAL/PARALLEL
scripts attach their own report under `children`, so the tree mirrors the
depth-first invocation order.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class CommandResult:
    handle_id: int
    argv: List[str]
    exit_code: int


@dataclass
class RunReport:
    source: str = '<stdin>'
    parallel: bool = False
    depth: int = 0

    started_at: float = field(default_factory=time.perf_counter)
    finished_at: Optional[float] = None
    duration_s: Optional[float] = None

    lines_read: int = 0
    spawned: int = 0
    results: List[CommandResult] = field(default_factory=list)
    children: List['RunReport'] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def exit_codes(self) -> List[int]:
        return [r.exit_code for r in self.results]

    def add_result(self, handle_id: int, argv: List[str], exit_code: int) -> None:
        self.results.append(CommandResult(handle_id=handle_id, argv=list(argv), exit_code=exit_code))

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def walk(self):
        """Yield this report and every nested one, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'parallel': self.parallel,
            'depth': self.depth,
            'duration_s': self.duration_s,
            'lines_read': self.lines_read,
            'spawned': self.spawned,
            'results': [
                {'id': r.handle_id, 'argv': r.argv, 'exit_code': r.exit_code}
                for r in self.results
            ],
            'errors': self.errors,
            'children': [c.to_dict() for c in self.children],
        }

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
