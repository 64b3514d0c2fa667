from __future__ import annotations
"""Script source model.

Carries the origin of a command line (script path or URL, line number) so
the interpreter can emit helpful diagnostics. It never affects the argument
vector itself; it is used *only* for logging and the run report.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ScriptSource:
    """Represents the origin of a script line.

    Attributes:
        name: Local path or URL of the script, None for interactive input.
        line: 1-based line number in the source.
    """
    name: Optional[str] = None
    line: Optional[int] = None

    def format(self) -> str:
        """Return a human-readable source label."""
        parts: list[str] = []
        if self.name:
            parts.append(self.name)
        if self.line is not None:
            parts.append(f"line {self.line}")
        return ":".join(parts) if parts else "<stdin>"

    def with_line(self, line: int) -> "ScriptSource":
        return ScriptSource(name=self.name, line=line)
