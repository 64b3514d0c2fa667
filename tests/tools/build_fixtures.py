#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – creates / refreshes the script fixtures used by the parash
test-suite.

Every command in the fixtures runs the current Python interpreter, so the
scripts work on any platform the tests run on. Directives use absolute paths
so the scripts do not depend on the working directory.

Usage: build_fixtures.py [ROOT]   (default: <repo>/test-fixtures)
"""
from __future__ import annotations

import sys
import textwrap
from pathlib import Path

DEFAULT_ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()


def _q(word: str) -> str:
    """Quote *word* for a parash script line."""
    return '"' + word.replace("\\", "\\\\").replace('"', '\\"') + '"'


def py(code: str) -> str:
    """Return a script line that runs *code* with the current interpreter."""
    return f"{_q(sys.executable)} -c {_q(code)}"


def exit_with(code: int, delay: float = 0.0) -> str:
    if delay:
        return py(f"import sys, time; time.sleep({delay}); sys.exit({code})")
    return py(f"import sys; sys.exit({code})")


def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


def build(root: Path) -> Path:
    root.mkdir(parents=True, exist_ok=True)

    _write(root / "serial.txt", f"""
        # three commands, awaited one by one
        {exit_with(0)}
        {exit_with(1)}
        {exit_with(2)}
    """)

    # The first child sleeps longest; reporting must still follow spawn order.
    _write(root / "parallel.txt", f"""
        {exit_with(3, 0.6)}
        {exit_with(4, 0.3)}
        {exit_with(5)}
    """)

    _write(root / "comments.txt", """
        # nothing to run here

           # indented comment

    """)

    _write(root / "deep.txt", f"""
        {exit_with(4, 0.2)}
        {exit_with(5)}
    """)
    _write(root / "inner.txt", f"""
        PARALLEL {_q(str(root / "deep.txt"))}
        {exit_with(6)}
    """)
    _write(root / "outer.txt", f"""
        SERIAL {_q(str(root / "inner.txt"))}
        {exit_with(7)}
    """)

    _write(root / "early_exit.txt", f"""
        {exit_with(8)}
        exit
        {exit_with(9)}
    """)

    _write(root / "missing_cmd.txt", """
        parash-definitely-not-a-real-command --flag
    """)

    return root


if __name__ == "__main__":
    target = Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else DEFAULT_ROOT
    build(target)
