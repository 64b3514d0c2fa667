from __future__ import annotations

"""
CommandTokenizer – splits a command line into an argument vector.

Rules:
    * Words are separated by runs of whitespace.
    * A word that *starts* with a double quote extends to the matching closing
      quote; the quotes are stripped and embedded whitespace is kept. Inside
      such a word a backslash escapes the next character, so `\\"` yields a
      literal quote.
    * A quote appearing in the middle of an unquoted word is ordinary text.
    * An unterminated quote consumes to the end of the line.

No other shell syntax (pipes, redirection, `$VAR`) is recognised.
"""

from typing import List, Tuple

QUOTE = '"'
ESCAPE = '\\'


class CommandTokenizer:
    @staticmethod
    def _read_quoted(line: str, i: int) -> Tuple[str, int]:
        """Read a quoted word whose opening quote sits at *i*.

        Returns the unquoted word and the index just past the closing quote
        (or len(line) when the quote is never closed).
        """
        buf: List[str] = []
        i += 1
        n = len(line)
        while i < n:
            ch = line[i]
            if ch == ESCAPE and i + 1 < n:
                buf.append(line[i + 1])
                i += 2
                continue
            if ch == QUOTE:
                return ''.join(buf), i + 1
            buf.append(ch)
            i += 1
        return ''.join(buf), n

    @staticmethod
    def split(line: str) -> List[str]:
        words: List[str] = []
        i, n = 0, len(line)
        while i < n:
            if line[i].isspace():
                i += 1
                continue
            if line[i] == QUOTE:
                word, i = CommandTokenizer._read_quoted(line, i)
                words.append(word)
                continue
            start = i
            while i < n and not line[i].isspace():
                i += 1
            words.append(line[start:i])
        return words

    @staticmethod
    def quote(word: str) -> str:
        """Return *word* in a form that `split` reads back as one word."""
        if word and not any(ch.isspace() for ch in word) and not word.startswith(QUOTE):
            return word
        escaped = word.replace(ESCAPE, ESCAPE * 2).replace(QUOTE, ESCAPE + QUOTE)
        return f'{QUOTE}{escaped}{QUOTE}'


def split(line: str) -> List[str]:
    """Module-level shortcut for `CommandTokenizer.split`."""
    return CommandTokenizer.split(line)
