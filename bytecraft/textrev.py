"""Reverse text character by character and cut text to a display width."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from enum import Enum

_HELP = (
    "字符倒序排列\n"
    "传进的每句话处理过的每个字符为一行使用-ml，用空行分隔，否则每句话处理后为一行，即默认（不加任何参数）\n"
    "所有都放一行使用-l，中间无分隔"
)
_CONFLICT = "-l和-ml不能同时使用"


class Layout(Enum):
    """How reversed texts are laid out."""

    LINES = "default"
    CHARS = "ml"
    FLAT = "l"


def reverse_text(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def _width(char: str) -> int:
    return 1 if char.isascii() else 2


def truncate(text: str, count: int) -> str:
    """Return the shortest prefix of ``text`` at least ``count`` units wide.

    ASCII characters are one unit wide, all others two; a character is never
    split. The whole text comes back when it is not wider than ``count``.
    """
    prefix = []
    width = 0
    for char in text:
        if width >= count:
            break
        prefix.append(char)
        width += _width(char)
    return "".join(prefix)


def format_reversed(texts: Iterable[str], mode="default") -> str:
    """Reverse each text and lay them out.

    ``"default"`` puts each reversed text on its own line, ``"ml"`` puts each
    character on its own line with a blank line after each text, and ``"l"``
    joins everything without separators.
    """
    layout = Layout(mode)
    parts = []
    for text in texts:
        reversed_text = reverse_text(text)
        if layout is Layout.CHARS:
            parts.append("".join(char + "\n" for char in reversed_text) + "\n")
        elif layout is Layout.FLAT:
            parts.append(reversed_text)
        else:
            parts.append(reversed_text + "\n")
    return "".join(parts)


def main(argv=None) -> int:
    """Command line entry: reverse each argument; ``-ml`` and ``-l`` pick the layout."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(_HELP)
    per_char = "-ml" in args
    flat = "-l" in args
    if per_char and flat:
        print(_CONFLICT)
        return 0
    mode = Layout.CHARS if per_char else Layout.FLAT if flat else Layout.LINES
    texts = [arg for arg in args if arg not in ("-ml", "-l")]
    sys.stdout.write(format_reversed(texts, mode.value))
    return 0


if __name__ == "__main__":
    sys.exit(main())