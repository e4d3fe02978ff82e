"""Write every Unicode code point, UTF-8 encoded, into one file."""

from __future__ import annotations

import sys

MAX_CODEPOINT = 0x10FFFF
DEFAULT_PATH = "./unicode.txt"


def utf8_size(codepoint: int) -> int:
    """Return the UTF-8 length of ``codepoint``, or 0 when it is out of range."""
    if 0 <= codepoint <= 0x7F:
        return 1
    if 0x80 <= codepoint <= 0x7FF:
        return 2
    if 0x800 <= codepoint <= 0xFFFF:
        return 3
    if 0x10000 <= codepoint <= MAX_CODEPOINT:
        return 4
    return 0


def encode_codepoint(codepoint: int) -> bytes:
    """Encode one code point as UTF-8; surrogates are encoded as well.

    Out of range values give empty bytes.
    """
    if not utf8_size(codepoint):
        return b""
    return chr(codepoint).encode("utf-8", "surrogatepass")


def write_table(path) -> int:
    """Write all code points from 0 to U+10FFFF to ``path``; return bytes written."""
    data = b"".join(encode_codepoint(cp) for cp in range(MAX_CODEPOINT + 1))
    with open(path, "wb") as out:
        return out.write(data)


def main(argv=None) -> int:
    """Command line entry: write the table to the given path or ``./unicode.txt``."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else DEFAULT_PATH
    try:
        write_table(path)
    except OSError:
        print("fopen error")
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())