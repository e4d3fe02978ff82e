"""XOR a file with a repeating key, XOR two files together, report file sizes."""

from __future__ import annotations

import os
import re
import sys
from itertools import cycle
from pathlib import Path

CHUNK = 1024

_USAGE = (
    "FileDoXor\n"
    "Command [[filePath]] [[DestFilePath]] [-keyText [string]]|\n"
    "Command [[filePath]] [-keyBytes [bytes]]"
)
_INTEGER = re.compile(r"[+-]?\d+")


def file_size(path) -> int:
    """Return the size of the file at ``path`` in bytes."""
    return os.path.getsize(path)


def _atoi(token: str) -> int:
    match = _INTEGER.match(token)
    return int(match.group()) if match else 0


def parse_key_bytes(text: str) -> bytes:
    """Parse a comma separated list of integers into bytes (taken modulo 256)."""
    tokens = text.replace(" ", "").split(",")
    return bytes(_atoi(token) & 0xFF for token in tokens)


def _check_key(key: bytes) -> None:
    if not key:
        raise ValueError("key must not be empty")


def xor_bytes(data: bytes, key: bytes) -> bytes:
    """XOR ``data`` with ``key`` repeated over its length."""
    _check_key(key)
    return bytes(b ^ k for b, k in zip(data, cycle(key)))


def xor_file(src, dest, key: bytes) -> int:
    """XOR the file ``src`` with ``key`` into ``dest``; return bytes written."""
    _check_key(key)
    stream = cycle(key)
    written = 0
    with open(src, "rb") as fin, open(dest, "wb") as fout:
        while chunk := fin.read(CHUNK):
            written += fout.write(bytes(b ^ k for b, k in zip(chunk, stream)))
    return written


def xor_files(first, second, dest) -> int:
    """XOR two files into ``dest``; the shorter one is padded with zero bytes.

    Returns the number of bytes written, the length of the longer file.
    """
    written = 0
    with open(first, "rb") as a, open(second, "rb") as b, open(dest, "wb") as out:
        while True:
            left, right = a.read(CHUNK), b.read(CHUNK)
            if not left and not right:
                break
            width = max(len(left), len(right))
            written += out.write(
                bytes(
                    p ^ q
                    for p, q in zip(left.ljust(width, b"\0"), right.ljust(width, b"\0"))
                )
            )
    return written


def _format_key(key: bytes) -> str:
    return "[" + ",".join(str(b - 256 if b > 127 else b) for b in key) + "]"


def main(argv=None) -> int:
    """Command line entry: ``src [dest] -keyText|-keyBytes key``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (3, 4):
        print(_USAGE)
        return 80
    src = args[0]
    dest = args[1] if len(args) == 4 else None
    mode, key_text = args[-2].upper(), args[-1]
    if mode == "-KEYTEXT":
        key = key_text.encode("utf-8")
    elif mode == "-KEYBYTES":
        key = parse_key_bytes(key_text)
    else:
        print(_USAGE)
        return 80
    if not key:
        print("empty key")
        return 1
    print("key: " + _format_key(key))
    print()
    try:
        if dest is None:
            path = Path(src)
            path.write_bytes(xor_bytes(path.read_bytes(), key))
        else:
            xor_file(src, dest, key)
    except OSError:
        print("fopen error")
        return -1
    return 0


def two_files_main(argv=None) -> int:
    """Command line entry: ``first second dest``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        return 1
    try:
        xor_files(*args)
    except OSError as exc:
        position = args.index(exc.filename) + 1 if exc.filename in args else 3
        print(f"{position}.fopen error")
        return -1
    return 0


def size_main(argv=None) -> int:
    """Command line entry: print the size of the given file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        print(file_size(args[0]))
    except OSError:
        print("open file failed.")
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())