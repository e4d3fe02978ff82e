"""Base128 file encoding: every seven input bytes become eight seven-bit bytes.

An encoded stream starts with an eight byte header: the input length modulo
seven, four zero bytes and the marker ``zhc``.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

ENCODE_CHUNK = 1029
DECODE_CHUNK = 1176
HEADER_SIZE = 8
_HEADER_TAIL = bytes(4) + b"zhc"

_USAGE = (
    "Base128\n"
    "Command [-encode | -decode] [[filePath]] [[DestFilePath]] |\n"
    "Command [-encode | -decode] [[filePath]]"
)


class NotBase128Error(ValueError):
    """Raised when data does not carry a Base128 header."""


def encode_block(block: bytes) -> bytes:
    """Encode up to seven bytes (zero padded) into eight seven-bit bytes."""
    if len(block) > 7:
        raise ValueError("a Base128 block holds at most 7 bytes")
    value = int.from_bytes(block.ljust(7, b"\0"), "big")
    return bytes((value >> (7 * (7 - i))) & 0x7F for i in range(8))


def decode_block(block: bytes) -> bytes:
    """Decode up to eight encoded bytes (zero padded) into seven bytes."""
    if len(block) > 8:
        raise ValueError("an encoded Base128 block holds at most 8 bytes")
    padded = block.ljust(8, b"\0")
    return bytes(
        ((padded[i] << (i + 1)) | (padded[i + 1] >> (6 - i))) & 0xFF for i in range(7)
    )


def _encode_chunk(data: bytes) -> bytes:
    return b"".join(encode_block(data[i:i + 7]) for i in range(0, len(data), 7))


def _decode_chunk(data: bytes) -> bytes:
    return b"".join(decode_block(data[i:i + 8]) for i in range(0, len(data), 8))


def _header(size: int) -> bytes:
    return bytes([size % 7]) + _HEADER_TAIL


def _check_header(header: bytes) -> None:
    if len(header) < HEADER_SIZE or header[1:HEADER_SIZE] != _HEADER_TAIL:
        raise NotBase128Error("not Base128 encoded")


def _tail_length(decoded_length: int, remainder: int) -> int:
    # A remainder of zero means the last group was a full seven bytes.
    return decoded_length + (remainder or 7) - 7


def encode_bytes(data: bytes) -> bytes:
    """Encode ``data`` into a Base128 stream, header included."""
    return _header(len(data)) + _encode_chunk(data)


def decode_bytes(data: bytes) -> bytes:
    """Decode a Base128 stream produced by :func:`encode_bytes`."""
    _check_header(data[:HEADER_SIZE])
    body = data[HEADER_SIZE:]
    full = len(body) // DECODE_CHUNK * DECODE_CHUNK
    out = _decode_chunk(body[:full])
    rest = body[full:]
    if rest:
        decoded = _decode_chunk(rest)
        out += decoded[:_tail_length(len(decoded), data[0])]
    return out


def encode_file(src, dest) -> int:
    """Encode the file ``src`` into ``dest``; return the size of ``src``."""
    size = os.path.getsize(src)
    with open(src, "rb") as fin, open(dest, "wb") as fout:
        fout.write(_header(size))
        while chunk := fin.read(ENCODE_CHUNK):
            fout.write(_encode_chunk(chunk))
    return size


def decode_file(src, dest) -> int:
    """Decode the Base128 file ``src`` into ``dest``; return bytes written."""
    size = os.path.getsize(src)
    written = 0
    with open(src, "rb") as fin:
        header = fin.read(HEADER_SIZE)
        _check_header(header)
        full, rest = divmod(size - HEADER_SIZE, DECODE_CHUNK)
        with open(dest, "wb") as fout:
            for _ in range(full):
                written += fout.write(_decode_chunk(fin.read(DECODE_CHUNK)))
            if rest:
                decoded = _decode_chunk(fin.read(rest))
                written += fout.write(decoded[:_tail_length(len(decoded), header[0])])
    return written


def new_file_name(path) -> str:
    """Return the first free name of the form ``"<path> (<n>)"`` with n >= 2."""
    number = 2
    while True:
        candidate = f"{path} ({number})"
        if not os.path.exists(candidate):
            return candidate
        number += 1


def main(argv=None) -> int:
    """Command line entry: ``-encode|-decode src [dest]``; in place without dest."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print(_USAGE)
        return 0
    decoding = args[0].upper() == "-DECODE"
    src = args[1]
    in_place = len(args) == 2
    dest = new_file_name(src) if in_place else args[2]
    try:
        if decoding:
            print("Decoding...")
            print(f"size: {os.path.getsize(src)}")
            decode_file(src, dest)
        else:
            print("Encoding...")
            print(f"size: {encode_file(src, dest)}")
    except NotBase128Error:
        print("not Base128 encoded")
        return -2
    except OSError:
        print("fopen error. ")
        return -1
    if in_place:
        Path(src).unlink()
        Path(dest).rename(src)
    return 0


if __name__ == "__main__":
    sys.exit(main())