"""Base64 encoding of strings and files."""

from __future__ import annotations

import base64
import sys

ENCODE_CHUNK = 1023
DECODE_CHUNK = 1024

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_DECODE = {byte: value for value, byte in enumerate(_ALPHABET)}


def encode(data: bytes) -> str:
    """Encode ``data`` as padded Base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def _group(values) -> bytes:
    a, b, c, d = values
    return ((a << 18) | (b << 12) | (c << 6) | d).to_bytes(3, "big")


def decode(text) -> bytes:
    """Decode Base64 text.

    Characters outside the alphabet count as zero. Without padding, an
    incomplete trailing group is ignored.
    """
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if not raw:
        return b""
    pad = (raw[-1:] == b"=") + (raw[-2:-1] == b"=")
    values = [_DECODE.get(byte, 0) for byte in raw]
    groups = (len(raw) - pad) // 4 if pad else len(raw) // 4
    out = bytearray()
    for start in range(0, groups * 4, 4):
        out += _group(values[start:start + 4])
    if pad:
        tail = values[groups * 4:groups * 4 + 4]
        tail += [0] * (4 - len(tail))
        out += _group(tail)[:3 - pad]
    return bytes(out)


def encode_file(src, dest) -> int:
    """Encode the file ``src`` into ``dest``; return characters written."""
    written = 0
    with open(src, "rb") as fin, open(dest, "wb") as fout:
        while chunk := fin.read(ENCODE_CHUNK):
            written += fout.write(base64.b64encode(chunk))
    return written


def decode_file(src, dest) -> int:
    """Decode the Base64 file ``src`` into ``dest``; return bytes written."""
    written = 0
    with open(src, "rb") as fin, open(dest, "wb") as fout:
        while chunk := fin.read(DECODE_CHUNK):
            written += fout.write(decode(chunk))
    return written


def main(argv=None) -> int:
    """Command line entry.

    ``text`` encodes text; ``-decode text`` decodes it; a trailing ``-f``
    treats the argument as a file and writes a sibling output file.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    if len(args) == 1:
        print("\n" + encode(args[0].encode("utf-8")))
        return 0
    file_mode = args[-1].lower() == "-f"
    target = args[1]
    try:
        if args[0].lower() == "-decode":
            if not file_mode:
                print("\n" + decode(target).decode("utf-8", errors="replace"))
            else:
                print("Decoding...")
                decode_file(target, target + ".Base64dO.txt")
        elif not file_mode:
            print("\n" + encode(target.encode("utf-8")))
        else:
            print("Encoding...")
            encode_file(target, target + ".Base64eO.txt")
            print("Done!")
    except OSError:
        return -1
    return 0


if __name__ == "__main__":
    sys.exit(main())