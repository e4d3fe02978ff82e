"""Base128 and Base64 codecs, XOR of files, TEA, a UTF-8 table writer,
decimal addition, text reversal and a snake game."""

__version__ = "0.1.0"
__all__ = [
    "base128",
    "base64codec",
    "xorfile",
    "tea",
    "unicode_table",
    "bigdecimal",
    "snake",
    "textrev",
]