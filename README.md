# bytecraft

bytecraft is a set of small byte-level tools. Most of them work both as
Python functions and as console commands.

- **Base128** (`bytecraft.base128`): packs every 7 bytes into 8 seven-bit
  bytes. An encoded stream starts with an 8-byte header. The header holds
  the input length modulo 7, four zero bytes and the marker `zhc`.
- **Base64** (`bytecraft.base64codec`): uses the standard alphabet with `=`
  padding. Works on strings and on files.
- **XOR** (`bytecraft.xorfile`): XORs a file with a repeating key, XORs two
  files into a third, and reports file sizes.
- **TEA** (`bytecraft.tea`): the Tiny Encryption Algorithm on blocks of two
  32-bit words, with a key of four 32-bit words.
- **UTF-8 table** (`bytecraft.unicode_table`): writes every code point from
  0 to U+10FFFF as UTF-8, surrogates included.
- **Decimal addition** (`bytecraft.bigdecimal`): adds non-negative decimal
  strings exactly.
- **Snake** (`bytecraft.snake`): a snake game on a 12×12 board.
- **Text reversal** (`bytecraft.textrev`): reverses text character by
  character and cuts text to a display width.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
bytecraft-base128 -encode FILE [DEST]
bytecraft-base128 -decode FILE [DEST]
```

Encodes or decodes with Base128. If `DEST` is left out, the result
replaces `FILE`. The first argument is matched case-insensitively, and
anything other than `-decode` encodes. If the input lacks the Base128
header, decoding prints `not Base128 encoded` and exits with status -2.

```
bytecraft-base64 TEXT
bytecraft-base64 -encode TEXT
bytecraft-base64 -decode TEXT
bytecraft-base64 -encode FILE -f
bytecraft-base64 -decode FILE -f
```

Without `-f`, the argument is treated as text. It is encoded, or decoded
with `-decode`, and the result is printed. With `-f` as the last argument,
the argument is treated as a file. The result goes to `FILE.Base64eO.txt`
when encoding and to `FILE.Base64dO.txt` when decoding.

```
bytecraft-xor FILE DEST -keyText TEXT
bytecraft-xor FILE DEST -keyBytes 1,2,3
bytecraft-xor FILE -keyBytes 1,2,3
```

XORs `FILE` with a repeating key and writes the result to `DEST`. Without
`DEST`, `FILE` is overwritten with the result. With `-keyText`, the key is
the UTF-8 bytes of the text. With `-keyBytes`, the key is a
comma-separated list of integers, each taken modulo 256. The key is
printed before any work is done.

```
bytecraft-xor2 FIRST SECOND DEST
```

XORs two files into `DEST`. The shorter file is padded with zero bytes.

```
bytecraft-size FILE
```

Prints the size of `FILE` in bytes.

```
bytecraft-unicode [PATH]
```

Writes the UTF-8 table to `PATH`. The default is `./unicode.txt`.

```
bytecraft-snake
```

Reads moves from standard input, one per line: `w` (up), `a` (left),
`s` (down) or `d` (right), in either case. After each line the board is
printed. Eating `$` makes the snake one cell longer. The game ends when
the snake runs into a wall (`*`) or into its own body (`X`), or when
input runs out.

```
bytecraft-reverse [-ml | -l] TEXT...
```

Reverses each argument. By default each result goes on its own line.
With `-ml`, each character goes on its own line and a blank line follows
each argument. With `-l`, everything is joined with no separators.
`-ml` and `-l` cannot be used together.

## Library use

```python
from bytecraft import base128, base64codec, xorfile, tea, bigdecimal, textrev

packed = base128.encode_bytes(b"hello, world")
assert base128.decode_bytes(packed) == b"hello, world"

assert base64codec.decode(base64codec.encode(b"abc")) == b"abc"

key = xorfile.parse_key_bytes("1,2,3")
assert xorfile.xor_bytes(xorfile.xor_bytes(b"data", key), key) == b"data"

block = tea.encrypt((1234567890, 1234567891), (1, 2, 3, 4))
assert tea.decrypt(block, (1, 2, 3, 4)) == (1234567890, 1234567891)
assert tea.hex_to_int("ff") == 255

assert bigdecimal.add("1.5", "2.75") == "4.25"

assert textrev.reverse_text("abc完美") == "美完cba"
assert textrev.truncate("a完美", 2) == "a完"
```

More functions:

- `base128`: `encode_block`, `decode_block`, `encode_file(src, dest)`,
  `decode_file(src, dest)` and `new_file_name(path)`. `new_file_name`
  returns the first free name of the form `"path (2)"`, `"path (3)"` and so
  on. Decoding data without the header raises `base128.NotBase128Error`.
- `base64codec`: `encode_file(src, dest)` and `decode_file(src, dest)`.
- `xorfile`: `xor_file(src, dest, key)`, `xor_files(first, second, dest)`
  and `file_size(path)`. An empty key raises `ValueError`.
- `unicode_table`: `utf8_size(codepoint)`, `encode_codepoint(codepoint)`
  and `write_table(path)`.
- `textrev`: `format_reversed(texts, mode)`, where `mode` is `"default"`,
  `"ml"` or `"l"`.

The snake game can be driven without a terminal. Create
`snake.SnakeGame(rng)`. The `rng` argument is optional and may be any
object with a `random()` method, such as `random.Random(seed)`. Call
`step(key)` to move, and `render()` to get the board as text. The `body`,
`head` and `food` attributes hold the current state. A losing move raises
`snake.GameOver`.

## What it does not do

- `bigdecimal.add` accepts only non-negative numbers. There is no
  subtraction, multiplication or division.
- `tea` works on a single pair of 32-bit words. It has no mode for
  encrypting whole files or byte strings, and no command.
- The snake game reads whole lines from standard input. It does not
  react to single key presses.