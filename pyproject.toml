[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytecraft"
version = "0.1.0"
description = "Byte-level tools: Base128 and Base64 codecs, XOR of files, TEA, a UTF-8 table writer, decimal addition, text reversal and a terminal snake game"
requires-python = ">=3.10"
dependencies = []
keywords = ["base128", "base64", "xor", "tea", "utf-8", "encoding", "snake"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bytecraft-base128 = "bytecraft.base128:main"
bytecraft-base64 = "bytecraft.base64codec:main"
bytecraft-xor = "bytecraft.xorfile:main"
bytecraft-xor2 = "bytecraft.xorfile:two_files_main"
bytecraft-size = "bytecraft.xorfile:size_main"
bytecraft-unicode = "bytecraft.unicode_table:main"
bytecraft-snake = "bytecraft.snake:main"
bytecraft-reverse = "bytecraft.textrev:main"

[tool.hatch.build.targets.wheel]
packages = ["bytecraft"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
