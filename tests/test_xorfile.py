import pytest

from bytecraft.xorfile import (
    file_size,
    main,
    parse_key_bytes,
    size_main,
    two_files_main,
    xor_bytes,
    xor_file,
    xor_files,
)


def _sample(n, seed=3):
    return bytes((i * 29 + seed) % 256 for i in range(n))


def test_file_size(tmp_path):
    path = tmp_path / "f"
    path.write_bytes(_sample(1234))
    assert file_size(path) == 1234


def test_parse_key_bytes():
    assert parse_key_bytes("1, 2,3") == bytes([1, 2, 3])


def test_parse_key_bytes_negative_wraps():
    assert parse_key_bytes("-1") == b"\xff"


def test_parse_key_bytes_garbage_is_zero():
    assert parse_key_bytes("x,7") == bytes([0, 7])


def test_xor_bytes_cycles_key():
    assert xor_bytes(bytes(3), b"ab") == b"aba"


def test_xor_bytes_is_involution():
    data = _sample(777)
    key = b"k3y"
    assert xor_bytes(xor_bytes(data, key), key) == data


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        xor_bytes(b"abc", b"")


@pytest.mark.parametrize("size", [0, 5, 1024, 5000])
def test_xor_file_matches_xor_bytes(tmp_path, size):
    src, dest, back = tmp_path / "s", tmp_path / "d", tmp_path / "b"
    data = _sample(size)
    src.write_bytes(data)
    assert xor_file(src, dest, b"abc") == size
    assert dest.read_bytes() == xor_bytes(data, b"abc")
    xor_file(dest, back, b"abc")
    assert back.read_bytes() == data


def test_xor_files_pads_shorter(tmp_path):
    first, second, dest = tmp_path / "1", tmp_path / "2", tmp_path / "o"
    long_data, short_data = _sample(3000, 1), _sample(1500, 9)
    first.write_bytes(long_data)
    second.write_bytes(short_data)
    assert xor_files(first, second, dest) == 3000
    result = dest.read_bytes()
    assert len(result) == 3000
    recovered = bytes(a ^ b for a, b in zip(result, long_data))
    assert recovered == short_data + bytes(1500)


def test_two_files_main(tmp_path):
    first, second, dest = tmp_path / "1", tmp_path / "2", tmp_path / "o"
    first.write_bytes(b"abc")
    second.write_bytes(b"abc")
    assert two_files_main([str(first), str(second), str(dest)]) == 0
    assert dest.read_bytes() == bytes(3)


def test_two_files_main_missing(tmp_path, capsys):
    args = [str(tmp_path / "nope"), str(tmp_path / "x"), str(tmp_path / "o")]
    assert two_files_main(args) == -1
    assert "1.fopen error" in capsys.readouterr().out


def test_two_files_main_wrong_arguments():
    assert two_files_main(["only"]) == 1


def test_size_main(tmp_path, capsys):
    path = tmp_path / "f"
    path.write_bytes(_sample(42))
    assert size_main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "42"


def test_size_main_missing(tmp_path, capsys):
    assert size_main([str(tmp_path / "missing")]) == -1
    assert "open file failed." in capsys.readouterr().out


def test_main_key_text(tmp_path):
    src, dest = tmp_path / "s", tmp_path / "d"
    data = _sample(2048)
    src.write_bytes(data)
    assert main([str(src), str(dest), "-keyText", "abc"]) == 0
    assert dest.read_bytes() == xor_bytes(data, b"abc")


def test_main_key_bytes_in_place(tmp_path, capsys):
    path = tmp_path / "s"
    data = _sample(100)
    path.write_bytes(data)
    assert main([str(path), "-keyBytes", "1,2,255"]) == 0
    assert path.read_bytes() == xor_bytes(data, bytes([1, 2, 255]))
    assert "key: [1,2,-1]" in capsys.readouterr().out


def test_main_usage(capsys):
    assert main(["a"]) == 80
    assert "FileDoXor" in capsys.readouterr().out