import pytest

from bytecraft.textrev import format_reversed, main, reverse_text, truncate

MIXED = "abc哈哈真完美!！。。"


def test_reverse_mixed_text():
    result = reverse_text(MIXED)
    assert result[0] == "。"
    assert result[-1] == "a"
    assert reverse_text(result) == MIXED
    assert sorted(result) == sorted(MIXED)


def test_reverse_empty():
    assert reverse_text("") == ""


def test_truncate_first_ascii_char():
    assert truncate("a完美bc", 1) == "a"


def test_truncate_never_splits_wide_char():
    assert truncate("完美", 1) == "完"
    assert truncate("abc哈哈", 4) == "abc哈"


def test_truncate_whole_text_when_wide_enough():
    assert truncate(MIXED, 100) == MIXED
    assert truncate("abc", 3) == "abc"


@pytest.mark.parametrize("count", [1, 2, 3, 4, 5, 8, 12, 16, 20, 24])
def test_truncate_is_prefix(count):
    result = truncate(MIXED, count)
    assert MIXED.startswith(result)
    assert len(result) >= 1


def test_truncate_nothing():
    assert truncate("abc", 0) == ""


def test_format_default():
    assert format_reversed(["abc", "de"]) == "cba\ned\n"


def test_format_per_char():
    assert format_reversed(["abc"], "ml") == "c\nb\na\n\n"


def test_format_flat():
    assert format_reversed(["ab", "cd"], "l") == "badc"


def test_format_invalid_mode():
    with pytest.raises(ValueError):
        format_reversed(["ab"], "x")


def test_main_conflicting_flags(capsys):
    assert main(["-l", "-ml", "abc"]) == 0
    assert capsys.readouterr().out.strip() == "-l和-ml不能同时使用"


def test_main_flat(capsys):
    assert main(["ab", "-l", "cd"]) == 0
    assert capsys.readouterr().out == "badc"


def test_main_default(capsys):
    assert main(["哈a"]) == 0
    assert capsys.readouterr().out == "a哈\n"


def test_main_help(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("字符倒序排列")