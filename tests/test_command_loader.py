import pytest

from breakout_arcade.color import Color
from breakout_arcade.command_loader import (
    Command,
    CommandType,
    FileCommandLoader,
    ParseFuncParams,
    read_char,
    read_color,
    read_int,
    read_size,
    read_string,
)
from breakout_arcade.vec2d import Vec2D


def _collect(name, command_type=CommandType.ONE_LINE):
    seen = []
    return Command(name, seen.append, command_type), seen


def _params_for(line, name):
    command, seen = _collect(name)
    FileCommandLoader([command]).load_lines([line])
    assert len(seen) == 1
    return seen[0]


def test_one_line_command_receives_line():
    command, seen = _collect("hp")
    loader = FileCommandLoader()
    loader.add_command(command)
    loader.load_lines([":hp 3\n"])
    assert len(seen) == 1
    assert seen[0].line == ":hp 3"
    assert seen[0].line_num == 0
    assert read_int(seen[0]) == 3


def test_unknown_and_plain_lines_are_ignored():
    command, seen = _collect("hp")
    FileCommandLoader([command]).load_lines([":foo 1", "hp 3", "", ":hpx 2"])
    assert seen == []


def test_command_without_value():
    command, seen = _collect("level")
    FileCommandLoader([command]).load_lines([":level", ":level"])
    assert len(seen) == 2


def test_multi_line_skips_blank_lines_and_numbers_body():
    layout, layout_seen = _collect("layout", CommandType.MULTI_LINE)
    hp, hp_seen = _collect("hp")
    loader = FileCommandLoader([layout, hp])
    loader.load_lines([":layout 2", "", "RR--", "", "-GG-", ":hp 1"])
    assert [p.line for p in layout_seen] == ["RR--", "-GG-"]
    assert [p.line_num for p in layout_seen] == [0, 1]
    assert len(hp_seen) == 1
    assert read_int(hp_seen[0]) == 1


def test_multi_line_missing_lines_raises():
    layout, _ = _collect("layout", CommandType.MULTI_LINE)
    with pytest.raises(ValueError):
        FileCommandLoader([layout]).load_lines([":layout 3", "RR", "GG"])


def test_multi_line_bad_count_raises():
    layout, _ = _collect("layout", CommandType.MULTI_LINE)
    with pytest.raises(ValueError):
        FileCommandLoader([layout]).load_lines([":layout many", "RR"])


def test_read_color():
    params = _params_for(":fillcolor 193 133 10 255", "fillcolor")
    assert read_color(params) == Color(193, 133, 10, 255)


def test_read_color_too_few_values():
    params = _params_for(":fillcolor 193 133", "fillcolor")
    with pytest.raises(ValueError):
        read_color(params)


def test_read_size():
    params = _params_for(":size 16 8", "size")
    assert read_size(params) == Vec2D(16, 8)


def test_read_string_keeps_spaces():
    params = _params_for(":key Hello world", "key")
    assert read_string(params) == "Hello world"


def test_read_char():
    params = _params_for(":symbol R", "symbol")
    assert read_char(params) == "R"


def test_read_char_without_value_raises():
    params = _params_for(":symbol", "symbol")
    with pytest.raises(ValueError):
        read_char(params)


def test_read_int_takes_leading_number():
    params = _params_for(":hp  12abc", "hp")
    assert read_int(params) == 12


def test_read_int_negative():
    params = _params_for(":hp -1", "hp")
    assert read_int(params) == -1


def test_read_int_rejects_text():
    params = ParseFuncParams(":hp abc", 3)
    with pytest.raises(ValueError):
        read_int(params)


def test_load_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(":width 16\n:height 8\n", encoding="utf-8")
    width, width_seen = _collect("width")
    height, height_seen = _collect("height")
    FileCommandLoader([width, height]).load_file(path)
    assert [read_int(p) for p in width_seen] == [16]
    assert [read_int(p) for p in height_seen] == [8]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileCommandLoader().load_file(tmp_path / "missing.txt")