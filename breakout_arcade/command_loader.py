"""Loader for the line-based ``:command value`` text files used for assets."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator

from .color import Color
from .vec2d import Vec2D

_INT_RE = re.compile(r"\s*([+-]?\d+)")


class CommandType(Enum):
    ONE_LINE = 0
    MULTI_LINE = 1


@dataclass(frozen=True)
class ParseFuncParams:
    """What a command handler receives: the line, where its value starts, and
    for multi-line commands the index of the body line."""

    line: str
    delimit_pos: int
    line_num: int = 0


@dataclass
class Command:
    command: str
    parse_function: Callable[[ParseFuncParams], None]
    command_type: CommandType = CommandType.ONE_LINE


def _parse_int(text: str) -> int:
    """Leading integer of ``text`` after optional whitespace."""
    match = _INT_RE.match(text)
    if match is None:
        raise ValueError(f"expected an integer in {text!r}")
    return int(match.group(1))


class FileCommandLoader:
    """Dispatches ``:name`` lines of a text file to registered commands."""

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        self._commands = list(commands)

    def add_command(self, command: Command) -> None:
        self._commands.append(command)

    def load_file(self, file_path: str | os.PathLike[str]) -> None:
        """Parse the file at ``file_path``; raises OSError if it cannot be read."""
        with open(file_path, encoding="utf-8") as handle:
            self.load_lines(handle)

    def load_lines(self, lines: Iterable[str]) -> None:
        """Parse an iterable of text lines."""
        stream: Iterator[str] = (line.rstrip("\r\n") for line in lines)
        for line in stream:
            command_pos = line.find(":")
            if command_pos < 0:
                continue
            space_pos = line.find(" ", command_pos)
            delimit_pos = len(line) if space_pos < 0 else space_pos - 1
            name = line[command_pos + 1 : command_pos + 1 + delimit_pos]
            delimit_pos += 1

            for command in self._commands:
                if command.command != name:
                    continue
                if command.command_type is CommandType.ONE_LINE:
                    command.parse_function(ParseFuncParams(line, delimit_pos, 0))
                else:
                    self._run_multi_line(command, line, delimit_pos, stream)

    @staticmethod
    def _run_multi_line(
        command: Command, header: str, delimit_pos: int, stream: Iterator[str]
    ) -> None:
        total = _parse_int(header[delimit_pos + 1 :])
        line_num = 0
        while line_num < total:
            try:
                line = next(stream)
            except StopIteration:
                raise ValueError(
                    f"command {command.command!r} expects {total} lines, found {line_num}"
                ) from None
            if not line:
                continue
            command.parse_function(ParseFuncParams(line, delimit_pos, line_num))
            line_num += 1


def _read_ints(params: ParseFuncParams, count: int) -> list[int]:
    tokens = params.line[params.delimit_pos :].split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} values in {params.line!r}")
    return [_parse_int(token) for token in tokens[:count]]


def read_color(params: ParseFuncParams) -> Color:
    """Read ``r g b a`` as a Color."""
    red, green, blue, alpha = _read_ints(params, 4)
    return Color(red, green, blue, alpha)


def read_size(params: ParseFuncParams) -> Vec2D:
    """Read ``width height`` as a vector."""
    width, height = _read_ints(params, 2)
    return Vec2D(float(width), float(height))


def read_int(params: ParseFuncParams) -> int:
    return _parse_int(params.line[params.delimit_pos + 1 :])


def read_string(params: ParseFuncParams) -> str:
    return params.line[params.delimit_pos + 1 :]


def read_char(params: ParseFuncParams) -> str:
    text = params.line[params.delimit_pos + 1 :]
    if not text:
        raise ValueError(f"expected a character in {params.line!r}")
    return text[0]