"""
Sprite Sheets
=============
Several named sprite definitions in one text file.

Format:
    # comments and blank lines are allowed before the first header
    @sprite smiley
        ....▒▒▒▒▒▒▒▒....
        ..▒▒▒▒▒▒▒▒▒▒▒▒..
    @sprite grid
        0011
        2233

Each ``@sprite NAME`` line opens a sprite whose body runs to the next
header or the end of the file. Blank lines around a body are dropped.
A file without any header holds a single sprite.

Line numbers in errors refer to the sheet file, not the sprite body.
"""

import keyword
import re

from .compiler import sprite_builder
from .errors import SheetError, SpriteError

_HEADER_RE = re.compile(r"^\s*@sprite(?:\s+(\S+))?\s*$")
_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _check_name(name, lineno=None):
    if not _NAME_RE.match(name) or keyword.iskeyword(name):
        raise SheetError(f"invalid sprite name '{name}'", lineno)


class SpriteSource:
    """
    One sprite definition taken from a sheet.

    Attributes:
        name: Sprite name (a Python identifier)
        text: Sprite text, including the mandatory leading newline
        first_line: Sheet line holding the first body row
    """

    __slots__ = ("name", "text", "first_line")

    def __init__(self, name: str, text: str, first_line: int):
        self.name = name
        self.text = text
        self.first_line = first_line

    @property
    def line_offset(self) -> int:
        # Body row 1 sits on text line 2, after the leading newline
        return self.first_line - 2

    def __repr__(self):
        return f"SpriteSource({self.name!r}, line {self.first_line})"


def _close(name, header_line, body, sources, seen):
    if name in seen:
        raise SheetError(f"duplicate sprite name '{name}'", header_line)
    seen.add(name)

    first_line = header_line + 1
    while body and not body[0].strip():
        body.pop(0)
        first_line += 1
    while body and not body[-1].strip():
        body.pop()

    sources.append(SpriteSource(name, "\n" + "".join(body), first_line))


def parse_sheet(text: str, default_name: str = None) -> list:
    """
    Split a sheet into sprite sources.

    Args:
        text: Sheet contents
        default_name: Name for a headerless single-sprite file

    Returns:
        List of SpriteSource in file order

    Raises:
        SheetError: On malformed headers, stray content or duplicate names
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    lines = [(line[:-1] if line.endswith("\r") else line) + "\n" for line in lines]

    if not any(_HEADER_RE.match(line) for line in lines):
        name = default_name or "sprite"
        _check_name(name)
        sources = []
        _close(name, 0, list(lines), sources, set())
        return sources

    sources = []
    seen = set()
    name = None
    body = []
    header_line = 0

    for lineno, line in enumerate(lines, 1):
        match = _HEADER_RE.match(line)
        if match:
            if name is not None:
                _close(name, header_line, body, sources, seen)
            name = match.group(1)
            if name is None:
                raise SheetError("missing sprite name after @sprite", lineno)
            _check_name(name, lineno)
            body = []
            header_line = lineno
            continue

        if name is None:
            stripped = line.strip()
            if stripped and not stripped.startswith("#"):
                raise SheetError("content before the first @sprite header", lineno)
            continue

        body.append(line)

    _close(name, header_line, body, sources, seen)
    return sources


def compile_sources(sources, align_tail: bool = False) -> dict:
    """
    Compile parsed sources into an ordered {name: Sprite} dict.

    Raises:
        SpriteError: On the first sprite that fails to compile; the error
            gains a ``sprite`` attribute naming it
    """
    sprites = {}
    for source in sources:
        try:
            sprites[source.name] = sprite_builder(
                source.text, align_tail=align_tail, line_offset=source.line_offset)
        except SpriteError as e:
            e.sprite = source.name
            raise
    return sprites


def compile_sheet(text: str, default_name: str = None, align_tail: bool = False) -> dict:
    """Parse and compile a whole sheet into {name: Sprite}, in file order."""
    return compile_sources(parse_sheet(text, default_name=default_name), align_tail=align_tail)
