import pytest

from spritec import (
    BitsPerPixel,
    PairMismatchError,
    SheetError,
    compile_sheet,
    parse_sheet,
    text_sprite,
)

SHEET = """\
# demo sheet
@sprite grid
    0011
    2233

@sprite bad
    0011
    01
"""

GOOD_SHEET = """\
# two sprites

@sprite grid
    0011
    2233

@sprite dot
    ....
    ..##

"""


def test_parse_headers():
    sources = parse_sheet(GOOD_SHEET)
    assert [s.name for s in sources] == ["grid", "dot"]
    assert sources[0].text == "\n    0011\n    2233\n"
    assert sources[0].first_line == 4
    assert sources[1].first_line == 8


def test_compile_sheet_in_order():
    sprites = compile_sheet(GOOD_SHEET)
    assert list(sprites) == ["grid", "dot"]
    assert sprites["grid"] == text_sprite("\n0011\n2233\n")
    assert sprites["dot"].shape == (2, 2)
    assert sprites["dot"].bpp == BitsPerPixel.ONE


def test_error_lines_refer_to_sheet():
    with pytest.raises(PairMismatchError) as exc:
        compile_sheet(SHEET)
    assert exc.value.line == 8
    assert exc.value.column == 6
    assert exc.value.sprite == "bad"


def test_headerless_file_is_one_sprite():
    sources = parse_sheet("0011\n2233\n", default_name="grid")
    assert len(sources) == 1
    assert sources[0].name == "grid"
    assert sources[0].text == "\n0011\n2233\n"

    sprites = compile_sheet("0011\n2233", default_name="grid")
    assert sprites["grid"].data == b"\x1b"


def test_headerless_error_line():
    with pytest.raises(PairMismatchError) as exc:
        compile_sheet("0011\n01\n", default_name="x")
    assert exc.value.line == 2


def test_blank_lines_around_body():
    sprites = compile_sheet("@sprite a\n\n\n  0011\n\n")
    assert sprites["a"].shape == (2, 1)
    assert parse_sheet("@sprite a\n\n\n  0011\n\n")[0].first_line == 4


def test_duplicate_names():
    with pytest.raises(SheetError, match="duplicate sprite name 'a'"):
        parse_sheet("@sprite a\n00\n@sprite a\n00\n")


def test_content_before_header():
    with pytest.raises(SheetError, match="content before"):
        parse_sheet("0011\n@sprite a\n00\n")


def test_invalid_names():
    with pytest.raises(SheetError, match="invalid sprite name"):
        parse_sheet("@sprite 9lives\n00\n")
    with pytest.raises(SheetError, match="missing sprite name"):
        parse_sheet("@sprite\n00\n")
    with pytest.raises(SheetError):
        parse_sheet("0011\n", default_name="not-a-name")


def test_keyword_names_rejected():
    for name in ("class", "if", "None"):
        with pytest.raises(SheetError, match="invalid sprite name"):
            parse_sheet(f"@sprite {name}\n0011\n")
    with pytest.raises(SheetError, match="invalid sprite name 'def'"):
        parse_sheet("0011\n", default_name="def")


def test_crlf_lines():
    sources = parse_sheet("@sprite grid\r\n    0011\r\n    2233\r\n")
    assert sources[0].text == "\n    0011\n    2233\n"
    assert compile_sheet("0011\r\n2233\r\n", default_name="grid")["grid"].data == b"\x1b"


def test_only_newline_splits_lines():
    sources = parse_sheet("@sprite a\n00\x0c11\n22 33\n")
    assert len(sources) == 1
    assert sources[0].text == "\n00\x0c11\n22 33\n"
    with pytest.raises(PairMismatchError):
        compile_sheet("@sprite a\n00\x0c11\n")
