import pytest

from spritec.errors import (
    EmptySpriteError,
    PairMismatchError,
    RowWidthError,
    UnterminatedRowError,
)
from spritec.scan import GridState, PairState, decode_first


def test_decode_ascii():
    assert decode_first(b"A") == (1, 0x41)
    assert decode_first(b"\n") == (1, 0x0A)


def test_decode_multibyte():
    assert decode_first("é".encode("utf-8")) == (2, 0xE9)
    assert decode_first("▒".encode("utf-8")) == (3, 0x2592)
    assert decode_first("😀".encode("utf-8")) == (4, 0x1F600)


def test_decode_at_offset():
    data = "a▒b".encode("utf-8")
    assert decode_first(data, 1) == (3, ord("▒"))
    assert decode_first(data, 4) == (1, ord("b"))


def test_decode_walks_whole_string():
    text = "x█y😀z\n"
    data = text.encode("utf-8")
    offset = 0
    out = []
    while offset < len(data):
        size, cp = decode_first(data, offset)
        offset += size
        out.append(chr(cp))
    assert "".join(out) == text


@pytest.mark.parametrize("lead", [0x80, 0xBF, 0xF8, 0xFF])
def test_decode_rejects_bad_lead_byte(lead):
    with pytest.raises(ValueError, match="invalid UTF-8 leading byte"):
        decode_first(bytes([lead, 0x80, 0x80, 0x80]))


def test_grid_pairs_and_rows():
    grid = GridState()
    assert grid.on_glyph(ord("a")) is None
    assert grid.state == PairState.EXPECT_END
    assert grid.on_glyph(ord("a")) == ord("a")
    assert grid.state == PairState.EXPECT_START
    grid.on_blank()
    assert grid.on_glyph(ord("b")) is None
    assert grid.on_glyph(ord("b")) == ord("b")
    grid.on_newline()

    assert grid.width == 2
    assert grid.height == 1
    assert grid.current_width == 0
    grid.finish()
    assert grid.pixel_count == 2


def test_grid_first_row_sets_width():
    grid = GridState()
    grid.on_glyph(1)
    grid.on_glyph(1)
    grid.on_newline()
    grid.on_glyph(1)
    grid.on_glyph(1)
    grid.on_glyph(1)
    grid.on_glyph(1)
    with pytest.raises(RowWidthError):
        grid.on_newline()


def test_grid_mismatch_position():
    grid = GridState(line=5)
    grid.on_blank()
    grid.on_glyph(1)
    with pytest.raises(PairMismatchError) as exc:
        grid.on_glyph(2)
    assert exc.value.line == 5
    assert exc.value.column == 3


def test_grid_newline_with_pending_glyph():
    grid = GridState()
    grid.on_glyph(1)
    with pytest.raises(PairMismatchError):
        grid.on_newline()


def test_grid_finish_requires_rows():
    grid = GridState()
    grid.on_blank()
    with pytest.raises(EmptySpriteError):
        grid.finish()


def test_grid_finish_requires_terminated_row():
    grid = GridState()
    grid.on_glyph(1)
    grid.on_glyph(1)
    grid.on_newline()
    grid.on_glyph(1)
    grid.on_glyph(1)
    with pytest.raises(UnterminatedRowError):
        grid.finish()


def test_pair_state_names():
    assert PairState.name(PairState.EXPECT_START) == "EXPECT_START"
    assert PairState.name(7) == "UNKNOWN(7)"
