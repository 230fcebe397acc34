import pytest

from genesis_canvas.host import Host, TextCommand, set_host
from genesis_canvas.sprite_data import SpriteSourceData, encode_sprite_data
from genesis_canvas.text_utils import emit_text, measure


@pytest.fixture
def host():
    h = Host(320, 180)
    set_host(h)
    h.set_sprite_data(
        encode_sprite_data(
            {
                "font_f_a": SpriteSourceData(4, 6),
                "font_f_b": SpriteSourceData(3, 8),
                "font_f_ ": SpriteSourceData(5, 6),
            }
        )
    )
    return h


def test_emit_text(host):
    emit_text("large", "score", 3, 4, 0xFF00FFFF, 2.0, 0.5, 2)
    assert host.commands[-1] == TextCommand(3, 4, 0xFF00FFFF, 2.0, 0.5, "large", "score", 2)


def test_single_glyph(host):
    assert measure("f", 1.0, "a") == (4.0, 6.0)


def test_widths_add_heights_max(host):
    width, height = measure("f", 1.0, "ab")
    assert width == measure("f", 1.0, "a")[0] + measure("f", 1.0, "b")[0]
    assert height == max(measure("f", 1.0, "a")[1], measure("f", 1.0, "b")[1])


def test_lines(host):
    one = measure("f", 1.0, "ab")
    two = measure("f", 1.0, "ab\na")
    assert two[0] == one[0]
    assert two[1] == 2 * one[1]


def test_trailing_newline_adds_no_line(host):
    assert measure("f", 1.0, "a\n") == measure("f", 1.0, "a")


def test_scale_multiplies(host):
    base = measure("f", 1.0, "ab a")
    assert measure("f", 2.0, "ab a") == (base[0] * 2, base[1] * 2)


def test_tab_uses_space(host):
    assert measure("f", 1.0, "\t") == measure("f", 1.0, " ")


def test_unknown_glyphs_and_empty(host):
    assert measure("f", 1.0, "") == (0.0, 0.0)
    assert measure("f", 1.0, "zzz") == (0.0, 0.0)
    assert measure("other", 1.0, "ab") == (0.0, 0.0)