import math

import pytest

from genesis_canvas.flags import DrawFlags
from genesis_canvas.host import Host, QuadCommand, set_host
from genesis_canvas.quad import (
    Quad,
    QuadShape,
    emit_rect,
    radians_to_degrees,
    to_f32,
    to_i32,
    to_u32,
)


@pytest.fixture
def host():
    h = Host(320, 180)
    set_host(h)
    return h


def test_to_i32_truncates():
    assert to_i32(3.9, 0) == 3
    assert to_i32(-3.9, 0) == -3
    assert to_i32(42, 0) == 42


@pytest.mark.parametrize("value", [2**31, -(2**31) - 1, float("nan"), float("inf")])
def test_to_i32_falls_back(value):
    assert to_i32(value, 7) == 7


def test_to_u32_rejects_negative():
    assert to_u32(-1, 9) == 9
    assert to_u32(3.5, 0) == 3
    assert to_u32(2**32, 11) == 11


def test_to_f32():
    assert to_f32(0.5, 1.0) == 0.5
    assert to_f32(1e300, 1.0) == 1.0
    assert math.isinf(to_f32(float("inf"), 1.0))


def test_non_numbers_rejected():
    with pytest.raises(TypeError):
        to_i32("x", 0)
    with pytest.raises(TypeError):
        to_u32(None, 0)


def test_radians_to_degrees():
    assert radians_to_degrees(math.pi) == 180
    assert radians_to_degrees(-math.pi / 2) == -90
    assert radians_to_degrees(float("nan")) == 0


def test_quad_defaults():
    q = Quad()
    assert q.color == 0xFFFFFFFF
    assert q.border_color == 0xFF000000
    assert q.opacity == 1.0
    assert not q.fixed and not q.absolute


def test_quad_offset():
    q = Quad(x=2, y=5)
    q.offset(-4, 10)
    assert (q.x, q.y) == (2 - 4, 5 + 10)


def test_shape_chain_returns_self():
    shape = QuadShape()
    assert shape.position(3.7, -2).offset(1, 1).color(0x11223344) is shape
    assert (shape.quad.x, shape.quad.y) == (to_i32(3.7, 0) + 1, -2 + 1)
    assert shape.quad.color == 0x11223344


def test_shape_xy_setters_match_pairwise():
    a = QuadShape().position_xy((8, 9)).origin_xy((1, 2))
    b = QuadShape().position(8, 9).origin(1, 2)
    assert a.quad == b.quad


def test_shape_out_of_range_keeps_previous():
    shape = QuadShape().position_x(10).position_x(2**40)
    assert shape.quad.x == 10
    shape.offset_y(float("nan"))
    assert shape.quad.y == 0


def test_shape_flags_and_opacity():
    shape = QuadShape().fixed(True).absolute(True).opacity(0.25).border_size(3)
    assert shape.quad.fixed and shape.quad.absolute
    assert shape.quad.opacity == 0.25
    assert shape.quad.border_size == 3


def test_emit_rect(host):
    emit_rect(0xAABBCCDD, -5, 7, 10, 20, 3, 1, 0xFF000000, -2, 4, 45, DrawFlags.POSITION_FIXED)
    cmd = host.commands[-1]
    assert isinstance(cmd, QuadCommand)
    assert (cmd.dest_x, cmd.dest_y, cmd.dest_w, cmd.dest_h) == (-5, 7, 10, 20)
    assert (cmd.fill_a, cmd.fill_b) == (0xAABBCCDD, 0)
    assert (cmd.origin_x, cmd.origin_y) == (-2, 4)
    assert cmd.sprite_xy == 0 and cmd.sprite_wh == 0
    assert cmd.rotation_deg == 45
    assert cmd.flags == DrawFlags.POSITION_FIXED