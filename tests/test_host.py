import pytest

from genesis_canvas.host import (
    ClearCommand,
    Host,
    QuadCommand,
    TextCommand,
    camera_offset,
    clear,
    get_host,
    get_shader,
    reset_shader,
    resolution,
    set_host,
    set_shader,
)


@pytest.fixture
def host():
    h = Host(320, 180)
    set_host(h)
    return h


def test_resolution(host):
    assert host.resolution() == (320, 180)
    assert resolution() == (320, 180)


def test_get_host_returns_set_host(host):
    assert get_host() is host


@pytest.mark.parametrize("size", [(70000, 10), (10, -1)])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        Host(*size)


def test_clear_records_command(host):
    clear(0x112233FF)
    assert host.commands == [ClearCommand(0x112233FF)]


def test_draw_quad_unpacks_fields(host):
    host.draw_quad((5 << 32) | 7, (10 << 32) | 20, 0, 0, 0, 0, 1, 2, 3, 0, 90, 4)
    cmd = host.commands[-1]
    assert isinstance(cmd, QuadCommand)
    assert (cmd.dest_x, cmd.dest_y, cmd.dest_w, cmd.dest_h) == (5, 7, 10, 20)
    assert cmd.rotation_deg == 90


def test_draw_quad_signed_coordinates(host):
    host.draw_quad((0xFFFFFFFF << 32) | 0xFFFFFFFE, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
    cmd = host.commands[-1]
    assert (cmd.dest_x, cmd.dest_y) == (-1, -2)


def test_draw_text_records(host):
    host.draw_text(1, 2, 0xFFFFFFFF, 1.5, 0.0, "large", "hi", 2)
    assert host.commands == [TextCommand(1, 2, 0xFFFFFFFF, 1.5, 0.0, "large", "hi", 2)]


def test_clock(host):
    start = host.tick()
    host.advance(3)
    assert host.tick() == start + 3
    with pytest.raises(ValueError):
        host.advance(-1)


def test_camera_offset(host):
    host.move_camera(100, 50)
    assert camera_offset() == (100 - 160, 50 - 90)


def test_sprite_data_bumps_nonce(host):
    before = host.sprite_data_nonce()
    host.set_sprite_data(b"\x00\x00\x00\x00")
    assert host.sprite_data_nonce() == before + 1
    assert host.sprite_data() == b"\x00\x00\x00\x00"


def test_shader_round_trip(host):
    assert get_shader() == ""
    set_shader("crt")
    assert get_shader() == "crt"
    reset_shader()
    assert get_shader() == ""