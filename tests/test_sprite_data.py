import pytest

from genesis_canvas.host import Host, QuadCommand, set_host
from genesis_canvas.sprite_data import (
    SpriteAnimationDirection,
    SpriteAnimationFrame,
    SpriteDataError,
    SpriteSourceData,
    decode_sprite_data,
    emit_sprite,
    encode_sprite_data,
    get_frame_index,
    get_source_data,
    get_source_data_nonce,
)


@pytest.fixture
def host():
    h = Host(320, 180)
    set_host(h)
    return h


def _sprites():
    return {
        "hero": SpriteSourceData(
            16,
            24,
            2,
            SpriteAnimationDirection.PING_PONG,
            [SpriteAnimationFrame(0, 0, 100.0), SpriteAnimationFrame(16, 0, 50.0)],
        ),
        "coin": SpriteSourceData(8, 8),
    }


def test_round_trip():
    sprites = _sprites()
    assert decode_sprite_data(encode_sprite_data(sprites)) == sprites


def test_wire_bytes():
    encoded = encode_sprite_data({"a": SpriteSourceData(width=1, height=2)})
    expected = bytes.fromhex("01000000" "01000000" "61" "01000000" "02000000" "00000000" "00" "00000000")
    assert encoded == expected


def test_keys_are_sorted():
    decoded = decode_sprite_data(encode_sprite_data(_sprites()))
    assert list(decoded) == sorted(decoded)


def test_trailing_bytes_ignored():
    sprites = _sprites()
    assert decode_sprite_data(encode_sprite_data(sprites) + bytes(32)) == sprites


def test_truncated_data_raises():
    encoded = encode_sprite_data(_sprites())
    with pytest.raises(SpriteDataError):
        decode_sprite_data(encoded[:-3])


def test_invalid_direction_raises():
    name = "a"
    encoded = bytearray(encode_sprite_data({name: SpriteSourceData()}))
    encoded[4 + 4 + len(name) + 12] = 9
    with pytest.raises(SpriteDataError):
        decode_sprite_data(bytes(encoded))


def test_get_source_data_from_host(host):
    sprites = _sprites()
    host.set_sprite_data(encode_sprite_data(sprites))
    assert get_source_data("hero") == sprites["hero"]
    assert get_source_data("missing") is None
    assert get_source_data_nonce() == host.sprite_data_nonce()


def test_bad_update_keeps_previous(host):
    sprites = _sprites()
    host.set_sprite_data(encode_sprite_data(sprites))
    assert get_source_data("coin") == sprites["coin"]
    good_nonce = get_source_data_nonce()
    host.set_sprite_data(b"\x01")
    assert get_source_data("coin") == sprites["coin"]
    assert get_source_data_nonce() == good_nonce


def test_frame_index_advances(host):
    frames = [SpriteAnimationFrame(0, 0, 100.0)] * 3
    data = SpriteSourceData(8, 8, animation_frames=frames)
    assert get_frame_index(data, 1.0) == 0
    host.advance(9)
    assert get_frame_index(data, 1.0) == 1


def test_frame_index_in_range(host):
    data = SpriteSourceData(8, 8, animation_frames=[SpriteAnimationFrame(0, 0, 70.0)] * 4)
    for _ in range(100):
        host.advance(1)
        assert 0 <= get_frame_index(data, 1.5) < len(data.animation_frames)


def test_frame_index_without_frames(host):
    host.advance(30)
    assert get_frame_index(SpriteSourceData(), 1.0) == 0


def test_emit_sprite(host):
    emit_sprite(-3, 4, 16, 24, 32, 48, -16, 24, 1, -2, 0xFFFFFFFF, 0x11223344, 0, 0, 0, 5, 6, 30, 2)
    cmd = host.commands[-1]
    assert isinstance(cmd, QuadCommand)
    assert (cmd.dest_x, cmd.dest_y, cmd.dest_w, cmd.dest_h) == (-3, 4, 16, 24)
    assert (cmd.sprite_x, cmd.sprite_y, cmd.sprite_w, cmd.sprite_h) == (32, 48, -16, 24)
    assert (cmd.texture_x, cmd.texture_y) == (1, -2)
    assert (cmd.fill_a, cmd.fill_b) == (0x11223344, 0xFFFFFFFF)
    assert (cmd.origin_x, cmd.origin_y) == (5, 6)