import pytest

from genesis_canvas.colors import apply_opacity


def test_full_opacity_keeps_color():
    assert apply_opacity(0x12345678, 1.0) == 0x12345678


def test_zero_opacity_clears_alpha_only():
    color = 0x12345678
    result = apply_opacity(color, 0.0)
    assert result & 0xFF == 0
    assert result & 0xFFFFFF00 == color & 0xFFFFFF00


@pytest.mark.parametrize("color", [0xFFFFFFFF, 0x000000FF, 0xABCDEF80])
def test_opacity_is_clamped(color):
    assert apply_opacity(color, 2.5) == apply_opacity(color, 1.0)
    assert apply_opacity(color, -3.0) == apply_opacity(color, 0.0)


def test_alpha_grows_with_opacity():
    alphas = [apply_opacity(0xFFFFFFFF, step / 10) & 0xFF for step in range(11)]
    assert alphas == sorted(alphas)
    assert alphas[-1] == 0xFF


def test_gamma_corrected_half_opacity():
    assert apply_opacity(0xFFFFFFFF, 0.5) & 0xFF == 186


def test_nan_opacity_gives_transparent():
    assert apply_opacity(0xFFFFFFFF, float("nan")) & 0xFF == 0