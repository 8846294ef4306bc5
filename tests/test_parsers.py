import pytest

from converter.models import ColorNotation, ColorSample
from converter.parsers import PARSERS, parse_hex, parse_hsl, parse_oklch, parse_rgb
from .samples import samples_hex_rgba, samples_hsl_rgb


def test_parse_hex():
    for token, (r, g, b, a) in samples_hex_rgba.items():
        sample = parse_hex(token)
        assert (sample.red, sample.green, sample.blue) == (r, g, b)
        if a is None:
            assert sample.alpha is None
        else:
            assert abs(sample.alpha - a) < 1e-12


@pytest.mark.parametrize("token", ["#12345", "#1234567", "#ab"])
def test_parse_hex_rejects_other_lengths(token):
    assert parse_hex(token) is None


def test_parse_rgb_separators():
    for token in ("rgb(103, 80, 164)", "rgb(103 80 164)", "rgba(103,80,164)"):
        assert parse_rgb(token) == ColorSample(red=103, green=80, blue=164)


def test_parse_rgb_alpha():
    assert parse_rgb("rgba(1, 2, 3, 0.25)").alpha == 0.25
    assert parse_rgb("rgb(1 2 3 / 0.25)").alpha == 0.25
    assert parse_rgb("rgb(1 2 3 / 25%)").alpha == 0.25


def test_parse_rgb_keeps_out_of_range_values():
    sample = parse_rgb("rgb(300, -20, 128)")
    assert (sample.red, sample.green, sample.blue) == (300, -20, 128)
    # alpha is passed through as written
    assert parse_rgb("rgba(1, 2, 3, 1.5)").alpha == 1.5


@pytest.mark.parametrize("token", ["rgb(a, b, c)", "rgb(1.5, 2, 3)", "rgb(1, 2)", "rgb( 1, 2, 3)"])
def test_parse_rgb_rejects(token):
    assert parse_rgb(token) is None


def test_parse_rgb_malformed_alpha_raises():
    with pytest.raises(ValueError):
        parse_rgb("rgba(1, 2, 3, 1.2.3)")


def test_parse_hsl():
    for token, rgb in samples_hsl_rgb.items():
        sample = parse_hsl(token)
        assert (sample.red, sample.green, sample.blue) == rgb
        assert sample.alpha is None


def test_parse_hsl_alpha():
    assert parse_hsl("hsla(200, 80%, 60%, 0.5)").alpha == 0.5
    assert parse_hsl("hsl(200 80% 60% / 50%)").alpha == 0.5


@pytest.mark.parametrize("token", ["hsl(10.5, 50%, 50%)", "hsl(-10, 50%, 50%)", "hsl(10)"])
def test_parse_hsl_rejects(token):
    assert parse_hsl(token) is None


def test_parse_oklch_extremes():
    assert parse_oklch("oklch(0% 0 0)") == ColorSample(red=0, green=0, blue=0)
    assert parse_oklch("oklch(100% 0 0)") == ColorSample(red=255, green=255, blue=255)


def test_parse_oklch_alpha():
    assert parse_oklch("oklch(59.69% 0.154 292.34 / 50%)").alpha == 0.5
    assert parse_oklch("oklch(59.69% 0.154 292.34deg / 0.25)").alpha == 0.25
    assert parse_oklch("oklch(59.69% 0.154 292.34)").alpha is None


def test_parse_oklch_lightness_is_always_a_percentage():
    # 0.5 means 0.5%, which is nearly black
    sample = parse_oklch("oklch(0.5 0 0)")
    assert max(sample.red, sample.green, sample.blue) <= 1


@pytest.mark.parametrize("token", ["oklch(50%, 0.1, 200)", "oklch(50% 0.1)", "oklch(none 0.1 200)"])
def test_parse_oklch_rejects(token):
    assert parse_oklch(token) is None


def test_parsers_only_read_ascii_digits():
    assert parse_rgb("rgb(١٠٣, 80, 164)") is None
    assert parse_rgb("rgba(103, 80, 164, ٠.5)") is None
    assert parse_hsl("hsl(٢٠٠, 80%, 60%)") is None
    assert parse_oklch("oklch(50% 0.1 ٢٠٠)") is None


def test_every_notation_has_a_parser():
    assert set(PARSERS) == set(ColorNotation)
