import pytest

from astrocel.colors import (
    MessageType,
    message_type_color,
    srgb_channel_to_linear,
    srgb_gray_to_linear,
    srgb_to_linear,
)


def test_channel_endpoints():
    assert srgb_channel_to_linear(0.0) == 0.0
    assert srgb_channel_to_linear(1.0) == pytest.approx(1.0)


def test_channel_is_monotonic():
    values = [i / 100 for i in range(101)]
    converted = [srgb_channel_to_linear(v) for v in values]
    assert converted == sorted(converted)
    assert all(lin <= v + 1e-12 for v, lin in zip(values, converted))


def test_channel_continuous_at_threshold():
    below = srgb_channel_to_linear(0.04045)
    above = srgb_channel_to_linear(0.04045 + 1e-9)
    assert above == pytest.approx(below, abs=1e-6)


def test_rgb_matches_channels_and_keeps_alpha():
    r, g, b, a = srgb_to_linear(0.2, 0.5, 0.8, 0.3)
    assert r == srgb_channel_to_linear(0.2)
    assert g == srgb_channel_to_linear(0.5)
    assert b == srgb_channel_to_linear(0.8)
    assert a == 0.3


def test_default_alpha_is_one():
    assert srgb_to_linear(0.1, 0.1, 0.1)[3] == 1.0
    assert srgb_gray_to_linear(0.1)[3] == 1.0


def test_gray_equals_uniform_rgb():
    assert srgb_gray_to_linear(0.4, 0.7) == srgb_to_linear(0.4, 0.4, 0.4, 0.7)


@pytest.mark.parametrize(
    "kind, expected",
    [
        (MessageType.WARNING, (1.0, 1.0, 0.0, 1.0)),
        (MessageType.ERROR, (1.0, 0.2, 0.2, 1.0)),
        (MessageType.SUCCESS, (0.2, 1.0, 0.2, 1.0)),
        (MessageType.INFO, (1.0, 1.0, 1.0, 1.0)),
        (MessageType.FATAL, (0.7, 0.04, 0.04, 1.0)),
    ],
)
def test_message_colors(kind, expected):
    assert message_type_color(kind) == pytest.approx(expected)


def test_every_message_type_is_opaque():
    assert all(message_type_color(kind)[3] == 1.0 for kind in MessageType)


def test_unknown_message_type_is_white():
    assert message_type_color("something else") == (1.0, 1.0, 1.0, 1.0)