import pytest

from astrocel.layout import (
    Alignment,
    aligned_offset,
    available_width,
    bottom_button_area_height,
    icon_string,
    resize_image_preserve_aspect_ratio,
)


@pytest.mark.parametrize(
    "img, viewport",
    [
        ((1920.0, 1080.0), (800.0, 800.0)),
        ((1920.0, 1080.0), (3000.0, 600.0)),
        ((600.0, 900.0), (1000.0, 400.0)),
        ((100.0, 100.0), (250.0, 250.0)),
    ],
)
def test_resize_keeps_aspect_ratio_and_fits(img, viewport):
    width, height = resize_image_preserve_aspect_ratio(img, viewport)
    assert width / height == pytest.approx(img[0] / img[1])
    assert width <= viewport[0] + 1e-9
    assert height <= viewport[1] + 1e-9
    assert width == pytest.approx(viewport[0]) or height == pytest.approx(viewport[1])


def test_resize_wide_panel_uses_full_height():
    _, height = resize_image_preserve_aspect_ratio((1920.0, 1080.0), (3000.0, 600.0))
    assert height == 600.0


def test_resize_tall_panel_uses_full_width():
    width, _ = resize_image_preserve_aspect_ratio((1920.0, 1080.0), (800.0, 800.0))
    assert width == 800.0


def test_resize_zero_height_raises():
    with pytest.raises(ValueError):
        resize_image_preserve_aspect_ratio((10.0, 0.0), (10.0, 10.0))


def test_icon_string_with_text():
    assert icon_string("*", "Play") == "*  Play"


def test_icon_string_empty_text():
    assert icon_string("*", "") == "*"


def test_aligned_offset_middle_is_half_of_right():
    right = aligned_offset(Alignment.RIGHT, 300.0, 120.0)
    middle = aligned_offset(Alignment.MIDDLE, 300.0, 120.0)
    assert middle * 2 == pytest.approx(right)
    assert right == pytest.approx(300.0 - 120.0)


def test_aligned_offset_never_negative():
    assert aligned_offset(Alignment.RIGHT, 50.0, 120.0) == 0.0
    assert aligned_offset(Alignment.MIDDLE, 50.0, 120.0) == 0.0


def test_aligned_offset_unknown_alignment():
    with pytest.raises(ValueError):
        aligned_offset("left", 100.0, 10.0)


def test_available_width_padding_difference():
    with_padding = available_width(400.0, 8.0)
    without_padding = available_width(400.0, 8.0, include_padding=False)
    assert without_padding == 400.0
    assert with_padding + 8.0 == pytest.approx(without_padding)


def test_bottom_button_area_scales_with_rows():
    one = bottom_button_area_height(20.0, 4.0)
    three = bottom_button_area_height(20.0, 4.0, 3)
    assert three == pytest.approx(one * 3)
    assert bottom_button_area_height(20.0, 4.0, 0) == 0.0


def test_bottom_button_area_grows_with_spacing():
    assert bottom_button_area_height(20.0, 0.0) == 20.0
    assert bottom_button_area_height(20.0, 5.0) > bottom_button_area_height(20.0, 4.0)


def test_bottom_button_area_negative_rows():
    with pytest.raises(ValueError):
        bottom_button_area_height(20.0, 4.0, -1)