"""Layout arithmetic for GUI panels: sizing, alignment and labels."""

from __future__ import annotations

from enum import Enum

Size = tuple[float, float]


class Alignment(Enum):
    """Horizontal text alignment within the available width."""

    MIDDLE = "middle"
    RIGHT = "right"


_ALIGNMENT_FACTORS = {
    Alignment.MIDDLE: 0.5,
    Alignment.RIGHT: 1.0,
}


def resize_image_preserve_aspect_ratio(img_size: Size, viewport_size: Size) -> Size:
    """Fit an image inside a viewport while keeping its aspect ratio."""
    img_width, img_height = img_size
    view_width, view_height = viewport_size
    if img_height == 0 or view_height == 0:
        raise ValueError("Image and viewport heights must be non-zero")

    render_aspect = img_width / img_height
    panel_aspect = view_width / view_height

    if panel_aspect > render_aspect:
        # The panel is wider than the image: height is the limit.
        return (view_height * render_aspect, view_height)
    # The panel is taller than the image: width is the limit.
    return (view_width, view_width / render_aspect)


def icon_string(icon: str, text: str) -> str:
    """Prepend an icon to a label, separated by two spaces."""
    return icon + ("  " + text if text else "")


def aligned_offset(alignment: Alignment, available_width: float, text_width: float) -> float:
    """Return the horizontal cursor offset that aligns text of a given width.

    The offset is never negative: text wider than the available space is
    left where it is.
    """
    try:
        factor = _ALIGNMENT_FACTORS[alignment]
    except KeyError:
        raise ValueError(f"Unknown alignment: {alignment!r}") from None
    offset = (available_width - text_width) * factor
    return offset if offset > 0.0 else 0.0


def available_width(total_width: float, spacing: float, include_padding: bool = True) -> float:
    """Return the usable width of a line, optionally minus item spacing."""
    return total_width - spacing if include_padding else total_width


def bottom_button_area_height(
    button_height: float, item_spacing_y: float, row_count: int = 1
) -> float:
    """Return the height needed for rows of buttons at the bottom of a panel."""
    if row_count < 0:
        raise ValueError("Row count must not be negative")
    vertical_padding = item_spacing_y * 2.0
    return (button_height + vertical_padding) * row_count