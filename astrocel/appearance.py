"""Colour themes for the user interface."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from astrocel.colors import Color, srgb_gray_to_linear, srgb_to_linear


class Appearance(Enum):
    """Available UI appearances."""

    DARK_MODE = "dark"
    LIGHT_MODE = "light"


_APPEARANCE_NAMES = {
    Appearance.DARK_MODE: "Dark Mode",
    Appearance.LIGHT_MODE: "Light Mode",
}


def appearance_name(appearance: Appearance) -> str:
    """Return the display name of an appearance."""
    try:
        return _APPEARANCE_NAMES[appearance]
    except KeyError:
        raise ValueError(f"Unknown appearance: {appearance!r}") from None


def _with_alpha(color: Color, alpha: float) -> Color:
    return (color[0], color[1], color[2], alpha)


# Dark palette
DARK_GRAY_100 = srgb_to_linear(0.08, 0.08, 0.08, 1.0)
DARK_GRAY_200 = srgb_to_linear(0.10, 0.10, 0.10, 1.0)
DARK_GRAY_300 = srgb_to_linear(0.12, 0.12, 0.12, 1.0)
DARK_GRAY_400 = srgb_to_linear(0.15, 0.15, 0.15, 1.0)
DARK_GRAY_500 = srgb_to_linear(0.18, 0.18, 0.18, 1.0)
DARK_GRAY_600 = srgb_to_linear(0.20, 0.20, 0.20, 1.0)
DARK_GRAY_700 = srgb_to_linear(0.25, 0.25, 0.25, 1.0)
DARK_GRAY_800 = srgb_to_linear(0.28, 0.28, 0.28, 1.0)
DARK_GRAY_900 = srgb_to_linear(0.30, 0.30, 0.30, 1.0)
ACCENT_BLUE_DARK = srgb_to_linear(0.20, 0.35, 0.50, 1.0)
ACCENT_BLUE_DARK_HOVER = srgb_to_linear(0.25, 0.40, 0.55, 1.0)
ACCENT_BLUE_DARK_ACTIVE = srgb_to_linear(0.30, 0.45, 0.60, 1.0)
TEXT_LIGHT = srgb_to_linear(0.90, 0.90, 0.90, 1.0)
TEXT_MUTED = srgb_to_linear(0.60, 0.60, 0.60, 1.0)

# Light palette
LIGHT_GRAY_100 = srgb_to_linear(0.98, 0.98, 0.99, 1.0)
LIGHT_GRAY_200 = srgb_to_linear(0.95, 0.95, 0.96, 1.0)
LIGHT_GRAY_300 = srgb_to_linear(0.90, 0.90, 0.92, 1.0)
LIGHT_GRAY_400 = srgb_to_linear(0.85, 0.85, 0.88, 1.0)
LIGHT_GRAY_500 = srgb_to_linear(0.80, 0.80, 0.82, 1.0)
LIGHT_GRAY_600 = srgb_to_linear(0.78, 0.78, 0.80, 1.0)
LIGHT_GRAY_700 = srgb_to_linear(0.75, 0.80, 0.85, 1.0)
LIGHT_GRAY_800 = srgb_to_linear(0.70, 0.70, 0.70, 1.0)
LIGHT_GRAY_900 = srgb_to_linear(0.60, 0.60, 0.60, 1.0)
ACCENT_BLUE_LIGHT = srgb_to_linear(0.30, 0.50, 0.70, 1.0)
ACCENT_BLUE_LIGHT_HOVER = srgb_to_linear(0.35, 0.55, 0.75, 1.0)
ACCENT_BLUE_LIGHT_ACTIVE = srgb_to_linear(0.40, 0.60, 0.80, 1.0)
TEXT_DARK = srgb_to_linear(0.10, 0.10, 0.10, 1.0)
TEXT_MUTED_LIGHT = srgb_to_linear(0.50, 0.50, 0.50, 1.0)

_CLEAR: Color = srgb_gray_to_linear(0.0, 0.0)


@dataclass(frozen=True)
class ThemeColors:
    """All colours of one UI theme, in linear colour space."""

    window_bg: Color
    menu_bar_bg: Color
    docking_empty_bg: Color
    child_bg: Color
    popup_bg: Color
    header: Color
    header_hovered: Color
    header_active: Color
    border: Color
    border_shadow: Color
    text: Color
    text_disabled: Color
    frame_bg: Color
    frame_bg_hovered: Color
    frame_bg_active: Color
    button: Color
    button_hovered: Color
    button_active: Color
    scrollbar_bg: Color
    scrollbar_grab: Color
    scrollbar_grab_hovered: Color
    scrollbar_grab_active: Color
    tab: Color
    tab_hovered: Color
    tab_active: Color
    tab_unfocused: Color
    tab_unfocused_active: Color
    title_bg: Color
    title_bg_active: Color
    title_bg_collapsed: Color
    resize_grip: Color
    resize_grip_hovered: Color
    resize_grip_active: Color


def dark_theme_colors() -> ThemeColors:
    """Return the Dark Mode theme."""
    return ThemeColors(
        window_bg=DARK_GRAY_300,
        menu_bar_bg=DARK_GRAY_300,
        docking_empty_bg=DARK_GRAY_300,
        child_bg=DARK_GRAY_400,
        popup_bg=DARK_GRAY_200,
        header=DARK_GRAY_600,
        header_hovered=DARK_GRAY_800,
        header_active=DARK_GRAY_900,
        border=_with_alpha(DARK_GRAY_700, 0.50),
        border_shadow=srgb_to_linear(0.0, 0.0, 0.0, 0.0),
        text=TEXT_LIGHT,
        text_disabled=TEXT_MUTED,
        frame_bg=DARK_GRAY_500,
        frame_bg_hovered=DARK_GRAY_700,
        frame_bg_active=DARK_GRAY_900,
        button=ACCENT_BLUE_DARK,
        button_hovered=ACCENT_BLUE_DARK_HOVER,
        button_active=ACCENT_BLUE_DARK_ACTIVE,
        scrollbar_bg=DARK_GRAY_200,
        scrollbar_grab=DARK_GRAY_900,
        scrollbar_grab_hovered=srgb_to_linear(0.40, 0.40, 0.40, 1.0),
        scrollbar_grab_active=srgb_to_linear(0.50, 0.50, 0.50, 1.0),
        tab=DARK_GRAY_400,
        tab_hovered=DARK_GRAY_700,
        tab_active=ACCENT_BLUE_DARK,
        tab_unfocused=DARK_GRAY_200,
        tab_unfocused_active=DARK_GRAY_500,
        title_bg=DARK_GRAY_200,
        title_bg_active=DARK_GRAY_400,
        title_bg_collapsed=_with_alpha(DARK_GRAY_100, 0.75),
        resize_grip=_CLEAR,
        resize_grip_hovered=_CLEAR,
        resize_grip_active=_CLEAR,
    )


def light_theme_colors() -> ThemeColors:
    """Return the Light Mode theme."""
    return ThemeColors(
        window_bg=LIGHT_GRAY_300,
        menu_bar_bg=LIGHT_GRAY_300,
        docking_empty_bg=LIGHT_GRAY_300,
        child_bg=LIGHT_GRAY_200,
        popup_bg=LIGHT_GRAY_100,
        header=LIGHT_GRAY_700,
        header_hovered=LIGHT_GRAY_900,
        header_active=srgb_to_linear(0.55, 0.60, 0.65, 1.0),
        border=_with_alpha(LIGHT_GRAY_800, 0.60),
        border_shadow=srgb_to_linear(0.0, 0.0, 0.0, 0.0),
        text=TEXT_DARK,
        text_disabled=TEXT_MUTED_LIGHT,
        frame_bg=LIGHT_GRAY_400,
        frame_bg_hovered=srgb_to_linear(0.80, 0.80, 0.83, 1.0),
        frame_bg_active=srgb_to_linear(0.75, 0.75, 0.78, 1.0),
        button=ACCENT_BLUE_LIGHT,
        button_hovered=ACCENT_BLUE_LIGHT_HOVER,
        button_active=ACCENT_BLUE_LIGHT_ACTIVE,
        scrollbar_bg=LIGHT_GRAY_300,
        scrollbar_grab=LIGHT_GRAY_800,
        scrollbar_grab_hovered=LIGHT_GRAY_900,
        scrollbar_grab_active=LIGHT_GRAY_900,
        tab=LIGHT_GRAY_500,
        tab_hovered=LIGHT_GRAY_700,
        tab_active=ACCENT_BLUE_LIGHT,
        tab_unfocused=LIGHT_GRAY_400,
        tab_unfocused_active=LIGHT_GRAY_600,
        title_bg=LIGHT_GRAY_400,
        title_bg_active=LIGHT_GRAY_600,
        title_bg_collapsed=_with_alpha(LIGHT_GRAY_300, 0.90),
        resize_grip=_CLEAR,
        resize_grip_hovered=_CLEAR,
        resize_grip_active=_CLEAR,
    )


def theme_colors(appearance: Appearance) -> ThemeColors:
    """Return the theme belonging to an appearance."""
    if appearance is Appearance.DARK_MODE:
        return dark_theme_colors()
    if appearance is Appearance.LIGHT_MODE:
        return light_theme_colors()
    raise ValueError(f"Unknown appearance: {appearance!r}")