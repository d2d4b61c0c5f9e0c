"""Colour-space conversions and log message colours."""

from __future__ import annotations

from enum import Enum

Color = tuple[float, float, float, float]

# sRGB transfer function parameters (IEC 61966-2-1).
GAMMA_THRESHOLD = 0.04045
GAMMA_DIVISOR = 12.92
GAMMA_OFFSET = 0.055
GAMMA_SCALE = 1.055
GAMMA_EXPONENT = 2.4


class MessageType(Enum):
    """Kinds of log messages."""

    VERBOSE = "verbose"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"
    SUCCESS = "success"


_WHITE: Color = (1.0, 1.0, 1.0, 1.0)

_MESSAGE_COLORS: dict[MessageType, Color] = {
    MessageType.VERBOSE: (0.6, 0.6, 0.6, 1.0),
    MessageType.DEBUG: (0.7, 0.7, 0.7, 1.0),
    MessageType.INFO: _WHITE,
    MessageType.WARNING: (1.0, 1.0, 0.0, 1.0),
    MessageType.ERROR: (1.0, 0.2, 0.2, 1.0),
    MessageType.FATAL: (0.7, 0.04, 0.04, 1.0),
    MessageType.SUCCESS: (0.2, 1.0, 0.2, 1.0),
}


def srgb_channel_to_linear(color: float) -> float:
    """Convert one sRGB channel value to linear colour space."""
    if color <= GAMMA_THRESHOLD:
        return color / GAMMA_DIVISOR
    return ((color + GAMMA_OFFSET) / GAMMA_SCALE) ** GAMMA_EXPONENT


def srgb_to_linear(r: float, g: float, b: float, a: float = 1.0) -> Color:
    """Convert an sRGB colour to linear space; alpha is kept as given."""
    return (
        srgb_channel_to_linear(r),
        srgb_channel_to_linear(g),
        srgb_channel_to_linear(b),
        a,
    )


def srgb_gray_to_linear(value: float, a: float = 1.0) -> Color:
    """Convert a gray sRGB value (same on every channel) to linear space."""
    linear = srgb_channel_to_linear(value)
    return (linear, linear, linear, a)


def message_type_color(message_type: MessageType) -> Color:
    """Return the display colour for a log message type (white if unknown)."""
    return _MESSAGE_COLORS.get(message_type, _WHITE)