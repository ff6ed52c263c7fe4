"""Packing and unpacking of 32-bit colour values."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


def get_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack four channels into an unsigned 32-bit RGBA integer."""
    return (r << 24 | g << 16 | b << 8 | a) & _MASK32


def int_to_rgba(rgb: int) -> int:
    """Put 0xFF in the top byte above the low 24 bits of ``rgb``."""
    return ((0xFF << 24) | (rgb & 0x00FFFFFF)) & _MASK32


def _clamp(value: int) -> int:
    return max(0, min(255, value))


def color_to_int(red: int, green: int, blue: int) -> int:
    """Clamp each channel to 0..255 and pack them into a 24-bit RGB integer."""
    return (_clamp(red) << 16) | (_clamp(green) << 8) | _clamp(blue)


def distance_color(distance: float) -> int:
    """Grey shade that darkens with distance, packed as 24-bit RGB."""
    shade = int(255 / (1 + distance * distance * 0.1))
    return (shade << 16) | (shade << 8) | shade


def to_pygame_color(rgba: int) -> tuple[int, int, int, int]:
    """Unpack a 32-bit RGBA integer into an ``(r, g, b, a)`` tuple."""
    rgba &= _MASK32
    return ((rgba >> 24) & 0xFF, (rgba >> 16) & 0xFF, (rgba >> 8) & 0xFF, rgba & 0xFF)