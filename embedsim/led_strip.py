"""An in-memory RGB LED strip holding one packed GRB word per pixel."""

from __future__ import annotations


def _channel(value: int) -> int:
    return int(value) & 0xFF


def pack_color(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a 24-bit word in G, R, B order."""
    return (_channel(g) << 16) | (_channel(r) << 8) | _channel(b)


class LedStrip:
    """A strip of ``num_pixels`` pixels, all off when created."""

    def __init__(self, num_pixels: int) -> None:
        if num_pixels < 0:
            raise ValueError("pixel count must not be negative")
        self._pixels = [0] * num_pixels

    def set_pixel_color(self, index: int, r: int, g: int, b: int) -> None:
        """Set one pixel; an index outside the strip is ignored."""
        if 0 <= index < len(self._pixels):
            self._pixels[index] = pack_color(r, g, b)

    def fill(self, r: int, g: int, b: int) -> None:
        """Set every pixel to the same colour."""
        self._pixels = [pack_color(r, g, b)] * len(self._pixels)

    def clear(self) -> None:
        """Turn every pixel off."""
        self.fill(0, 0, 0)

    def buffer(self) -> tuple[int, ...]:
        """Return a snapshot of the packed pixel words."""
        return tuple(self._pixels)

    def __len__(self) -> int:
        return len(self._pixels)