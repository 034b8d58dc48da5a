"""Command that drives a ten-pixel LED strip and prints its contents."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from embedsim.led_strip import LedStrip

PIXEL_COUNT = 10


def main(argv: Sequence[str] | None = None) -> int:
    """Set a few pixels, fill the strip green, and print the words."""
    argparse.ArgumentParser(description="Exercise an LED strip.").parse_args(argv)

    strip = LedStrip(PIXEL_COUNT)
    for i, pixel in enumerate(strip.buffer()):
        if pixel != 0:
            print(f"Pixel {i} not zero at init!")

    strip.set_pixel_color(0, 255, 0, 0)
    strip.set_pixel_color(9, 0, 0, 255)
    strip.set_pixel_color(4, 255, 255, 255)

    buf = strip.buffer()
    for i in (0, 4, 9):
        print(f"Pixel {i}: 0x{buf[i]:08X}")

    strip.fill(0, 255, 0)
    for i, pixel in enumerate(strip.buffer()):
        print(f"Pixel {i}: 0x{pixel:08X}")
    return 0