"""RGBA colours and conversions from hex, HSL and HSV."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_rgb(cls, r, g, b, a=255) -> "Color":
        """Build a colour from channel values in 0..255."""
        channels = tuple(int(value) for value in (r, g, b, a))
        if any(not 0 <= value <= 255 for value in channels):
            logger.error("Invalid color: (%s, %s, %s, %s)", *channels)
            raise ValueError("Invalid color")
        return cls(*channels)

    @classmethod
    def from_hex(cls, value) -> "Color":
        """Build a colour from 0xRRGGBBAA, as an int or a hex string."""
        if isinstance(value, str):
            try:
                value = int(value.strip(), 16)
            except ValueError:
                logger.error("Invalid color hex: '%s'", value)
                raise ValueError("Invalid hex string") from None
        value = int(value) & 0xFFFFFFFF
        return cls.from_rgb(
            (value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        )

    @classmethod
    def from_hsl(cls, h, s, l, a=1.0) -> "Color":
        """Build a colour from hue, saturation, lightness and alpha in 0..1."""

        def hue_to_rgb(p: float, q: float, t: float) -> float:
            if t < 0:
                t += 1
            if t > 1:
                t -= 1
            if t < 1 / 6:
                return p + (q - p) * 6 * t
            if t < 1 / 2:
                return q
            if t < 2 / 3:
                return p + (q - p) * (2 / 3 - t) * 6
            return p

        if s == 0:
            r = g = b = l * 255.0
        else:
            q = l * (1 + s) if l < 0.5 else l + s - l * s
            p = 2 * l - q
            r = hue_to_rgb(p, q, h + 1 / 3) * 255
            g = hue_to_rgb(p, q, h) * 255
            b = hue_to_rgb(p, q, h - 1 / 3) * 255
        return cls.from_rgb(r, g, b, a * 255)

    @classmethod
    def from_hsv(cls, h, s, v, a=1.0) -> "Color":
        """Build a colour from hue, saturation, value and alpha in 0..1."""
        v *= 255
        if s <= 0.0:
            # Alpha is passed through unscaled on this path.
            return cls.from_rgb(v, v, v, a)
        h *= 360.0
        if h >= 360.0:
            h = 0.0
        h /= 60.0
        sector = int(h)
        ff = h - sector
        p = v * (1.0 - s)
        q = v * (1.0 - s * ff)
        t = v * (1.0 - s * (1.0 - ff))
        r, g, b = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
        }.get(sector, (v, p, q))
        return cls.from_rgb(r, g, b, a * 255)