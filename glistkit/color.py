"""RGBA colours with float channels in the range 0..1."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Color:
    """A colour with red, green, blue and alpha channels stored as floats."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def set(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        """Set all channels from floats in the range 0..1."""
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)
        self.a = float(a)

    def set_bytes(self, r: int, g: int, b: int, a: int = 255) -> None:
        """Set all channels from integers in the range 0..255."""
        self.r = r / 255
        self.g = g / 255
        self.b = b / 255
        self.a = a / 255

    def copy_from(self, other: Color) -> None:
        """Copy every channel of another colour into this one."""
        self.r = other.r
        self.g = other.g
        self.b = other.b
        self.a = other.a