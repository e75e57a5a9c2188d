# pathtracer/core/color.py
import math
from typing import Tuple

from pathtracer.core.interval import Interval

# Channels are clamped into this range before scaling to a byte.
INTENSITY = Interval(0.0, 0.999999)


class Color:
    """
    Linear RGB radiance or reflectance. Channels are conceptually in [0, 1]
    but are only clamped when quantized to bytes.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return self * (1.0 / other)
        return Color(self.r / other.r, self.g / other.g, self.b / other.b)

    def __getitem__(self, i: int) -> float:
        return (self.r, self.g, self.b)[i]

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def gamma_correct(self) -> "Color":
        """
        Gamma 2 transform: square root of each positive channel, zero otherwise.
        """
        return Color(_linear_to_gamma(self.r), _linear_to_gamma(self.g), _linear_to_gamma(self.b))

    def to_rgb_bytes(self) -> Tuple[int, int, int]:
        """
        Quantizes the channels to bytes: clamp into INTENSITY, scale by 255,
        floor.
        """
        return (
            int(255 * INTENSITY.clamp(self.r)),
            int(255 * INTENSITY.clamp(self.g)),
            int(255 * INTENSITY.clamp(self.b)),
        )

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


def _linear_to_gamma(channel: float) -> float:
    if channel > 0:
        return math.sqrt(channel)
    return 0.0


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)
