"""
Simple value types usable as control points: 2d points and linear RGB colors.
Both support multiplication by a scalar and addition, which is all the spline needs.
"""
from dataclasses import dataclass


def clamp(x, x_min, x_max):
    return min(max(x, x_min), x_max)


@dataclass(frozen=True)
class Point2:
    x: float
    y: float

    def __mul__(self, s):
        return Point2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __add__(self, other):
        return Point2(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Colorf:
    """
    Linear RGB color, components nominally in [0, 1].
    """
    r: float
    g: float
    b: float

    @classmethod
    def broadcast(cls, x):
        return cls(x, x, x)

    def __mul__(self, s):
        return Colorf(self.r * s, self.g * s, self.b * s)

    __rmul__ = __mul__

    def __add__(self, other):
        return Colorf(self.r + other.r, self.g + other.g, self.b + other.b)

    def __getitem__(self, i):
        # channels: 0 = r, 1 = g, 2 = b
        return (self.r, self.g, self.b)[i]

    def clamp(self):
        """
        Clamp the components into [0, 1].
        """
        return Colorf(clamp(self.r, 0.0, 1.0), clamp(self.g, 0.0, 1.0), clamp(self.b, 0.0, 1.0))

    def to_srgb(self):
        """
        Convert the linear RGB color to sRGB.
        """
        a = 0.055
        b = 1.0 / 2.4

        def convert(c):
            if c <= 0.0031308:
                return 12.92 * c
            return (1.0 + a) * c ** b - a

        return Colorf(convert(self.r), convert(self.g), convert(self.b))

    def to_rgb8(self):
        """
        Tuple of 8-bit components of the clamped color.
        """
        c = self.clamp()
        return tuple(int(round(v * 255)) for v in (c.r, c.g, c.b))
