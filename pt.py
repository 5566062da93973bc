"""
pt.py — A 2D point over any numeric type.

Grid code treats x as the column and y as the row, so y grows downward.
Points are values: hashable, and `p += q` rebinds `p` to a new point.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Pt:
    x: object
    y: object

    def __add__(self, other):
        if not isinstance(other, Pt):
            return NotImplemented
        return Pt(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Pt):
            return NotImplemented
        return Pt(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Pt(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y
