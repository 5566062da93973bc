#!/usr/bin/env python3
"""
direction.py — Four-way grid movement.

Directions cycle Right → Down → Left → Up → Right. Turning right steps
forward on that cycle, turning left steps back.

Displacements follow screen/row-major coordinates: Down adds one to y,
Up subtracts one.

    p = Pt(3, 3)
    p + Direction.UP      # Pt(3, 2)
    p += Direction.RIGHT  # p is now Pt(4, 3)
"""

import sys
from enum import Enum
from functools import total_ordering

from pt import Pt


@total_ordering
class Direction(Enum):
    RIGHT = 0
    DOWN  = 1
    LEFT  = 2
    UP    = 3

    def turn_left(self) -> 'Direction':
        """Turns 90 degrees to the left."""
        return Direction((self.value + 3) % len(Direction))

    def turn_right(self) -> 'Direction':
        """Turns 90 degrees to the right."""
        return Direction((self.value + 1) % len(Direction))

    def turn_around(self) -> 'Direction':
        return Direction((self.value + 2) % len(Direction))

    def displacement(self, kind=int) -> Pt:
        """
        Unit step in this direction, with coordinates of type `kind`.

        `kind` only needs kind(0), kind(1) and negation.
        """
        zero, one = kind(0), kind(1)
        if self is Direction.RIGHT: return Pt(one, zero)
        if self is Direction.DOWN:  return Pt(zero, one)
        if self is Direction.LEFT:  return Pt(-one, zero)
        return Pt(zero, -one)

    # ── Point arithmetic (Pt on the left) ────────────────────────────────────

    def __radd__(self, pt):
        if not isinstance(pt, Pt):
            return NotImplemented
        return pt + self.displacement(type(pt.x))

    def __rsub__(self, pt):
        if not isinstance(pt, Pt):
            return NotImplemented
        return pt - self.displacement(type(pt.x))

    def __lt__(self, other):
        if not isinstance(other, Direction):
            return NotImplemented
        return self.value < other.value

    def __str__(self):
        return self.name.capitalize()


# ── Tests ─────────────────────────────────────────────────────────────────────

def run_tests():
    R, D, L, U = Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP
    origin = Pt(5, 5)
    cases = [
        # Turns
        ('R left',       R.turn_left(),    U),
        ('D left',       D.turn_left(),    R),
        ('L left',       L.turn_left(),    D),
        ('U left',       U.turn_left(),    L),
        ('R right',      R.turn_right(),   D),
        ('U right',      U.turn_right(),   R),
        ('R around',     R.turn_around(),  L),
        ('D around',     D.turn_around(),  U),

        # Displacements (y grows downward)
        ('R step',       R.displacement(), Pt(1, 0)),
        ('D step',       D.displacement(), Pt(0, 1)),
        ('L step',       L.displacement(), Pt(-1, 0)),
        ('U step',       U.displacement(), Pt(0, -1)),

        # Point arithmetic
        ('p + U',        origin + U,       Pt(5, 4)),
        ('p + D',        origin + D,       Pt(5, 6)),
        ('p - R',        origin - R,       Pt(4, 5)),
        ('p + L - L',    origin + L - L,   origin),

        # Enum conveniences
        ('from ordinal', Direction(2),     L),
        ('order',        sorted([U, L, D, R]), [R, D, L, U]),
        ('R <= D',       R <= D,           True),
        ('U >= L',       U >= L,           True),
        ('U > R',        U > R,            True),
        ('display',      str(D),           'Down'),
        ('as key',       {origin + R: 'x'}.get(Pt(6, 5)), 'x'),
    ]

    failed = [(label, got, expected)
              for label, got, expected in cases if got != expected]
    for label, got, expected in failed:
        print(f'FAIL {label}: expected {expected!r}, got {got!r}')
    passed = len(cases) - len(failed)
    print(f'{passed}/{len(cases)} direction checks passed')
    return passed, len(cases)


if __name__ == '__main__':
    p, t = run_tests()
    sys.exit(0 if p == t else 1)
