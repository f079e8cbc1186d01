"""Small fixed-size numeric vectors with element-wise arithmetic."""

from __future__ import annotations

import math
import numbers
import operator
from collections.abc import Sequence


class Vec(Sequence):
    """Immutable vector of two or more components.

    Components may be given one by one or as shorter vectors that are
    spliced in, so ``Vec(Vec(1, 2), 3)`` is ``Vec(1, 2, 3)``.
    """

    __slots__ = ("_elements",)

    def __init__(self, *args):
        components = []
        for arg in args:
            if isinstance(arg, Vec):
                components.extend(arg)
            else:
                components.append(arg)
        if len(components) < 2:
            raise ValueError("Cannot create a vector of size 1")
        self._elements = tuple(components)

    @classmethod
    def generate(cls, n, f):
        """Build an ``n``-component vector whose ``i``-th component is ``f(i)``."""
        return cls(*(f(i) for i in range(n)))

    @classmethod
    def splat(cls, n, value):
        """Build an ``n``-component vector with every component set to ``value``."""
        return cls(*([value] * n))

    def __len__(self):
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __iter__(self):
        return iter(self._elements)

    def __eq__(self, other):
        if not isinstance(other, Vec):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self):
        return hash(self._elements)

    def __repr__(self):
        return f"Vec({', '.join(map(repr, self._elements))})"

    def __str__(self):
        return f"({', '.join(map(str, self._elements))})"

    # Named components.
    x = property(lambda self: self._elements[0])
    y = property(lambda self: self._elements[1])
    z = property(lambda self: self._elements[2])
    w = property(lambda self: self._elements[3])
    r = x
    g = y
    b = z
    a = w

    @property
    def xy(self):
        return Vec(*self._elements[:2])

    @property
    def xyz(self):
        return Vec(*self._elements[:3])

    rgb = xyz

    def _apply(self, other, op, reflected=False):
        if isinstance(other, Vec):
            if len(other) != len(self):
                raise ValueError(
                    f"Vector size mismatch: {len(self)} and {len(other)}"
                )
            pairs = zip(other, self) if reflected else zip(self, other)
            return Vec(*(op(a, b) for a, b in pairs))
        if isinstance(other, numbers.Number):
            if reflected:
                return Vec(*(op(other, e) for e in self._elements))
            return Vec(*(op(e, other) for e in self._elements))
        return NotImplemented

    def __add__(self, other):
        return self._apply(other, operator.add)

    def __radd__(self, other):
        return self._apply(other, operator.add, reflected=True)

    def __sub__(self, other):
        return self._apply(other, operator.sub)

    def __rsub__(self, other):
        return self._apply(other, operator.sub, reflected=True)

    def __mul__(self, other):
        return self._apply(other, operator.mul)

    def __rmul__(self, other):
        return self._apply(other, operator.mul, reflected=True)

    def __truediv__(self, other):
        return self._apply(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._apply(other, operator.truediv, reflected=True)

    def __neg__(self):
        return Vec(*(-e for e in self._elements))


def _check_same_size(lhs, rhs):
    if len(lhs) != len(rhs):
        raise ValueError(f"Vector size mismatch: {len(lhs)} and {len(rhs)}")


def dot(lhs, rhs):
    """Dot product of two vectors of equal size."""
    _check_same_size(lhs, rhs)
    return sum(a * b for a, b in zip(lhs, rhs))


def cross(lhs, rhs):
    """Cross product of two three-component vectors."""
    if len(lhs) != 3 or len(rhs) != 3:
        raise ValueError("Can only perform cross-product on vectors of size 3")
    return Vec(
        lhs.y * rhs.z - lhs.z * rhs.y,
        lhs.z * rhs.x - lhs.x * rhs.z,
        lhs.x * rhs.y - lhs.y * rhs.x,
    )


def mix(lhs, rhs, t):
    """Linear interpolation: ``lhs`` at ``t = 0``, ``rhs`` at ``t = 1``."""
    return lhs * (1 - t) + rhs * t


def length_sq(v):
    return dot(v, v)


def length(v):
    return math.sqrt(length_sq(v))


def normalize(v):
    """The vector scaled to unit length."""
    return v / length(v)


def distance_sq(lhs, rhs):
    return length_sq(lhs - rhs)


def distance(lhs, rhs):
    return length(lhs - rhs)


def vec_map(v, f):
    """A vector of ``f`` applied to each component of ``v``."""
    return Vec(*(f(e) for e in v))