"""Quaternions for rotations."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

from xenodon.vec import Vec, dot
from xenodon.vec import length as _vec_length
from xenodon.vec import length_sq as _vec_length_sq

SLERP_THRESHOLD = 0.9995


@dataclass(frozen=True)
class Quat:
    """Quaternion ``w + xi + yj + zk``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def identity(cls):
        return cls(0, 0, 0, 1)

    @classmethod
    def axis_angle(cls, axis, a):
        """Rotation by angle ``a`` (radians) about ``axis``."""
        axis = Vec(*axis)
        return cls.from_vector(axis * math.sin(a * 0.5), math.cos(a * 0.5))

    @classmethod
    def from_vector(cls, vector, scalar):
        """Quaternion with vector part ``vector`` and scalar part ``scalar``."""
        x, y, z = vector
        return cls(x, y, z, scalar)

    @classmethod
    def _from_elements(cls, elements):
        return cls(*elements)

    @property
    def vector(self):
        return Vec(self.x, self.y, self.z)

    @property
    def scalar(self):
        return self.w

    @property
    def elements(self):
        return Vec(self.x, self.y, self.z, self.w)

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __str__(self):
        def part(value, unit):
            sign = " - " if value < 0 else " + "
            return f"{sign}{abs(value)}{unit}"

        return f"{self.w}{part(self.x, 'i')}{part(self.y, 'j')}{part(self.z, 'k')}"

    @staticmethod
    def _operand(other):
        if isinstance(other, Quat):
            return other.elements
        if isinstance(other, (Vec, numbers.Number)):
            return other
        return None

    def __add__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Quat._from_elements(self.elements + rhs)

    def __radd__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return Quat._from_elements(other + self.elements)

    def __sub__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return Quat._from_elements(self.elements - rhs)

    def __rsub__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return Quat._from_elements(other - self.elements)

    def __neg__(self):
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other):
        if isinstance(other, Quat):
            return Quat(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        if isinstance(other, Vec) and len(other) == 3:
            return (self * Quat.from_vector(other, 0)).vector
        if isinstance(other, numbers.Number):
            return Quat._from_elements(self.elements * other)
        return NotImplemented

    def __rmul__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return Quat._from_elements(other * self.elements)

    def __truediv__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return Quat._from_elements(self.elements / other)

    def __rtruediv__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return Quat._from_elements(other / self.elements)

    def conjugate(self):
        return Quat(-self.x, -self.y, -self.z, self.w)

    def length_sq(self):
        return _vec_length_sq(self.elements)

    def length(self):
        return _vec_length(self.elements)

    def inverse(self):
        return self.conjugate() / self.length_sq()

    def normalized(self):
        return self / self.length()

    def distance_sq(self, other):
        return (self - other).length_sq()

    def distance(self, other):
        return (self - other).length()

    def forward(self):
        """The rotated ``+z`` axis."""
        qr, qi, qj, qk = self.w, self.x, self.y, self.z
        return Vec(
            2 * (qr * qj + qi * qk),
            2 * (qj * qk - qr * qi),
            1 - 2 * (qi * qi + qj * qj),
        )

    def up(self):
        """The rotated ``+y`` axis."""
        qr, qi, qj, qk = self.w, self.x, self.y, self.z
        return Vec(
            2 * (qi * qj - qr * qk),
            1 - 2 * (qi * qi + qk * qk),
            2 * (qr * qi + qj * qk),
        )

    def right(self):
        """The rotated ``+x`` axis."""
        qr, qi, qj, qk = self.w, self.x, self.y, self.z
        return Vec(
            1 - 2 * (qj * qj + qk * qk),
            2 * (qi * qj + qr * qk),
            2 * (qi * qk - qr * qj),
        )


def lerp(lhs, rhs, t):
    """Component-wise linear interpolation between two quaternions."""
    return lhs + t * (rhs - lhs)


def slerp(lhs, rhs, t):
    """Spherical linear interpolation, falling back to ``lerp`` for close inputs."""
    d = dot(lhs.vector, rhs.vector)
    q = rhs.normalized()

    if d < 0:
        d = -d
        q = -q

    if d > SLERP_THRESHOLD:
        return lerp(lhs, q, t).normalized()

    theta_0 = math.acos(d)
    theta = theta_0 * t
    sin_theta = math.sin(theta)
    sin_theta_0 = math.sin(theta_0)

    s0 = math.cos(theta) - d * sin_theta / sin_theta_0
    s1 = sin_theta / sin_theta_0

    return (s0 * lhs + s1 * q).normalized()