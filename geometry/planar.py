"""Planar geometry primitives for a 2-link serial arm.

Positions, link lengths and joint angles are all 2-tuples; they get distinct
types so that a link-length pair is never mistaken for a position.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


def norm(a: float, b: float) -> float:
    """Euclidean norm of (a, b)."""
    return math.sqrt(a * a + b * b)


@dataclass(frozen=True)
class Point:
    """Position in the Cartesian plane (x horizontal, y vertical)."""

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Point":
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def norm(self) -> float:
        return norm(self.x, self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


@dataclass(frozen=True)
class LinkLengths:
    """Lengths of the first (base) and second link.

    Both must be finite and strictly positive.
    """

    l1: float
    l2: float

    def __post_init__(self) -> None:
        for name, val in (("l1", self.l1), ("l2", self.l2)):
            if not math.isfinite(val) or val <= 0.0:
                raise ValueError(f"Link length {name} must be finite and > 0, got {val}")

    @property
    def inner_radius(self) -> float:
        return abs(self.l1 - self.l2)

    @property
    def outer_radius(self) -> float:
        return self.l1 + self.l2


@dataclass(frozen=True)
class JointAngles:
    """Joint configuration in radians.

    theta1 is the absolute shoulder angle, theta2 the elbow angle measured
    relative to the first link.
    """

    theta1: float
    theta2: float


def elbow_position(angles: JointAngles, links: LinkLengths) -> Point:
    """Position of the elbow joint (tip of the first link)."""
    return Point(links.l1 * math.cos(angles.theta1), links.l1 * math.sin(angles.theta1))


def forward_kinematics(angles: JointAngles, links: LinkLengths) -> Point:
    """End-effector position for the given joint angles."""
    t1, t12 = angles.theta1, angles.theta1 + angles.theta2
    return Point(
        links.l1 * math.cos(t1) + links.l2 * math.cos(t12),
        links.l1 * math.sin(t1) + links.l2 * math.sin(t12),
    )
