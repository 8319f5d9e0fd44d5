"""Feasibility of a straight-line end-effector path for a 2-link planar arm.

The reachable workspace is the closed annulus |L1-L2| <= r <= L1+L2. A straight
path is usable when both endpoints are in the annulus, the line does not dip
into the inner (unreachable) disk, and, for equal links, the line does not pass
through the origin where the arm is singular.
"""
from __future__ import annotations

import math
import warnings
from enum import Enum
from typing import Tuple

from geometry.planar import LinkLengths, Point, norm

DEFAULT_TOL = 1e-9


class Verdict(Enum):
    FEASIBLE = "feasible"
    OUT_OF_WORKSPACE = "out_of_workspace"
    TRAJECTORY_BLOCKED = "trajectory_blocked"
    TRAJECTORY_SINGULAR = "trajectory_singular"

    @property
    def ok(self) -> bool:
        return self is Verdict.FEASIBLE

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Verdict.FEASIBLE: "Straight-line trajectory is feasible.",
    Verdict.OUT_OF_WORKSPACE: "Position(s) is(are) not in the operable range.",
    Verdict.TRAJECTORY_BLOCKED: "Straight-line trajectory is not possible.",
    Verdict.TRAJECTORY_SINGULAR: "Straight-line trajectory includes a singular point.",
}


class InfeasibleTrajectoryError(ValueError):
    """Raised by require_feasible when a path fails any feasibility check."""

    def __init__(self, verdict: Verdict):
        super().__init__(verdict.message)
        self.verdict = verdict


def workspace_bounds(links: LinkLengths) -> Tuple[float, float]:
    """(inner, outer) radius of the reachable annulus."""
    return links.inner_radius, links.outer_radius


def _is_point_segment(initial: Point, desired: Point, tol: float) -> bool:
    return norm(desired.x - initial.x, desired.y - initial.y) <= tol


def line_distance(initial: Point, desired: Point, tol: float = DEFAULT_TOL) -> float:
    """Perpendicular distance from the origin to the line through both points.

    Coincident points do not define a line; the distance is taken as 0 since
    the line through the origin is one of the candidates.
    """
    x0, y0 = initial.x, initial.y
    x1, y1 = desired.x, desired.y
    a = y0 - y1
    b = x1 - x0
    c = y0 * (x0 - x1) - (y0 - y1) * x0
    den = math.sqrt(a * a + b * b)
    if den <= tol:
        return 0.0
    return abs(c) / den


def _in_annulus(p: Point, inner: float, outer: float, tol: float) -> bool:
    r = norm(p.x, p.y)
    return inner - tol <= r <= outer + tol


def check(initial: Point, desired: Point, links: LinkLengths, tol: float = DEFAULT_TOL) -> Verdict:
    """Validate a straight path from ``initial`` to ``desired``.

    Checks run in order and the first failure wins: workspace, line clearance,
    singularity. ``tol`` replaces exact float equality in the comparisons.
    """
    inner, outer = workspace_bounds(links)
    if not (_in_annulus(initial, inner, outer, tol) and _in_annulus(desired, inner, outer, tol)):
        return Verdict.OUT_OF_WORKSPACE

    point_segment = _is_point_segment(initial, desired, tol)
    if point_segment:
        warnings.warn("Initial and desired positions coincide; the path is a single point.")
    d = line_distance(initial, desired, tol)
    # A single point already passed the workspace check, so only a real line can be blocked
    if not point_segment and d < inner - tol:
        return Verdict.TRAJECTORY_BLOCKED

    if inner <= tol and d <= tol:
        return Verdict.TRAJECTORY_SINGULAR
    return Verdict.FEASIBLE


def require_feasible(initial: Point, desired: Point, links: LinkLengths, tol: float = DEFAULT_TOL) -> None:
    """Raise InfeasibleTrajectoryError unless check() returns FEASIBLE."""
    verdict = check(initial, desired, links, tol)
    if not verdict.ok:
        raise InfeasibleTrajectoryError(verdict)
