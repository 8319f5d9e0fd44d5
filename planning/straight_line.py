"""Straight-line Cartesian path sampled into IK waypoints."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import pandas as pd

from control.ik_analytic import solve
from geometry.planar import JointAngles, LinkLengths, Point, norm
from planning.feasibility import DEFAULT_TOL, check

DEFAULT_STEPS = 50


@dataclass(frozen=True)
class Waypoint:
    """One sample of the path: joint angles, end-effector position and display tag."""

    angles: JointAngles
    position: Point
    tag: Optional[str] = None


@dataclass(frozen=True)
class Trajectory:
    """Ordered waypoints from the initial to the desired position."""

    waypoints: Tuple[Waypoint, ...]

    def __len__(self) -> int:
        return len(self.waypoints)

    def __iter__(self) -> Iterator[Waypoint]:
        return iter(self.waypoints)

    def __getitem__(self, i: int) -> Waypoint:
        return self.waypoints[i]

    def positions(self) -> List[Point]:
        return [w.position for w in self.waypoints]

    def angles(self) -> List[JointAngles]:
        return [w.angles for w in self.waypoints]

    def to_frame(self) -> pd.DataFrame:
        """Tabular view with columns theta1, theta2, x, y, tag."""
        rows = [
            {
                "theta1": w.angles.theta1,
                "theta2": w.angles.theta2,
                "x": w.position.x,
                "y": w.position.y,
                "tag": w.tag,
            }
            for w in self.waypoints
        ]
        return pd.DataFrame(rows, columns=["theta1", "theta2", "x", "y", "tag"])


def _snap_to_annulus(p: Point, links: LinkLengths, tol: float) -> Point:
    """Pull a point lying within ``tol`` outside the annulus radially onto its edge."""
    r = norm(p.x, p.y)
    inner, outer = links.inner_radius, links.outer_radius
    if outer < r <= outer + tol:
        return p * (outer / r)
    if 0.0 < r < inner and r >= inner - tol:
        return p * (inner / r)
    return p


def sample(
    initial: Point,
    desired: Point,
    links: LinkLengths,
    steps: int = DEFAULT_STEPS,
    branch: str = "positive",
    tol: float = DEFAULT_TOL,
) -> Trajectory:
    """Interpolate ``steps`` segments from initial to desired and solve IK at each point.

    Returns steps+1 waypoints; the first is tagged 'initial', the last 'final'.
    No feasibility check is done here. Points up to ``tol`` outside the
    annulus (accepted by check with the same ``tol``) are solved at the
    nearest annulus point; the waypoint keeps the interpolated position.
    """
    steps = int(steps)
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    delta = desired - initial

    def _solve(p: Point) -> JointAngles:
        return solve(_snap_to_annulus(p, links, tol), links, branch)

    waypoints = [Waypoint(_solve(initial), initial, "initial")]
    for i in range(1, steps + 1):
        p = initial + delta * (i / steps)
        waypoints.append(Waypoint(_solve(p), p, "final" if i == steps else None))
    return Trajectory(tuple(waypoints))


def plan_trajectory(
    initial: Point,
    desired: Point,
    links: LinkLengths,
    steps: int = DEFAULT_STEPS,
    branch: str = "positive",
    tol: float = DEFAULT_TOL,
) -> Dict[str, object]:
    """Check feasibility, then sample the path.

    Returns a dict with success, verdict, message and trajectory (None when
    the path is not feasible).
    """
    verdict = check(initial, desired, links, tol)
    if not verdict.ok:
        return {"success": False, "verdict": verdict, "message": verdict.message, "trajectory": None}
    traj = sample(initial, desired, links, steps, branch, tol)
    return {"success": True, "verdict": verdict, "message": verdict.message, "trajectory": traj}
