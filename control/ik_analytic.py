"""Closed-form IK for a 2-link planar arm (law of cosines)."""
from __future__ import annotations

import numpy as np

from geometry.planar import JointAngles, LinkLengths, Point

BRANCHES = ("positive", "negative")

# Rounding slack on the arccos argument for targets on the workspace boundary
_COS_SLACK = 1e-9


def solve(position: Point, links: LinkLengths, branch: str = "positive") -> JointAngles:
    """Joint angles that place the end-effector at ``position``.

    Args:
        position: Target end-effector position.
        links: Link lengths of the arm.
        branch: 'positive' keeps theta2 in [0, pi] (elbow fixed by convention),
            'negative' mirrors the elbow to theta2 in [-pi, 0].
    Returns:
        JointAngles. Targets outside the reachable annulus give NaN angles;
        validate with planning.feasibility.check first.
    """
    if branch not in BRANCHES:
        raise ValueError(f"Unknown IK branch: {branch}")
    x, y = float(position.x), float(position.y)
    l1, l2 = float(links.l1), float(links.l2)
    cos_q2 = (x * x + y * y - l1 * l1 - l2 * l2) / (2 * l1 * l2)
    if -1.0 - _COS_SLACK <= cos_q2 <= 1.0 + _COS_SLACK:
        cos_q2 = float(np.clip(cos_q2, -1.0, 1.0))
        q2 = float(np.arccos(cos_q2))
    else:
        q2 = float("nan")
    if branch == "negative":
        q2 = -q2
    k1 = l1 + l2 * np.cos(q2)
    k2 = l2 * np.sin(q2)
    q1 = float(np.arctan2(y, x) - np.arctan2(k2, k1))
    return JointAngles(q1, q2)
