"""Quality metrics for a sampled joint trajectory."""
from __future__ import annotations

import numpy as np

from geometry.planar import LinkLengths, forward_kinematics
from planning.straight_line import Trajectory


def reconstruction_error(traj: Trajectory, links: LinkLengths) -> float:
    """Largest distance between a waypoint position and FK of its joint angles."""
    if len(traj) == 0:
        return 0.0
    pts = np.asarray([[w.position.x, w.position.y] for w in traj], dtype=float)
    fk = np.asarray([forward_kinematics(w.angles, links).as_array() for w in traj], dtype=float)
    return float(np.max(np.linalg.norm(fk - pts, axis=1)))


def path_length(traj: Trajectory) -> float:
    """Cartesian length of the polyline through all waypoints."""
    if len(traj) < 2:
        return 0.0
    pts = np.asarray([[w.position.x, w.position.y] for w in traj], dtype=float)
    return float(np.sum(np.linalg.norm(np.diff(pts, axis=0), axis=1)))


def max_joint_step(traj: Trajectory) -> float:
    """Largest per-joint angle change between consecutive waypoints (no unwrapping)."""
    if len(traj) < 2:
        return 0.0
    q = np.asarray([[w.angles.theta1, w.angles.theta2] for w in traj], dtype=float)
    return float(np.max(np.abs(np.diff(q, axis=0))))
