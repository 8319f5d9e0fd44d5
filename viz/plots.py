"""Matplotlib offline plots of an arm trajectory."""
from __future__ import annotations

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from geometry.planar import LinkLengths, elbow_position
from planning.straight_line import Trajectory


def plot_trajectory(traj: Trajectory, links: LinkLengths, out_png: str, poses: int = 5) -> None:
    """Draw the workspace annulus, the end-effector path and a few arm poses.

    ``poses`` arm configurations are drawn evenly along the path (endpoints included).
    """
    inner, outer = links.inner_radius, links.outer_radius
    fig, ax = plt.subplots(figsize=(6, 6))
    t = np.linspace(0.0, 2.0 * np.pi, 361)
    ax.plot(outer * np.cos(t), outer * np.sin(t), "k--", lw=1, label="outer reach")
    if inner > 0.0:
        ax.plot(inner * np.cos(t), inner * np.sin(t), "k:", lw=1, label="inner reach")

    if len(traj) == 0:
        ax.set_title("Empty trajectory")
    else:
        pts = np.asarray([[w.position.x, w.position.y] for w in traj], dtype=float)
        ax.plot(pts[:, 0], pts[:, 1], "-", color="tab:blue", label="end-effector path")
        ax.plot([pts[0, 0]], [pts[0, 1]], marker="o", color="tab:green", label="initial")
        ax.plot([pts[-1, 0]], [pts[-1, 1]], marker="x", color="tab:red", label="final")
        idx = np.unique(np.linspace(0, len(traj) - 1, max(2, poses)).round().astype(int))
        for i in idx:
            w = traj[int(i)]
            e = elbow_position(w.angles, links)
            ax.plot([0.0, e.x, w.position.x], [0.0, e.y, w.position.y], "o-", color="gray", alpha=0.6, lw=2)
        ax.set_title(f"2-link arm, {len(traj)} waypoints")

    lim = outer * 1.1
    ax.set_xlim(-lim, lim)
    ax.set_ylim(-lim, lim)
    ax.set_aspect("equal")
    ax.grid(True)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.legend(loc="upper right", fontsize=8)
    fig.tight_layout()
    fig.savefig(out_png, dpi=150)
    plt.close(fig)
