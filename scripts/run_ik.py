from __future__ import annotations

import os, sys
# Ensure repository root on sys.path for direct script invocation
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import argparse
import math
from typing import Callable, List, Optional, Sequence, Tuple

import yaml

from geometry.planar import LinkLengths, Point
from planning.feasibility import check
from planning.straight_line import Trajectory, sample
from metrics.kinematic_metrics import max_joint_step, path_length, reconstruction_error
from utils.yload import load_arm_config

PROMPTS = {
    "initial": (
        "Type the x coordinate of the initial position of the end-effector:",
        "Type the y coordinate of the initial position of the end-effector:",
    ),
    "desired": (
        "Type the x coordinate of the desired position of the end-effector:",
        "Type the y coordinate of the desired position of the end-effector:",
    ),
    "links": (
        "Type the length of the first link:",
        "Type the length of the second link:",
    ),
}

ANGLE_W = 13
POS_W = 15
# Same rule width as the original console table
RULE_W = 68


def _prompt_pair(key: str, input_fn: Callable[[str], str]) -> Tuple[float, float]:
    vals = []
    for prompt in PROMPTS[key]:
        print(prompt)
        vals.append(float(input_fn("").strip()))
    return vals[0], vals[1]


def _center(s: str, width: int) -> str:
    pad = width - len(s)
    if pad <= 0:
        return s
    left = " " * (pad // 2)
    return left + s + left + (" " if pad % 2 else "")


def _fixed(v: float, width: int) -> str:
    return f"{v:>{width}.3f}"


def format_table(traj: Trajectory) -> List[str]:
    """Fixed-width rows: theta1, theta2, x, y with initial/final suffixes."""
    lines = [
        " | ".join([
            _center("Angle 1 [rad]", ANGLE_W),
            _center("Angle 2 [rad]", ANGLE_W),
            _center("x, end-effector", POS_W),
            _center("y, end-effector", POS_W),
        ]),
        "-" * RULE_W,
    ]
    for w in traj:
        row = " | ".join([
            _fixed(w.angles.theta1, ANGLE_W),
            _fixed(w.angles.theta2, ANGLE_W),
            _fixed(w.position.x, POS_W),
            _fixed(w.position.y, POS_W),
        ])
        if w.tag:
            row += f" ({w.tag})"
        lines.append(row)
    return lines


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Joint angles of a 2-link planar arm along a straight-line path.")
    ap.add_argument("--initial", nargs=2, type=float, metavar=("X", "Y"))
    ap.add_argument("--desired", nargs=2, type=float, metavar=("X", "Y"))
    ap.add_argument("--links", nargs=2, type=float, metavar=("L1", "L2"))
    ap.add_argument("--cfg", default=None, help="YAML config (steps, branch, tolerance, links)")
    ap.add_argument("--steps", type=int, default=None)
    ap.add_argument("--branch", choices=["positive", "negative"], default=None)
    ap.add_argument("--tol", type=float, default=None)
    ap.add_argument("--csv", default=None, help="Write the trajectory table to CSV")
    ap.add_argument("--plot", default=None, help="Write a PNG plot of the path")
    return ap


def main(argv: Optional[Sequence[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_arm_config(args.cfg)
        steps = cfg.steps if args.steps is None else int(args.steps)
        branch = cfg.branch if args.branch is None else args.branch
        tol = cfg.tolerance if args.tol is None else float(args.tol)
        if steps < 1:
            raise ValueError(f"steps must be >= 1, got {steps}")
        if not math.isfinite(tol) or tol < 0.0:
            raise ValueError(f"tolerance must be finite and >= 0, got {tol}")

        initial = Point(*(args.initial or _prompt_pair("initial", input_fn)))
        desired = Point(*(args.desired or _prompt_pair("desired", input_fn)))
        if args.links is not None:
            links = LinkLengths(*args.links)
        elif cfg.links is not None:
            links = cfg.links
        else:
            links = LinkLengths(*_prompt_pair("links", input_fn))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Invalid input: {e}. Terminating ...")
        return 1

    verdict = check(initial, desired, links, tol)
    if not verdict.ok:
        print(f"{verdict.message} Terminating ...")
        return 1

    traj = sample(initial, desired, links, steps, branch, tol)
    for line in format_table(traj):
        print(line)
    print(
        f"\nwaypoints={len(traj)} path_length={path_length(traj):.3f} "
        f"max_joint_step={max_joint_step(traj):.3f} fk_error={reconstruction_error(traj, links):.2e}"
    )

    if args.csv:
        os.makedirs(os.path.dirname(os.path.abspath(args.csv)), exist_ok=True)
        traj.to_frame().to_csv(args.csv, index=False)
        print(f"Wrote {args.csv}")
    if args.plot:
        from viz.plots import plot_trajectory
        os.makedirs(os.path.dirname(os.path.abspath(args.plot)), exist_ok=True)
        plot_trajectory(traj, links, args.plot)
        print(f"Wrote {args.plot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
