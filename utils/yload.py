"""YAML config loading for the arm calculator.

Configs are plain mappings; missing keys fall back to defaults:
- links: [L1, L2] (optional, may come from the command line instead)
- steps: number of path segments (default 50)
- branch: 'positive' or 'negative' elbow solution (default 'positive')
- tolerance: float slack used by the feasibility checks (default 1e-9)
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from control.ik_analytic import BRANCHES
from geometry.planar import LinkLengths
from planning.feasibility import DEFAULT_TOL
from planning.straight_line import DEFAULT_STEPS


def load(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


@dataclass
class ArmConfig:
    """Run settings for one trajectory computation."""

    links: Optional[LinkLengths] = None
    steps: int = DEFAULT_STEPS
    branch: str = "positive"
    tolerance: float = DEFAULT_TOL


def arm_config_from_dict(cfg: Dict[str, Any]) -> ArmConfig:
    links = None
    raw_links = cfg.get("links")
    if raw_links is not None:
        if len(raw_links) != 2:
            raise ValueError(f"links must have two entries, got {raw_links}")
        links = LinkLengths(float(raw_links[0]), float(raw_links[1]))
    steps = int(cfg.get("steps", DEFAULT_STEPS))
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    branch = str(cfg.get("branch", "positive"))
    if branch not in BRANCHES:
        raise ValueError(f"branch must be one of {BRANCHES}, got {branch}")
    tol = float(cfg.get("tolerance", DEFAULT_TOL))
    if not math.isfinite(tol) or tol < 0.0:
        raise ValueError(f"tolerance must be finite and >= 0, got {tol}")
    return ArmConfig(links=links, steps=steps, branch=branch, tolerance=tol)


def load_arm_config(path: Optional[str]) -> ArmConfig:
    """Read an ArmConfig from YAML; None gives the defaults."""
    if path is None:
        return ArmConfig()
    return arm_config_from_dict(load(path))
