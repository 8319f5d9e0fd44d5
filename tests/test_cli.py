from __future__ import annotations

import io
import os
import tempfile
from contextlib import redirect_stdout
from typing import List, Tuple

import pandas as pd

from scripts.run_ik import format_table, main as run_ik
from geometry.planar import LinkLengths, Point
from planning.straight_line import sample


def _run(argv: List[str], answers: Tuple[str, ...] = ()) -> Tuple[int, str]:
    it = iter(answers)
    buf = io.StringIO()
    with redirect_stdout(buf):
        code = run_ik(argv, input_fn=lambda _: next(it))
    return code, buf.getvalue()


def test_table_layout():
    traj = sample(Point(1.0, 1.0), Point(-1.0, 1.0), LinkLengths(1.0, 1.0), steps=4)
    lines = format_table(traj)
    assert lines[0] == "Angle 1 [rad] | Angle 2 [rad] | x, end-effector | y, end-effector"
    assert lines[1] == "-" * 68
    assert len(lines) == 2 + 5
    assert lines[2].endswith("(initial)")
    assert lines[-1].endswith("(final)")
    assert lines[-1].startswith("        1.571 |         1.571 |          -1.000 |           1.000")
    assert not lines[3].endswith(")")


def test_feasible_run_prints_table():
    code, out = _run(["--initial", "1", "1", "--desired", "-1", "1", "--links", "1", "1", "--steps", "4"])
    assert code == 0
    assert "Angle 1 [rad]" in out
    assert out.count("(initial)") == 1
    assert out.count("(final)") == 1
    assert "waypoints=5" in out


def test_infeasible_run_halts():
    code, out = _run(["--initial", "0", "0", "--desired", "2.5", "0", "--links", "3", "1"])
    assert code == 1
    assert "not in the operable range" in out
    assert "Terminating" in out
    assert "Angle 1 [rad]" not in out


def test_singular_run_halts():
    code, out = _run(["--initial", "1", "0", "--desired", "-1", "0", "--links", "1", "1"])
    assert code == 1
    assert "singular point" in out


def test_tolerance_band_endpoint_has_no_nan_rows():
    code, out = _run([
        "--initial", "2.0005", "0", "--desired", "0", "1.5", "--links", "1", "1",
        "--steps", "4", "--tol", "0.001",
    ])
    assert code == 0
    assert "nan" not in out


def test_invalid_link_length_halts():
    code, out = _run(["--initial", "1", "1", "--desired", "-1", "1", "--links", "0", "1"])
    assert code == 1
    assert "Link length l1" in out
    assert "Terminating" in out


def test_non_numeric_answer_halts():
    code, out = _run(["--steps", "2"], answers=("one", "1"))
    assert code == 1
    assert "Terminating" in out
    assert "Angle 1 [rad]" not in out


def test_bad_config_halts():
    code, out = _run(["--cfg", os.path.join(tempfile.gettempdir(), "no_such_arm_config.yaml"),
                      "--initial", "1", "1", "--desired", "-1", "1", "--links", "1", "1"])
    assert code == 1
    assert "Terminating" in out


def test_prompts_for_missing_pairs():
    code, out = _run(["--steps", "2"], answers=("1", "1", "-1", "1", "1", "1"))
    assert code == 0
    assert "Type the x coordinate of the initial position of the end-effector:" in out
    assert "Type the length of the second link:" in out
    assert "waypoints=3" in out


def test_csv_and_plot_outputs():
    with tempfile.TemporaryDirectory() as d:
        csv_path = os.path.join(d, "traj.csv")
        png_path = os.path.join(d, "traj.png")
        code, _ = _run([
            "--initial", "2", "1", "--desired", "-1", "2", "--links", "2", "1",
            "--steps", "10", "--csv", csv_path, "--plot", png_path,
        ])
        assert code == 0
        df = pd.read_csv(csv_path)
        assert len(df) == 11
        assert list(df.columns) == ["theta1", "theta2", "x", "y", "tag"]
        assert os.path.getsize(png_path) > 0


def main() -> None:
    test_table_layout()
    test_feasible_run_prints_table()
    test_infeasible_run_halts()
    test_singular_run_halts()
    test_tolerance_band_endpoint_has_no_nan_rows()
    test_invalid_link_length_halts()
    test_non_numeric_answer_halts()
    test_bad_config_halts()
    test_prompts_for_missing_pairs()
    test_csv_and_plot_outputs()


if __name__ == "__main__":
    main()
