from __future__ import annotations

import os
import tempfile

from geometry.planar import LinkLengths
from utils.yload import ArmConfig, arm_config_from_dict, load, load_arm_config

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _write(text: str) -> str:
    fd, path = tempfile.mkstemp(suffix=".yaml")
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def test_defaults():
    cfg = load_arm_config(None)
    assert cfg == ArmConfig()
    assert cfg.steps == 50
    assert cfg.branch == "positive"
    assert cfg.links is None


def test_shipped_config():
    cfg = load_arm_config(os.path.join(REPO, "configs", "arm.yaml"))
    assert cfg.steps == 50
    assert cfg.branch == "positive"
    assert cfg.tolerance == 1e-9


def test_full_config():
    path = _write("links: [3.0, 1.0]\nsteps: 8\nbranch: negative\ntolerance: 0.001\n")
    try:
        cfg = load_arm_config(path)
    finally:
        os.remove(path)
    assert cfg.links == LinkLengths(3.0, 1.0)
    assert cfg.steps == 8
    assert cfg.branch == "negative"
    assert cfg.tolerance == 0.001


def test_empty_file_is_defaults():
    path = _write("")
    try:
        assert load(path) == {}
        assert load_arm_config(path) == ArmConfig()
    finally:
        os.remove(path)


def test_invalid_values():
    bad = [
        {"steps": 0},
        {"branch": "up"},
        {"tolerance": -1.0},
        {"links": [1.0]},
        {"links": [1.0, 0.0]},
    ]
    for d in bad:
        try:
            arm_config_from_dict(d)
        except ValueError:
            continue
        raise AssertionError(f"expected ValueError for {d}")


def test_non_mapping_rejected():
    path = _write("- 1\n- 2\n")
    try:
        load(path)
    except ValueError:
        pass
    else:
        raise AssertionError("expected ValueError for a list config")
    finally:
        os.remove(path)


def main() -> None:
    test_defaults()
    test_shipped_config()
    test_full_config()
    test_empty_file_is_defaults()
    test_invalid_values()
    test_non_mapping_rejected()


if __name__ == "__main__":
    main()
