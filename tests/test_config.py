import os
import subprocess
import sys

import pytest

from pathtracer import config


def test_positive_float_default(monkeypatch):
    monkeypatch.delenv("PATHTRACER_T_MIN", raising=False)
    assert config.positive_float("PATHTRACER_T_MIN", "0.001") == 0.001


def test_positive_float_from_environment(monkeypatch):
    monkeypatch.setenv("PATHTRACER_T_MIN", "0.01")
    assert config.positive_float("PATHTRACER_T_MIN", "0.001") == 0.01


@pytest.mark.parametrize("raw", ["0", "-1", "nan", "inf", "-inf", "tiny"])
def test_positive_float_rejects(monkeypatch, raw):
    monkeypatch.setenv("PATHTRACER_T_MIN", raw)
    with pytest.raises(ValueError, match="PATHTRACER_T_MIN"):
        config.positive_float("PATHTRACER_T_MIN", "0.001")


def test_non_positive_t_min_fails_at_import():
    env = dict(os.environ, PATHTRACER_T_MIN="-1")
    result = subprocess.run(
        [sys.executable, "-c", "from pathtracer.camera.camera import Camera"],
        env=env, capture_output=True, text=True,
    )
    assert result.returncode != 0
    assert "PATHTRACER_T_MIN" in result.stderr


def test_hit_bound_is_strictly_positive():
    from pathtracer.camera.camera import Camera
    assert Camera.T_BOUNDS.min > 0
