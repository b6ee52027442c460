# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# tests/test_integration.py
import logging

import numpy as np
import pytest
from rkode.runner import build_step_grid, build_subject, run_study, single_run, steps_to_reach


def test_single_run_oscillator():
    result = single_run(dict(system="oscillator", step_size=0.2, n_steps=189))

    assert result["iterations"] == 189
    assert result["x"] == 37.8
    assert result["state"].tolist() == [1.0021441571397413e-01, 9.9488186473553231e-01]
    assert result["energy"] == pytest.approx(0.5, abs=2e-4)
    assert result["elapsed_s"] >= 0.0


def test_single_run_x_end():
    result = single_run(dict(system="decay", step_size=0.1, x_end=1.0))
    assert result["iterations"] == 10
    assert abs(result["state"][0] - 0.1353395484305101) < 1e-10


def test_single_run_model_params():
    result = single_run(dict(system="decay", step_size=0.01, n_steps=100, rate=1.0, state=[2.0]))
    assert result["state"][0] == pytest.approx(2.0 * np.exp(-1.0), rel=1e-9)


def test_single_run_attitude_defaults():
    result = single_run(dict(system="attitude", step_size=0.01, n_steps=10))
    assert result["state"].shape == (6,)
    assert result["momentum"] == pytest.approx(np.sqrt(5.16), abs=1e-10)


def test_single_run_records_trajectory():
    result = single_run(dict(system="kraichnan-orszag", step_size=0.01, n_steps=30, record=True))
    traj = result["trajectory"]
    assert traj["x"].shape == (31,)
    assert traj["states"].shape == (31, 3)
    np.testing.assert_array_equal(traj["states"][-1], result["state"])


def test_single_run_reverse():
    result = single_run(dict(
        system="decay", step_size=0.1, n_steps=10, x0=1.0,
        state=[np.exp(-2.0)], reverse=True, record=True,
    ))
    assert result["x"] == pytest.approx(0.0, abs=1e-12)
    assert result["state"][0] == pytest.approx(1.0, abs=1e-4)
    assert result["trajectory"]["x"][0] == 1.0
    assert result["trajectory"]["x"][-1] == pytest.approx(0.0, abs=1e-12)


def test_reverse_requires_n_steps():
    with pytest.raises(ValueError, match="reverse"):
        single_run(dict(system="decay", step_size=0.1, x_end=1.0, reverse=True))


def test_unknown_system():
    with pytest.raises(ValueError, match="Unknown system"):
        build_subject(dict(system="lorenz", step_size=0.1, n_steps=1))


def test_missing_stop_rule():
    with pytest.raises(ValueError):
        build_subject(dict(system="decay", step_size=0.1))


def test_steps_to_reach():
    assert steps_to_reach(0.0, 1.0, 0.1) == 10
    assert steps_to_reach(0.0, 1.05, 0.1) == 11
    assert steps_to_reach(0.0, 0.3, 0.01) == 30
    assert steps_to_reach(2.0, 1.0, 0.1) == 0


def test_build_step_grid():
    grid = build_step_grid("decay", [0.1, 0.05, 0.025], x_end=1.0, rate=3.0)
    assert len(grid) == 3
    assert [p["step_size"] for p in grid] == [0.1, 0.05, 0.025]
    assert all(p["rate"] == 3.0 and p["x_end"] == 1.0 for p in grid)


def test_run_study_preserves_order_and_logs(caplog):
    grid = build_step_grid("decay", [0.2, 0.1], x_end=1.0)
    with caplog.at_level(logging.INFO, logger="rkode.runner"):
        results = run_study(grid)
    assert [r["iterations"] for r in results] == [5, 10]
    messages = " ".join(caplog.messages)
    assert "Starting study" in messages
    assert "Study complete" in messages
