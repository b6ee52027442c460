# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from rkode.models.adapters import Reversed, TrajectoryRecorder
from rkode.models.decay import ExponentialDecay
from rkode.models.oscillator import HarmonicOscillator
from rkode.solvers.time_integrators import RK4


def test_recorder_keeps_history():
    subject = HarmonicOscillator(n_steps=5)
    recorder = TrajectoryRecorder(subject, x0=0.0)
    iterations, x = RK4(0.0, 0.2, recorder).solve()

    assert iterations == 5
    assert len(recorder) == 6
    assert recorder.iterations == [0, 1, 2, 3, 4, 5]
    xs, states = recorder.as_arrays()
    assert xs.shape == (6,)
    assert states.shape == (6, 2)
    np.testing.assert_allclose(xs, 0.2 * np.arange(6), atol=1e-12)
    np.testing.assert_array_equal(states[0], [0.0, 1.0])
    np.testing.assert_array_equal(states[-1], subject.get_state())


def test_recorder_matches_unwrapped_run():
    plain = HarmonicOscillator(n_steps=20)
    RK4(0.0, 0.1, plain).solve()

    wrapped = HarmonicOscillator(n_steps=20)
    recorder = TrajectoryRecorder(wrapped)
    RK4(0.0, 0.1, recorder).solve()

    assert len(recorder) == 20
    np.testing.assert_array_equal(wrapped.get_state(), plain.get_state())


def test_recorder_stores_copies():
    subject = HarmonicOscillator(n_steps=1)
    recorder = TrajectoryRecorder(subject, x0=0.0)
    subject.state[0] = 42.0
    assert recorder.states[0][0] == 0.0


def test_empty_recorder_arrays():
    recorder = TrajectoryRecorder(HarmonicOscillator(n_steps=0))
    xs, states = recorder.as_arrays()
    assert xs.size == 0
    assert states.size == 0


def test_reversed_undoes_forward_run():
    subject = ExponentialDecay(rate=2.0, n_steps=10)
    RK4(0.0, 0.1, subject).solve()

    recorder = TrajectoryRecorder(subject)
    iterations, u = RK4(-1.0, 0.1, Reversed(recorder)).solve()

    assert iterations == 10
    assert -u == pytest.approx(0.0, abs=1e-12)
    # the subject sees its own variable running from 1 down to 0
    assert recorder.xs[0] == pytest.approx(0.9)
    assert recorder.xs[-1] == pytest.approx(0.0, abs=1e-12)
    assert all(a > b for a, b in zip(recorder.xs, recorder.xs[1:]))
    assert subject.get_state()[0] == pytest.approx(1.0, abs=1e-4)


def test_reversed_negates_derivative():
    subject = ExponentialDecay(rate=3.0, n_steps=1)
    rev = Reversed(subject)
    np.testing.assert_allclose(rev.derivative(-0.5, np.array([2.0])), [6.0])


def test_reversed_requires_subject():
    with pytest.raises(ValueError):
        Reversed(None)
