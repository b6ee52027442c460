# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Wrappers that change how a subject is seen by the integrator."""

import numpy as np

from rkode.models.base import Integrable


class Reversed(Integrable):
    """Integrate ``subject`` backward while the integrator steps forward.

    The integrator advances ``u = -x`` with a positive step, so start it at
    ``-x_start``. The wrapped subject always sees its own variable ``x``:
    ``derivative``, ``set_state`` and ``should_stop`` receive ``-u``, and the
    derivative is negated (``ds/du = -ds/dx``). The subject's stop predicate
    must account for ``x`` decreasing.

    Usage:
        rev = Reversed(subject)
        n, u = RK4(-x_start, h, rev).solve()
        x_final = -u
    """

    def __init__(self, subject):
        if subject is None:
            raise ValueError("Reversed needs a subject")
        self.subject = subject

    def get_state(self):
        return self.subject.get_state()

    def set_state(self, iteration, x, state):
        self.subject.set_state(iteration, -x, state)

    def should_stop(self, iteration, x):
        return self.subject.should_stop(iteration, -x)

    def derivative(self, x, state):
        return -np.asarray(self.subject.derivative(-x, state), dtype=float)


class TrajectoryRecorder(Integrable):
    """Forward every call to ``subject`` and keep the accepted states.

    The history lives in the recorder, so it costs memory proportional to
    the number of iterations.

    Attributes:
        iterations: list of iteration markers, one per accepted state
        xs: list of independent-variable values
        states: list of state vectors (copies)
    """

    def __init__(self, subject, x0=None):
        self.subject = subject
        self.iterations = []
        self.xs = []
        self.states = []
        if x0 is not None:
            self._record(0, x0, subject.get_state())

    def _record(self, iteration, x, state):
        self.iterations.append(iteration)
        self.xs.append(float(x))
        self.states.append(np.array(state, dtype=float))

    def get_state(self):
        return self.subject.get_state()

    def set_state(self, iteration, x, state):
        self.subject.set_state(iteration, x, state)
        self._record(iteration, x, self.subject.get_state())

    def should_stop(self, iteration, x):
        return self.subject.should_stop(iteration, x)

    def derivative(self, x, state):
        return self.subject.derivative(x, state)

    def __len__(self):
        return len(self.states)

    def as_arrays(self):
        """Return ``(x, states)`` as arrays of shape (n,) and (n, dim)."""
        if not self.states:
            return np.empty(0), np.empty((0, 0))
        return np.array(self.xs), np.vstack(self.states)
