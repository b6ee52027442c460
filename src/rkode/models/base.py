# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


from abc import ABC, abstractmethod

import numpy as np

from rkode.errors import IterationOrderError


class Integrable(ABC):
    """Something that can be advanced by a fixed-step integrator.

    The subject owns its state vector. The integrator reads it through
    ``get_state`` and hands back a freshly allocated vector through
    ``set_state`` once per completed iteration.

    Both iteration markers are passed to ``set_state`` and ``should_stop``:

    iteration : int
        Number of completed iterations. ``should_stop`` sees 0 before the
        first step; ``set_state`` sees 1 for the state produced by the
        first step.
    x : float
        Independent-variable value matching the current state.
    """

    @abstractmethod
    def get_state(self):
        """Return the latest state vector."""

    @abstractmethod
    def set_state(self, iteration, x, state):
        """Replace the state with ``state``, the value at ``x``."""

    @abstractmethod
    def should_stop(self, iteration, x):
        """Return True to end the integration before the next iteration."""

    @abstractmethod
    def derivative(self, x, state):
        """Evaluate the ODE right-hand side; must return a new vector."""


class VectorSubject(Integrable):
    """Integrable holding a single float vector with a simple stop rule.

    Stops once ``n_steps`` iterations are done, or once ``x`` reaches
    ``x_end`` to within accumulation rounding (whichever is configured;
    both may be given). With
    ``check_order=True`` every ``set_state`` call must carry the iteration
    marker following the previous one (or 1, which starts a new run),
    otherwise ``IterationOrderError`` aborts the run.

    Subclasses implement ``derivative``.
    """

    def __init__(self, state, n_steps=None, x_end=None, check_order=False):
        if n_steps is None and x_end is None:
            raise ValueError("VectorSubject needs n_steps or x_end to stop")
        if n_steps is not None and n_steps < 0:
            raise ValueError(f"n_steps must be non-negative, got {n_steps}")
        self.state = np.array(state, dtype=float)
        if self.state.ndim != 1:
            raise ValueError(f"state must be 1-D, got shape {self.state.shape}")
        self.n_steps = n_steps
        self.x_end = x_end
        self.check_order = check_order
        self.last_iteration = 0

    def get_state(self):
        return self.state

    def set_state(self, iteration, x, state):
        # iteration 1 starts a new run on the same subject
        if self.check_order and iteration != 1 and iteration != self.last_iteration + 1:
            raise IterationOrderError(
                f"expected iteration {self.last_iteration + 1}, got {iteration}"
            )
        self.state = state
        self.last_iteration = iteration

    def should_stop(self, iteration, x):
        if self.n_steps is not None and iteration >= self.n_steps:
            return True
        if self.x_end is None:
            return False
        # accumulated x may fall a few ulps short of x_end
        return x >= self.x_end - 1e-9 * max(1.0, abs(self.x_end))

    def reset(self, state):
        """Start over from ``state`` (marker bookkeeping included)."""
        self.state = np.array(state, dtype=float)
        self.last_iteration = 0
