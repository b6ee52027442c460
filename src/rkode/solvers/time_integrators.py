# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import logging
import math
from collections import namedtuple

import numpy as np

from rkode.errors import ConfigurationError, StateShapeError

logger = logging.getLogger(__name__)

SolveResult = namedtuple("SolveResult", ["iterations", "x"])


class RK4:
    """Classical fourth-order Runge-Kutta integrator with a fixed step.

    The integrator never stores state: each iteration reads the subject's
    state, evaluates the four stages and commits a new vector through
    ``subject.set_state``. The loop stops when ``subject.should_stop``
    returns True before an iteration begins.

    Parameters
    ----------
    x0 : float
        Initial value of the independent variable.
    step_size : float
        Fixed step, strictly positive.
    subject : Integrable
        What is to be integrated.

    Raises
    ------
    ConfigurationError
        If ``step_size`` is not a finite positive number, ``x0`` is not
        finite, or ``subject`` is None.
    """

    def __init__(self, x0, step_size, subject):
        try:
            x0 = float(x0)
            step_size = float(step_size)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"x0 and step_size must be numbers, got {x0!r} and {step_size!r}"
            ) from exc
        if not step_size > 0:
            raise ConfigurationError(f"step_size must be positive, got {step_size}")
        if not math.isfinite(step_size):
            raise ConfigurationError(f"step_size must be finite, got {step_size}")
        if not math.isfinite(x0):
            raise ConfigurationError(f"x0 must be finite, got {x0}")
        if subject is None:
            raise ConfigurationError("subject may not be None")

        self._x0 = x0
        self._h = step_size
        self.subject = subject

    @property
    def x0(self):
        return self._x0

    @property
    def step_size(self):
        return self._h

    def _derivative(self, x, s):
        f = np.asarray(self.subject.derivative(x, s))
        if f.shape != s.shape:
            raise StateShapeError(
                f"derivative at x={x} returned shape {f.shape}, state has shape {s.shape}"
            )
        return f

    def step(self, x, state):
        """Advance ``state`` from ``x`` by one step and return the new vector.

        Does not touch the subject's stored state.
        """
        h = self._h
        s = np.asarray(state)

        f1 = self._derivative(x, s)
        z = s + h * f1 / 2
        f2 = self._derivative(x + h / 2, z)
        z = s + h * f2 / 2
        f3 = self._derivative(x + h / 2, z)
        z = s + h * f3
        f4 = self._derivative(x + h, z)

        return s + h * (f1 + 2 * f2 + 2 * f3 + f4) / 6

    def solve(self):
        """Run until the subject asks to stop.

        Returns
        -------
        SolveResult
            ``(iterations, x)``: number of completed iterations and the
            final value of the independent variable.
        """
        subject = self.subject
        h = self._h
        iteration = 0
        x = self._x0
        logger.debug("RK4 solve starting: x0=%g step_size=%g", x, h)

        while not subject.should_stop(iteration, x):
            new_state = self.step(x, subject.get_state())
            x += h
            subject.set_state(iteration + 1, x, new_state)
            iteration += 1

        logger.debug("RK4 solve complete: %d iterations, x=%g", iteration, x)
        return SolveResult(iteration, x)
