# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


import numpy as np

from rkode.models.base import VectorSubject


class ExponentialDecay(VectorSubject):
    """ds/dx = -rate * s, exact solution s0 * exp(-rate * x)."""

    def __init__(self, rate=2.0, state=(1.0,), **kwargs):
        super().__init__(state, **kwargs)
        self.rate = rate

    def derivative(self, x, state):
        return -self.rate * state

    def exact(self, x, x0=0.0, s0=1.0):
        return s0 * np.exp(-self.rate * (x - x0))
