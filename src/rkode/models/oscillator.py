# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


import numpy as np

from rkode.models.base import VectorSubject


class HarmonicOscillator(VectorSubject):
    """Undamped oscillator y'' = -omega^2 y as the system [y, y']."""

    def __init__(self, omega=1.0, state=(0.0, 1.0), **kwargs):
        super().__init__(state, **kwargs)
        if len(self.state) != 2:
            raise ValueError(f"oscillator state must have 2 components, got {len(self.state)}")
        self.omega = omega

    def derivative(self, x, state):
        return np.array([state[1], -self.omega**2 * state[0]])

    def energy(self, state=None):
        """0.5 * (y'^2 + omega^2 y^2), conserved by the exact flow."""
        y = self.state if state is None else state
        return 0.5 * (y[1] ** 2 + self.omega**2 * y[0] ** 2)
