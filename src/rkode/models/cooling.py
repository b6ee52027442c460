# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


import numpy as np

from rkode.models.base import VectorSubject


class RadiativeCooling(VectorSubject):
    """Temperature of a body cooling by radiation towards an ambient level.

        dT/dt = -alpha * (T^4 - ambient^4)

    Defaults reproduce the classic textbook ball (T0 = 1200 K,
    ambient 300 K, alpha = 2.2067e-12).
    """

    def __init__(self, alpha=2.2067e-12, ambient=300.0, state=(1200.0,), **kwargs):
        super().__init__(state, **kwargs)
        self.alpha = alpha
        self.ambient4 = ambient**4

    def derivative(self, x, state):
        return np.array([-self.alpha * (state[0] ** 4 - self.ambient4)])
