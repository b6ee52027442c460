# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


import numpy as np

from rkode.models.base import VectorSubject


class KraichnanOrszag(VectorSubject):
    """Kraichnan-Orszag three-mode system.

        y0' =  y0 * y2
        y1' = -y1 * y2
        y2' = -y0^2 + y1^2
    """

    def __init__(self, state=(1.0, 0.4, 0.2), **kwargs):
        super().__init__(state, **kwargs)
        if len(self.state) != 3:
            raise ValueError(f"Kraichnan-Orszag state must have 3 components, got {len(self.state)}")

    def derivative(self, x, state):
        y0, y1, y2 = state
        return np.array([y0 * y2, -y1 * y2, -y0 * y0 + y1 * y1])
