# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT


import numpy as np

from rkode.models.base import VectorSubject


def skew(v):
    """Cross-product matrix: skew(a) @ b == np.cross(a, b)."""
    return np.array([
        [0.0, -v[2], v[1]],
        [v[2], 0.0, -v[0]],
        [-v[1], v[0], 0.0],
    ])


def mrp_shadow(sigma):
    """Switch a modified Rodrigues parameter set to its shadow set if |sigma| > 1."""
    s2 = float(np.dot(sigma, sigma))
    if s2 > 1.0:
        return -sigma / s2
    return sigma


class RigidBodyAttitude(VectorSubject):
    """Torque-free rigid body: MRP kinematics plus Euler's equations.

    State layout: ``[sigma1, sigma2, sigma3, w1, w2, w3]`` with ``sigma`` the
    modified Rodrigues parameters of the body frame and ``w`` the body
    angular velocity (rad/s).

        sigma' = 1/4 [(1 - |sigma|^2) I + 2 [sigma x] + 2 sigma sigma^T] w
        w'     = J^-1 (-w x J w)

    ``set_state`` keeps ``|sigma| <= 1`` by switching to the shadow set.

    Parameters
    ----------
    sigma : array-like, shape (3,)
    omega : array-like, shape (3,)
    inertia : array-like, 9 values or shape (3, 3)
        Inertia tensor ``J`` in body axes.
    """

    def __init__(self, sigma, omega, inertia, **kwargs):
        sigma = np.asarray(sigma, dtype=float)
        omega = np.asarray(omega, dtype=float)
        if sigma.shape != (3,) or omega.shape != (3,):
            raise ValueError(
                f"sigma and omega must have shape (3,), got {sigma.shape} and {omega.shape}"
            )
        self.inertia = np.asarray(inertia, dtype=float).reshape(3, 3)
        self.inertia_inv = np.linalg.inv(self.inertia)
        super().__init__(np.concatenate((mrp_shadow(sigma), omega)), **kwargs)

    @property
    def sigma(self):
        return self.state[:3]

    @property
    def omega(self):
        return self.state[3:]

    def set_state(self, iteration, x, state):
        state = np.concatenate((mrp_shadow(state[:3]), state[3:]))
        super().set_state(iteration, x, state)

    def derivative(self, x, state):
        sigma = state[:3]
        w = state[3:]
        s2 = float(np.dot(sigma, sigma))
        B = (1.0 - s2) * np.eye(3) + 2.0 * skew(sigma) + 2.0 * np.outer(sigma, sigma)
        sigma_dot = 0.25 * B @ w
        w_dot = self.inertia_inv @ (-np.cross(w, self.inertia @ w))
        return np.concatenate((sigma_dot, w_dot))

    def momentum(self):
        """Magnitude of the angular momentum ``|J w|``."""
        return float(np.linalg.norm(self.inertia @ self.omega))

    def kinetic_energy(self):
        w = self.omega
        return 0.5 * float(w @ self.inertia @ w)
