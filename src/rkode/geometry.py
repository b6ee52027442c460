# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Coordinate helpers used by derivative functions.

Spherical vectors are ``[r, theta, phi]`` with ``theta`` the polar angle
measured from +z and ``phi`` the azimuth measured from +x.
"""

import numpy as np


def norm(v):
    """Euclidean norm of a 3-vector."""
    v = np.asarray(v, dtype=float)
    return float(np.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2]))


def dot(a, b):
    """Inner product of two 3-vectors."""
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def spherical_to_cartesian(a):
    r, theta, phi = (float(c) for c in a)
    st, ct = np.sin(theta), np.cos(theta)
    sp, cp = np.sin(phi), np.cos(phi)
    return np.array([r * st * cp, r * st * sp, r * ct])


def cartesian_to_spherical(a):
    """Inverse of ``spherical_to_cartesian``; the origin maps to zeros."""
    a = np.asarray(a, dtype=float)
    r = norm(a)
    if r == 0:
        return np.zeros(3)
    return np.array([r, np.arccos(a[2] / r), np.arctan2(a[1], a[0])])


def deg2rad(a):
    return a / 360.0 * 2 * np.pi


def rad2deg(a):
    return a / (2 * np.pi) * 360.0
