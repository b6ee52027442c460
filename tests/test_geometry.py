# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
import pytest
from rkode.geometry import (
    cartesian_to_spherical,
    deg2rad,
    dot,
    norm,
    rad2deg,
    spherical_to_cartesian,
)


def test_norm_and_dot():
    assert norm([3.0, 4.0, 12.0]) == pytest.approx(13.0)
    assert dot([1.0, 2.0, 3.0], [4.0, -5.0, 6.0]) == pytest.approx(12.0)


def test_spherical_axes():
    np.testing.assert_allclose(spherical_to_cartesian([2.0, 0.0, 0.0]), [0.0, 0.0, 2.0], atol=1e-15)
    np.testing.assert_allclose(
        spherical_to_cartesian([1.0, np.pi / 2, np.pi / 2]), [0.0, 1.0, 0.0], atol=1e-15
    )


def test_cartesian_to_spherical_known_point():
    r, theta, phi = cartesian_to_spherical([1.0, 1.0, 0.0])
    assert r == pytest.approx(np.sqrt(2.0))
    assert theta == pytest.approx(np.pi / 2)
    assert phi == pytest.approx(np.pi / 4)


def test_origin_maps_to_zeros():
    np.testing.assert_array_equal(cartesian_to_spherical([0.0, 0.0, 0.0]), [0.0, 0.0, 0.0])


def test_spherical_roundtrip():
    v = np.array([-1.5, 0.25, 3.0])
    np.testing.assert_allclose(spherical_to_cartesian(cartesian_to_spherical(v)), v, atol=1e-14)


def test_angle_conversions():
    assert deg2rad(180.0) == pytest.approx(np.pi)
    assert rad2deg(np.pi / 2) == pytest.approx(90.0)
    assert rad2deg(deg2rad(37.5)) == pytest.approx(37.5)
