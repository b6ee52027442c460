# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# tests/test_smoke.py
def test_import():
    import rkode
    from rkode.models.base import Integrable
    from rkode.solvers.time_integrators import RK4
