# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Exception hierarchy for rkode."""


class RKOdeError(Exception):
    """Base class for all rkode errors."""


class ConfigurationError(RKOdeError, ValueError):
    """Invalid integrator configuration, raised at construction time."""


class StateShapeError(RKOdeError, ValueError):
    """A derivative returned a vector whose shape differs from the state."""


class IterationOrderError(RKOdeError, RuntimeError):
    """A subject received an out-of-order iteration marker."""
