# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/rkode/runner.py
import logging
import math
import time

from rkode.models.adapters import Reversed, TrajectoryRecorder
from rkode.models.attitude import RigidBodyAttitude
from rkode.models.cooling import RadiativeCooling
from rkode.models.decay import ExponentialDecay
from rkode.models.kraichnan_orszag import KraichnanOrszag
from rkode.models.oscillator import HarmonicOscillator
from rkode.solvers.time_integrators import RK4

logger = logging.getLogger(__name__)

# name -> (subject class, model parameters accepted from params, defaults)
SYSTEMS = {
    "decay": (ExponentialDecay, ("rate", "state"), {}),
    "oscillator": (HarmonicOscillator, ("omega", "state"), {}),
    "kraichnan-orszag": (KraichnanOrszag, ("state",), {}),
    "cooling": (RadiativeCooling, ("alpha", "ambient", "state"), {}),
    "attitude": (
        RigidBodyAttitude,
        ("sigma", "omega", "inertia"),
        dict(
            sigma=[0.3, -0.4, 0.5],
            omega=[0.1, 0.4, -0.2],
            inertia=[10.0, 0, 0, 0, 5.0, 0, 0, 0, 2.0],
        ),
    ),
}


def steps_to_reach(x0, x_end, step_size):
    """Number of fixed steps needed to go from x0 to x_end (at least 0)."""
    n = math.ceil((x_end - x0) / step_size - 1e-9)
    return max(n, 0)


def build_subject(params):
    """Instantiate the subject described by ``params``.

    Args:
        params: dict with ``system`` plus ``n_steps`` or ``x_end`` (and
            ``step_size``/``x0`` when ``x_end`` is used), and any model
            parameters listed in SYSTEMS.

    Returns:
        the subject, stopping after a whole number of steps.
    """
    name = params["system"]
    if name not in SYSTEMS:
        raise ValueError(f"Unknown system: {name!r} (choose from {sorted(SYSTEMS)})")
    cls, keys, defaults = SYSTEMS[name]

    n_steps = params.get("n_steps")
    if n_steps is None:
        if params.get("x_end") is None:
            raise ValueError("params need n_steps or x_end")
        n_steps = steps_to_reach(params.get("x0", 0.0), params["x_end"], params["step_size"])

    kwargs = dict(defaults)
    kwargs.update({k: params[k] for k in keys if params.get(k) is not None})
    return cls(n_steps=n_steps, check_order=params.get("check_order", False), **kwargs)


def single_run(params):
    """Integrate one system with one step size.

    Args:
        params: dict with system, step_size, x0 (default 0), n_steps or
            x_end, optional model parameters, ``reverse`` (integrate toward
            decreasing x) and ``record`` (keep the trajectory).

    Returns:
        dict with params, iterations, final x, final state, elapsed_s, the
        system's invariant where it has one, and the trajectory if recorded.
    """
    x0 = params.get("x0", 0.0)
    reverse = params.get("reverse", False)
    if reverse and params.get("n_steps") is None:
        raise ValueError("reverse runs need n_steps")

    subject = build_subject(params)
    outer = Reversed(subject) if reverse else subject
    recorder = None
    if params.get("record", False):
        recorder = TrajectoryRecorder(outer, x0=-x0 if reverse else x0)
        outer = recorder

    t0 = time.perf_counter()
    iterations, x = RK4(-x0 if reverse else x0, params["step_size"], outer).solve()
    elapsed = time.perf_counter() - t0
    if reverse:
        x = -x

    result = {
        "params": dict(params),
        "iterations": iterations,
        "x": x,
        "state": subject.get_state().copy(),
        "elapsed_s": elapsed,
    }
    if hasattr(subject, "momentum"):
        result["momentum"] = subject.momentum()
    elif hasattr(subject, "energy"):
        result["energy"] = subject.energy()

    if recorder is not None:
        xs, states = recorder.as_arrays()
        result["trajectory"] = {"x": -xs if reverse else xs, "states": states}
    return result


def build_step_grid(system, step_sizes, x_end=None, n_steps=None, x0=0.0, **model_params):
    """Build list of parameter dicts, one per step size."""
    grid = []
    for h in step_sizes:
        grid.append(dict(
            system=system, step_size=h, x0=x0,
            x_end=x_end, n_steps=n_steps,
            **model_params,
        ))
    return grid


def run_study(param_list):
    """Run each case in turn on the calling thread.

    Returns:
        list of result dicts, in the same order as param_list.
    """
    n = len(param_list)
    logger.info("Starting study: %d cases", n)

    results = []
    for i, params in enumerate(param_list):
        r = single_run(params)
        results.append(r)
        logger.debug(
            "Case %d/%d done: system=%s h=%s -> %d iterations, x=%g",
            i + 1, n, params["system"], params["step_size"], r["iterations"], r["x"],
        )

    logger.info("Study complete: %d cases finished", n)
    return results
