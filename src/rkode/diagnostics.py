# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

# src/rkode/diagnostics.py
import numpy as np

from rkode.solvers.time_integrators import RK4


def observed_order(step_sizes, errors):
    """Log-log slope of error against step size between successive runs.

    For a p-th order method with errors dominated by truncation,
    ``errors[i] / errors[i+1] ~ (step_sizes[i] / step_sizes[i+1]) ** p``.

    Returns:
        array of length len(step_sizes) - 1.
    """
    h = np.asarray(step_sizes, dtype=float)
    e = np.asarray(errors, dtype=float)
    if h.shape != e.shape:
        raise ValueError(f"step_sizes and errors differ in length: {h.shape} vs {e.shape}")
    if np.any(e <= 0):
        raise ValueError("errors must be positive to take logarithms")
    return np.log(e[:-1] / e[1:]) / np.log(h[:-1] / h[1:])


def convergence_table(results, reference):
    """Tabulate max-norm error and observed order for a set of runs.

    Args:
        results: result dicts from single_run, ordered coarse to fine.
        reference: reference final state (exact solution or a much finer run).

    Returns:
        list of row dicts with step_size, error and order (None for the
        first row).
    """
    reference = np.asarray(reference, dtype=float)
    steps = [r["params"]["step_size"] for r in results]
    errors = [float(np.max(np.abs(np.asarray(r["state"]) - reference))) for r in results]

    orders = [None] * len(results)
    if len(results) > 1 and all(e > 0 for e in errors):
        orders[1:] = [float(p) for p in observed_order(steps, errors)]

    return [
        {"step_size": h, "error": e, "order": p}
        for h, e, p in zip(steps, errors, orders)
    ]


def invariant_drift(subject, invariant, step_sizes, x0=0.0):
    """Integrate ``subject`` repeatedly and track a conserved quantity.

    Each step size gets its own RK4 run, continuing from the state left by
    the previous run; the subject's stop predicate decides each run's
    length.

    Args:
        subject: the Integrable to advance.
        invariant: callable(subject) -> float, e.g. angular momentum.
        step_sizes: iterable of step sizes, run in order.
        x0: starting value of the independent variable for each run.

    Returns:
        list of |invariant - initial invariant| after each run.
    """
    initial = invariant(subject)
    drifts = []
    for h in step_sizes:
        RK4(x0, h, subject).solve()
        drifts.append(abs(invariant(subject) - initial))
    return drifts
