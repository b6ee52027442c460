# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Command-line interface for running the reference systems."""

import argparse
import logging
import os

import numpy as np

from rkode.diagnostics import convergence_table
from rkode.io import save_run
from rkode.runner import SYSTEMS, build_step_grid, run_study
from rkode.utils import configure_logging, print_summary_table, save_study_results


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="rkode-solve",
        description="Integrate a reference ODE system with fixed-step RK4.",
    )
    parser.add_argument(
        "--system", required=True, choices=sorted(SYSTEMS),
        help="System to integrate",
    )
    parser.add_argument(
        "--step", nargs="+", type=float, required=True,
        help="Step size(s); two or more values run a convergence study",
    )
    stop = parser.add_mutually_exclusive_group(required=True)
    stop.add_argument(
        "--steps", type=int, default=None,
        help="Number of steps to take",
    )
    stop.add_argument(
        "--x-end", type=float, default=None,
        help="Integrate until the independent variable reaches this value",
    )
    parser.add_argument(
        "--x0", type=float, default=0.0,
        help="Initial value of the independent variable (default: 0.0)",
    )
    parser.add_argument(
        "--state", nargs="+", type=float, default=None,
        help="Initial state vector (default: the system's own)",
    )
    parser.add_argument(
        "--reverse", action="store_true",
        help="Integrate toward decreasing x (requires --steps)",
    )
    parser.add_argument(
        "--record", action="store_true",
        help="Keep the full trajectory in the saved results",
    )
    parser.add_argument(
        "--outdir", type=str, default=None,
        help="Write per-run JSON files, summary.csv and a log here",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)
    if args.reverse and args.steps is None:
        parser.error("--reverse requires --steps")

    configure_logging(args.outdir, run_name=args.system, level=getattr(logging, args.log_level))

    extra = {}
    if args.state is not None:
        extra["state"] = args.state
    param_list = build_step_grid(
        args.system, sorted(args.step, reverse=True),
        x_end=args.x_end, n_steps=args.steps, x0=args.x0,
        **extra,
    )
    for p in param_list:
        p["reverse"] = args.reverse
        p["record"] = args.record

    results = run_study(param_list)

    rows = []
    for r in results:
        rows.append({
            "system": args.system,
            "step_size": r["params"]["step_size"],
            "iterations": r["iterations"],
            "x": r["x"],
            "state_norm": float(np.linalg.norm(r["state"])),
        })
    print_summary_table(rows)
    for r in results:
        print(f"h={r['params']['step_size']:g}: state={np.array2string(r['state'], precision=16)}")

    if len(results) > 1:
        # finest run serves as the reference
        table = convergence_table(results[:-1], results[-1]["state"])
        print()
        print(f"{'h':>10} {'error':>12} {'order':>8}")
        for row in table:
            order = "" if row["order"] is None else f"{row['order']:.3f}"
            print(f"{row['step_size']:>10.3g} {row['error']:>12.4e} {order:>8}")

    if args.outdir is not None:
        if len(results) == 1:
            os.makedirs(args.outdir, exist_ok=True)
            save_run(results[0], os.path.join(args.outdir, f"{args.system}.json"))
        else:
            save_study_results(results, args.outdir)
        print(f"\nResults saved to {args.outdir}/")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
