# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Shared utilities for study runs: save/load results, logging, summary tables."""

import csv
import logging
import os

import numpy as np

from rkode.io import save_run


def _case_name(params):
    return f"{params['system']}_h{params['step_size']}"


def save_study_results(results, outdir):
    """Save per-case JSON files and a summary CSV.

    Args:
        results: list of result dicts from single_run.
        outdir: output directory path.

    Returns:
        list of summary row dicts.
    """
    os.makedirs(outdir, exist_ok=True)
    summary_rows = []

    for r in results:
        p = r["params"]
        save_run(r, os.path.join(outdir, _case_name(p) + ".json"))

        summary_rows.append({
            "system": p["system"],
            "step_size": p["step_size"],
            "iterations": r["iterations"],
            "x": r["x"],
            "state_norm": float(np.linalg.norm(r["state"])),
            "elapsed_s": r["elapsed_s"],
        })

    if summary_rows:
        csv_path = os.path.join(outdir, "summary.csv")
        with open(csv_path, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=summary_rows[0].keys())
            writer.writeheader()
            writer.writerows(summary_rows)

    return summary_rows


def load_study_summary(csv_path):
    """Read a summary CSV into a list of dicts with proper types.

    'iterations' is converted to int; step_size, x, state_norm and
    elapsed_s to float.
    """
    rows = []
    with open(csv_path, "r") as f:
        reader = csv.DictReader(f)
        for row in reader:
            typed = {}
            for k, v in row.items():
                if k in ("step_size", "x", "state_norm", "elapsed_s"):
                    typed[k] = float(v)
                elif k == "iterations":
                    typed[k] = int(v)
                else:
                    typed[k] = v
            rows.append(typed)
    return rows


def configure_logging(outdir=None, run_name="rkode", level=logging.INFO):
    """Set up console (and optionally file) logging on the 'rkode' logger.

    Args:
        outdir: directory for the log file; None skips the file handler.
        run_name: used in the log filename.
        level: logging level for the logger and its handlers.

    Returns:
        the configured logger.
    """
    logger = logging.getLogger("rkode")
    logger.setLevel(level)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    if outdir is not None:
        os.makedirs(outdir, exist_ok=True)
        fh = logging.FileHandler(os.path.join(outdir, f"{run_name}.log"))
        fh.setLevel(level)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    # Console handler (only if none already exists)
    if not any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
               for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger


def print_summary_table(summary_rows):
    """Print a formatted summary table to stdout."""
    header = f"{'system':>18} {'h':>10} {'iters':>8} {'x':>12} {'|state|':>14}"
    print(header)
    print("-" * len(header))
    for row in summary_rows:
        print(
            f"{row['system']:>18} {row['step_size']:>10.3g} {row['iterations']:>8d} "
            f"{row['x']:>12.6g} {row['state_norm']:>14.8g}"
        )
