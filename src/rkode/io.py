# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import json
import numpy as np


class _NumpyEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        return super().default(obj)


def save_run(result, path):
    with open(path, "w") as f:
        json.dump(result, f, cls=_NumpyEncoder, indent=2)


def load_run(path):
    """Load a run saved by ``save_run``; state vectors come back as arrays."""
    with open(path, "r") as f:
        result = json.load(f)
    if "state" in result:
        result["state"] = np.asarray(result["state"], dtype=float)
    traj = result.get("trajectory")
    if traj:
        traj["x"] = np.asarray(traj["x"], dtype=float)
        traj["states"] = np.asarray(traj["states"], dtype=float)
    return result
