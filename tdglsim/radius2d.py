"""Crank-Nicolson 2D TDGL run that tracks the radius of a circular domain.

The run uses the working directory: state.dat, params.txt and a drive file
given on the command line. It appends to fileCout.dat, fileAveout.dat and
fileRadiout.dat, and writes the final |grad h|**2 to state_gradient.dat.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .cn2d import (
    DriveFileError,
    crank_nicolson_step,
    gradient_components,
    read_drive,
    save_points,
)
from .datafiles import State2D, append_series, read_params_txt, read_state, write_state


@dataclass
class RadiusHistory:
    """Observables at the save points, and the squared gradient at the last one."""

    times: list = field(default_factory=list)
    average: list = field(default_factory=list)
    radius2: list = field(default_factory=list)
    gradient: Optional[np.ndarray] = None


def gradient_squared(h_hat, dx):
    """Squared (unnormalised) spectral gradient gx**2 + gy**2 of a spectrum."""
    gx, gy = gradient_components(h_hat, dx)
    return gx**2 + gy**2


def radius_squared(grad2, dx):
    """Mean of r**2 about the box centre, weighted by grad2; NaN for zero weights."""
    grad2 = np.asarray(grad2, dtype=float)
    n = grad2.shape[0]
    length = n * dx
    x = np.arange(n) * dx - length / 2
    r2 = x[:, None] ** 2 + x[None, :] ** 2
    total = float(np.sum(grad2))
    if total == 0:
        return math.nan
    return float(np.sum(grad2 * r2) / total)


def evolve(h, drive, previous, dx, dt, tmin=0.0):
    """Step h through drive (values at the end of each step); previous is C at tmin.

    Returns (final h, RadiusHistory) with observables at the save points.
    """
    h = np.asarray(h, dtype=float)
    history = RadiusHistory()
    points = set(save_points(len(drive)))
    c_now = previous
    for k, c_next in enumerate(drive):
        result = crank_nicolson_step(h, c_now, c_next, dx, dt)
        h = result.h
        if k in points:
            grad2 = gradient_squared(result.next_spectrum, dx)
            history.times.append(tmin + (k + 1) * dt)
            history.average.append(float(h.mean()))
            history.radius2.append(radius_squared(grad2, dx))
            history.gradient = grad2
        c_now = c_next
    return h, history


def main(argv=None):
    """Arguments: time span, drive file [, from_top [, loop_read]]."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 2:
        print("Not enought arguments", file=sys.stderr)
        return 1
    span = float(argv[0])
    drive_path = argv[1]
    from_top = int(float(argv[2])) == 1 if len(argv) > 2 else False
    loop_read = int(float(argv[3])) == 1 if len(argv) > 3 else False

    state = read_state("state.dat")
    _, dt = read_params_txt("params.txt")
    if dt is None:
        raise ValueError("params.txt: no dt entry")

    tmin, dx = state.time, state.dx
    tmax = tmin + span
    steps = int(span / dt)

    try:
        previous, drive = read_drive(drive_path, dt, tmin, steps, from_top, loop_read)
    except DriveFileError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"Number time steps going to simulate = {steps}")
    h, history = evolve(state.h, drive, previous, dx, dt, tmin)

    write_state("state.dat", State2D(time=tmax, dx=dx, h=h), coord_digits=20)
    gradient = history.gradient if history.gradient is not None else np.zeros_like(h)
    write_state("state_gradient.dat", State2D(time=tmax, dx=dx, h=gradient), coord_digits=20)

    times = tmin + (np.arange(steps) + 1) * dt
    append_series("fileCout.dat", times, drive)
    append_series("fileAveout.dat", history.times, history.average)
    append_series("fileRadiout.dat", history.times, history.radius2)
    return 0


if __name__ == "__main__":
    sys.exit(main())