"""Crank-Nicolson 2D TDGL run that tracks q**2 and the squared gradient.

The run uses the working directory: state.dat, params.txt and a drive file
given on the command line. It appends to fileCout.dat, fileAveout.dat,
fileQ2.dat and fileGrad2.dat, writes the final |grad h|**2 to
state_gradient.dat and the modulus of the final spectrum to stateFFT.dat.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .cn2d import DriveFileError, crank_nicolson_step, read_drive, save_points
from .datafiles import State2D, append_series, read_params_txt, read_state, write_state
from .radius2d import gradient_squared
from .spectral import field_spectrum, squared_wavenumbers, wavenumbers


@dataclass
class GradientHistory:
    """Observables at the save points, and the squared gradient at the last one."""

    times: list = field(default_factory=list)
    average: list = field(default_factory=list)
    q2_average: list = field(default_factory=list)
    grad2: list = field(default_factory=list)
    gradient: Optional[np.ndarray] = None


def mean_gradient_squared(grad2, dx):
    """Sum of grad2 over the lattice divided by the box area L**2."""
    grad2 = np.asarray(grad2, dtype=float)
    length = grad2.shape[0] * dx
    return float(np.sum(grad2) / (length * length))


def weighted_q2(h_hat, dx):
    """Average of q**2 weighted by |h_hat|**2; NaN when all weights vanish."""
    h_hat = np.asarray(h_hat)
    weights = np.abs(h_hat) ** 2
    total = float(np.sum(weights))
    if total == 0:
        return math.nan
    q2 = squared_wavenumbers(h_hat.shape[0], dx)
    return float(np.sum(q2 * weights) / total)


def spectrum_magnitude(h, dx):
    """Return (q, modulus): lattice wavenumbers and |FFT(h)| of a square field."""
    h = np.asarray(h, dtype=float)
    return wavenumbers(h.shape[0], dx), np.abs(field_spectrum(h))


def evolve(h, drive, previous, dx, dt, tmin=0.0):
    """Step h through drive (values at the end of each step); previous is C at tmin.

    Returns (final h, GradientHistory) with observables at the save points.
    """
    h = np.asarray(h, dtype=float)
    history = GradientHistory()
    points = set(save_points(len(drive)))
    c_now = previous
    for k, c_next in enumerate(drive):
        result = crank_nicolson_step(h, c_now, c_next, dx, dt)
        h = result.h
        if k in points:
            grad2 = gradient_squared(result.next_spectrum, dx)
            history.times.append(tmin + (k + 1) * dt)
            history.average.append(float(h.mean()))
            history.q2_average.append(weighted_q2(result.spectrum, dx))
            history.grad2.append(mean_gradient_squared(grad2, dx))
            history.gradient = grad2
        c_now = c_next
    return h, history


def _write_spectrum(path, h, dx, time):
    q, modulus = spectrum_magnitude(h, dx)
    with open(path, "w") as out:
        out.write(f"{len(q)} {time:.6f} {dx:.6f}\n")
        for i, qx in enumerate(q):
            for j, qy in enumerate(q):
                out.write(f"{qx:.20f} {qy:.20f} {modulus[i, j]:.20f}\n")


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

    print("\n Starting evolution...")
    print(f"Number time steps going to simulate = {steps}")
    h, history = evolve(state.h, drive, previous, dx, dt, tmin)

    print("\n Saving...")
    write_state("state.dat", State2D(time=tmax, dx=dx, h=h), coord_digits=20)
    gradient = history.gradient if history.gradient is not None else np.zeros_like(h)
    write_state("state_gradient.dat", State2D(time=tmax, dx=dx, h=gradient), coord_digits=20)

    times = tmin + (np.arange(steps) + 1) * dt
    append_series("fileCout.dat", times, drive)
    append_series("fileAveout.dat", history.times, history.average)
    append_series("fileQ2.dat", history.times, history.q2_average)
    append_series("fileGrad2.dat", history.times, history.grad2)
    _write_spectrum("stateFFT.dat", h, dx, tmax)
    return 0


if __name__ == "__main__":
    sys.exit(main())