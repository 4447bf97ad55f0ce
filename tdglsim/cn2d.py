"""Pseudo-spectral Crank-Nicolson integration of the 2D TDGL equation.

A run lives in .saves/<name>: state.dat, params.txt, the drive fileCin.dat
and the observable series fileCout.dat, fileQ2.dat and fileGrad2.dat.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from .datafiles import State2D, append_series, read_params_txt, read_state, write_state
from .spectral import squared_wavenumbers, wavenumbers

DIMENSION = 2
MAX_SAVES = 1000


class DriveFileError(ValueError):
    """The drive file is inconsistent with the run or too short."""


@dataclass
class History2D:
    """Observables recorded at the save points of a run."""

    times: list = field(default_factory=list)
    average: list = field(default_factory=list)
    q2_average: list = field(default_factory=list)
    area_ratio: list = field(default_factory=list)


@dataclass
class StepResult:
    """Outcome of one step: the new field, the spectrum before and after the step."""

    h: np.ndarray
    spectrum: np.ndarray
    next_spectrum: np.ndarray


def read_drive(path, dt, tmin, steps, from_top=False, loop_read=False):
    """Read C(t) from a 'time C' file whose rows are spaced by dt.

    Returns (previous, drive): C at tmin and the steps values after it. With
    from_top the file is read from its first row whatever tmin is; with
    loop_read the file is repeated when it runs out.
    """
    tokens = Path(path).read_text().split()
    usable = len(tokens) - len(tokens) % 2
    rows = np.array(tokens[:usable], dtype=float).reshape(-1, 2)
    if len(rows) == 0:
        raise DriveFileError(f"{path}: no drive values")
    times, values = rows[:, 0], rows[:, 1]
    step_in_file = times[1] if len(rows) > 1 else times[0]
    if abs(dt - step_in_file) > dt / 1000:
        raise DriveFileError(
            f"The time step dt is different in '{path}' ({step_in_file:.6f}) "
            f"and 'params.txt' ({dt:.6f})"
        )
    skip = 0 if from_top else int(tmin / dt)
    needed = skip + 1 + steps
    if needed > len(values) and not loop_read:
        raise DriveFileError(
            f"{path} is too short! Think to enable the loop reading of the drive file"
        )
    indices = np.arange(skip, needed) % len(values)
    picked = values[indices]
    return float(picked[0]), picked[1:].copy()


def _laplacian_symbol(n, dx):
    return -squared_wavenumbers(n, dx)


def _step(h, c_now, c_next, laplacian, dt):
    h_hat = np.fft.fft2(h)
    cubic_hat = np.fft.fft2(h**3)
    numerator = h_hat * (1 + dt * c_now / 2 + dt * laplacian / 2) - dt * cubic_hat
    next_hat = numerator / (1 - dt * c_next / 2 - dt * laplacian / 2)
    return StepResult(h=np.fft.ifft2(next_hat).real, spectrum=h_hat, next_spectrum=next_hat)


def crank_nicolson_step(h, c_now, c_next, dx, dt):
    """One step of dh/dt = lap(h) + c*h - h**3: linear part Crank-Nicolson, cubic explicit."""
    h = np.asarray(h, dtype=float)
    return _step(h, c_now, c_next, _laplacian_symbol(h.shape[0], dx), dt)


def save_points(steps):
    """Step indices at which observables are recorded: at most 1000, equally spaced."""
    count = min(MAX_SAVES, steps)
    if count <= 0:
        return []
    stride = steps // count
    return list(range(0, stride * count, stride))


def q2_average(h_hat, dx):
    """Average of q**2 weighted by |h_hat|**2, divided by the dimension."""
    h_hat = np.asarray(h_hat)
    weights = np.abs(h_hat) ** 2
    total = np.sum(weights)
    q2 = squared_wavenumbers(h_hat.shape[0], dx)
    if total == 0:
        return math.nan
    return float(np.sum(q2 * weights) / (total * DIMENSION))


def gradient_components(h_hat, dx):
    """Unnormalised backward transforms of -i*qx*h_hat and -i*qy*h_hat (real parts)."""
    h_hat = np.asarray(h_hat)
    n = h_hat.shape[0]
    q = wavenumbers(n, dx)
    scale = n * n
    gx = (np.fft.ifft2(-1j * q[:, None] * h_hat) * scale).real
    gy = (np.fft.ifft2(-1j * q[None, :] * h_hat) * scale).real
    return gx, gy


def area_per_interface(h_hat, dx):
    """Box area L**2 over the sum of the squared (unnormalised) gradient."""
    h_hat = np.asarray(h_hat)
    length = h_hat.shape[0] * dx
    gx, gy = gradient_components(h_hat, dx)
    total = float(np.sum(gx**2 + gy**2))
    if total == 0:
        return math.inf
    return length * length / total


def evolve(h, drive, previous, dx, dt, tmin=0.0):
    """Step h through drive (values at the end of each step); previous is C at tmin.

    Returns (final h, History2D) with observables at the save points.
    """
    h = np.asarray(h, dtype=float)
    laplacian = _laplacian_symbol(h.shape[0], dx)
    history = History2D()
    points = set(save_points(len(drive)))
    c_now = previous
    for k, c_next in enumerate(drive):
        result = _step(h, c_now, c_next, laplacian, dt)
        h = result.h
        if k in points:
            history.times.append(tmin + (k + 1) * dt)
            history.average.append(float(h.mean()))
            history.q2_average.append(q2_average(result.spectrum, dx))
            history.area_ratio.append(area_per_interface(result.next_spectrum, dx))
        c_now = c_next
    return h, history


def main(argv=None):
    """Arguments: time span, simulation name [, from_top [, loop_read]]."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 2:
        print("Not enought arguments", file=sys.stderr)
        return 1
    span = float(argv[0])
    save_dir = Path(".saves") / argv[1]
    from_top = int(float(argv[2])) == 1 if len(argv) > 2 else False
    loop_read = int(float(argv[3])) == 1 if len(argv) > 3 else False

    state_path = save_dir / "state.dat"
    params_path = save_dir / "params.txt"
    state = read_state(state_path)
    print(params_path)
    _, dt = read_params_txt(params_path)
    if dt is None:
        raise ValueError(f"{params_path}: no dt entry")

    tmin, dx = state.time, state.dx
    tmax = tmin + span
    steps = int(span / dt)

    try:
        previous, drive = read_drive(
            save_dir / "fileCin.dat", dt, tmin, steps, from_top, loop_read
        )
    except DriveFileError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("\n Starting evolution...")
    print(f"Number time steps going to simulate = {steps}")
    h, history = evolve(state.h, drive, previous, dx, dt, tmin)

    print("\n Saving...")
    write_state(state_path, State2D(time=tmax, dx=dx, h=h), coord_digits=20)
    times = tmin + (np.arange(steps) + 1) * dt
    append_series(save_dir / "fileCout.dat", times, drive)
    append_series(save_dir / "fileQ2.dat", history.times, history.q2_average)
    append_series(save_dir / "fileGrad2.dat", history.times, history.area_ratio)
    return 0


if __name__ == "__main__":
    sys.exit(main())