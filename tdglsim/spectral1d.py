"""Pseudo-spectral Crank-Nicolson integration of the 1D TDGL equation."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .datafiles import Result1D, append_series, read_result, write_result
from .spectral import wavenumbers


@dataclass
class History1D:
    """Observables recorded after each step: space average, q**2 average and max |u|."""

    average: np.ndarray
    q2_average: np.ndarray
    umax: np.ndarray


def sine_drive(tmin, dt, steps, amplitude, half_period, offset, restart=False):
    """C at t = tmin + (k+1)*dt.

    C(t) = offset + amplitude*sin(pi*(t - t0)/half_period), with t0 = tmin when
    restart is set and t0 = 0 otherwise; a constant offset if half_period <= 0.
    """
    times = tmin + (np.arange(steps) + 1) * dt
    if half_period > 0:
        origin = tmin if restart else 0.0
        return offset + amplitude * np.sin(np.pi * (times - origin) / half_period)
    return np.full(steps, float(offset))


def initial_drive(tmin, amplitude, half_period, offset, restart=False):
    """Drive value taken at the start of the run (the step before the first)."""
    if half_period > 0:
        shift = tmin if restart else 0.0
        return offset + amplitude * np.sin(np.pi * shift / half_period)
    return float(offset)


def read_drive_file(path, steps):
    """Read the second column of a 'time C' file, repeated periodically to fill steps."""
    tokens = Path(path).read_text().split()
    values = np.array(tokens[1:len(tokens) - len(tokens) % 2:2], dtype=float)
    if values.size == 0:
        if steps == 0:
            return np.empty(0)
        raise ValueError(f"{path}: no drive values")
    return np.resize(values, steps)


def _laplacian_symbol(n, dx):
    return -wavenumbers(n, dx) ** 2


def _spectrum_step(u, c_now, c_next, d2, dt):
    u_hat = np.fft.fft(u)
    nonlinear_hat = np.fft.fft(u**3)
    numerator = u_hat * (1 + dt * c_now / 2 + dt * d2 / 2) - dt * nonlinear_hat
    return numerator / (1 - dt * c_next / 2 - dt * d2 / 2)


def crank_nicolson_step(u, c_now, c_next, dx, dt):
    """One step of du/dt = u'' + c*u - u**3: linear part Crank-Nicolson, cubic explicit."""
    u = np.asarray(u, dtype=float)
    d2 = _laplacian_symbol(len(u), dx)
    return np.fft.ifft(_spectrum_step(u, c_now, c_next, d2, dt)).real


def evolve(u, drive, previous, dx, dt):
    """Step u through drive (values at the end of each step); previous is C at the start.

    Returns (final u, History1D).
    """
    u = np.asarray(u, dtype=float)
    n = len(u)
    d2 = _laplacian_symbol(n, dx)
    q = wavenumbers(n, dx) * dx
    steps = len(drive)
    history = History1D(np.empty(steps), np.empty(steps), np.empty(steps))
    c_now = previous
    for k, c_next in enumerate(drive):
        u_hat = _spectrum_step(u, c_now, c_next, d2, dt)
        u = np.fft.ifft(u_hat).real
        history.average[k] = u.mean()
        history.q2_average[k] = np.sum(q**2 * np.abs(u_hat) ** 2) / n
        history.umax[k] = np.max(np.abs(u)) if n else 0.0
        c_now = c_next
    return u, history


def _number(text):
    try:
        return float(text)
    except ValueError:
        return 0.0


def main(argv=None):
    """Continue the run in tdgl_result.dat.

    Arguments: span [, amplitude, period [, offset, restart, dt]] or span, drive file.
    """
    if argv is None:
        argv = sys.argv[1:]
    state = read_result("tdgl_result.dat")
    tmin, dx, dt = state.time, state.dx, state.dt
    amplitude, half_period, offset = state.amplitude, state.half_period, state.offset
    restart = False
    span = 10.0
    drive_path = None

    if len(argv) > 0:
        span = float(argv[0])
    if len(argv) > 1:
        amplitude = _number(argv[1])
        if len(argv) > 2:
            half_period = float(argv[2]) / 2
            if len(argv) > 3:
                offset = float(argv[3])
            if len(argv) > 4:
                restart = float(argv[4]) == 1
            if len(argv) > 5:
                dt = float(argv[5])
        else:
            drive_path = argv[1]

    tmax = tmin + span
    steps = int(span / dt)
    if drive_path is not None:
        drive = read_drive_file(drive_path, steps)
        previous = drive[0] if steps else offset
    else:
        drive = sine_drive(tmin, dt, steps, amplitude, half_period, offset, restart)
        previous = initial_drive(tmin, amplitude, half_period, offset, restart)

    u, history = evolve(state.u, drive, previous, dx, dt)

    result = Result1D(
        time=tmax,
        dx=dx,
        dt=dt,
        seed=state.seed,
        amplitude=amplitude,
        half_period=half_period,
        offset=offset,
        x=state.x,
        u=u,
    )
    write_result("tdgl_result.dat", result, x_digits=10)

    times = tmin + (np.arange(steps) + 1) * dt
    append_series("fileCout.dat", times, drive)
    append_series("fileAveout.dat", times, history.average)
    append_series("fileq2Aveout.dat", times, history.q2_average)
    append_series("fileumax.dat", times, history.umax)
    return 0


if __name__ == "__main__":
    sys.exit(main())