"""Explicit finite-difference integration of the 1D TDGL equation."""

from __future__ import annotations

import sys

import numpy as np

from .datafiles import (
    Result1D,
    append_series,
    read_init,
    read_parameters,
    reset_files,
    write_result,
)


def drive_schedule(tmin, dt, steps, amplitude, half_period, offset):
    """C at t = tmin + (k+1)*dt: offset + amplitude*sin(pi*t/half_period), or offset if half_period <= 0."""
    times = tmin + (np.arange(steps) + 1) * dt
    if half_period > 0:
        return offset + amplitude * np.sin(np.pi * times / half_period)
    return np.full(steps, float(offset))


def explicit_step(u, c, dx, dt):
    """One explicit Euler step of du/dt = u'' - (u**3 - c*u) with periodic boundaries."""
    u = np.asarray(u, dtype=float)
    laplacian = (np.roll(u, -1) + np.roll(u, 1) - 2 * u) / dx**2
    return u + dt * (laplacian - (u**3 - c * u))


def evolve(u, drive, dx, dt):
    """Step u through each drive value; return (final u, space average after each step)."""
    u = np.asarray(u, dtype=float)
    averages = np.empty(len(drive))
    for k, c in enumerate(drive):
        u = explicit_step(u, c, dx, dt)
        averages[k] = u.mean()
    return u, averages


def main(argv=None):
    """Arguments: time span, amplitude, period, offset, dt (all optional)."""
    if argv is None:
        argv = sys.argv[1:]
    params = read_parameters("parameters.dat")
    dx, dt = params.dx, params.dt
    amplitude, half_period, offset = params.amplitude, params.half_period, params.offset
    tmin = 0.0
    span = float(argv[0]) if len(argv) > 0 else 0.0
    if len(argv) > 1:
        amplitude = float(argv[1])
    if len(argv) > 2:
        half_period = float(argv[2]) / 2
    if len(argv) > 3:
        offset = float(argv[3])
    if len(argv) > 4:
        dt = float(argv[4])
    tmax = tmin + span
    steps = int(span / dt)

    reset_files(".", ["fileCout.dat", "fileAveout.dat"])
    drive = drive_schedule(tmin, dt, steps, amplitude, half_period, offset)
    seed, u = read_init("fileinit.dat")
    u, averages = evolve(u, drive, dx, dt)

    times = tmin + (np.arange(steps) + 1) * dt
    append_series("fileCout.dat", times, drive)
    append_series("fileAveout.dat", times, averages)

    result = Result1D(
        time=tmax + tmin,
        dx=dx,
        dt=dt,
        seed=seed,
        amplitude=amplitude,
        half_period=half_period,
        offset=offset,
        x=np.arange(len(u)) * dx,
        u=u,
    )
    write_result("tdgl_result.dat", result)
    return 0


if __name__ == "__main__":
    sys.exit(main())