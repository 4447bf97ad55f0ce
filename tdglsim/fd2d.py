"""Explicit finite-difference integration of the 2D TDGL equation."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np

from .datafiles import append_series
from .fd1d import drive_schedule

GRID = 2
LENGTH = 1000.0
TIME_STEP = 0.01
END_TIME = 10000.0
HALF_PERIOD = 0.5
AMPLITUDE = 1.0
WIDTH = 1.0
WELL = 1.0


def _laplacian(h, dx):
    return (
        np.roll(h, -1, axis=0)
        + np.roll(h, 1, axis=0)
        + np.roll(h, -1, axis=1)
        + np.roll(h, 1, axis=1)
        - 4 * h
    ) / dx**2


def explicit_step(h, c, dx, dt, width=WIDTH, well=WELL):
    """One explicit Euler step of dh/dt = width**2*lap(h) - (h**3 - c*well*h), periodic."""
    h = np.asarray(h, dtype=float)
    d_potential = h**3 - c * well * h
    return h + dt * (width**2 * _laplacian(h, dx) - d_potential)


def excess_area(h, dx, length):
    """Half the integral of |grad h|**2 (central differences) per unit area."""
    h = np.asarray(h, dtype=float)
    gx = (np.roll(h, -1, axis=0) - np.roll(h, 1, axis=0)) / (2 * dx)
    gy = (np.roll(h, -1, axis=1) - np.roll(h, 1, axis=1)) / (2 * dx)
    return 0.5 * np.sum(gx**2 + gy**2) * dx * dx / length**2


def evolve(h, drive, dx, dt, width=WIDTH, well=WELL):
    """Step h through each drive value; return (final h, space average after each step)."""
    h = np.asarray(h, dtype=float)
    averages = np.empty(len(drive))
    for k, c in enumerate(drive):
        h = explicit_step(h, c, dx, dt, width, well)
        averages[k] = h.mean()
    return h, averages


def main(argv=None):
    """Evolve file0.dat for the fixed run and write file1.dat and fileAveout.dat."""
    dx = LENGTH / GRID
    steps = int(END_TIME / TIME_STEP)
    tokens = Path("file0.dat").read_text().split()
    if len(tokens) < GRID * GRID:
        raise ValueError(f"file0.dat: expected {GRID * GRID} values")
    h = np.array(tokens[:GRID * GRID], dtype=float).reshape(GRID, GRID)

    drive = drive_schedule(0.0, TIME_STEP, steps, AMPLITUDE, HALF_PERIOD, 0.0)
    h, averages = evolve(h, drive, dx, TIME_STEP)

    with open("file1.dat", "w") as out:
        for value in h.ravel():
            out.write(f"{value:.20f}\n")
    times = (np.arange(steps) + 1) * TIME_STEP
    append_series("fileAveout.dat", times, averages)
    return 0


if __name__ == "__main__":
    sys.exit(main())