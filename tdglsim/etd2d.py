"""First-order exponential time differencing (ETD1) for the 2D TDGL equation."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .datafiles import append_series, reset_files
from .spectral import squared_wavenumbers

GRID = 4
LENGTH = 200.0
TIME_STEP = 0.01
START_TIME = 0.0
END_TIME = 10000.0
HALF_PERIOD = 0.5
AMPLITUDE = 1.0


@dataclass
class EtdCoefficients:
    """Fourier-space coefficients: the Laplacian symbol, exp(dt*L) and (exp(dt*L)-1)/L."""

    laplacian: np.ndarray
    decay: np.ndarray
    integrating: np.ndarray


def etd_coefficients(n, dx, dt):
    """ETD1 coefficients for an n x n periodic lattice with spacing dx and step dt."""
    laplacian = -squared_wavenumbers(n, dx)
    decay = np.exp(dt * laplacian)
    nonzero = laplacian != 0
    integrating = np.full_like(laplacian, float(dt))
    integrating[nonzero] = (decay[nonzero] - 1) / laplacian[nonzero]
    return EtdCoefficients(laplacian=laplacian, decay=decay, integrating=integrating)


def etd_step(h, c, coefficients, dt):
    """One ETD1 step of dh/dt = lap(h) - (h**3 - c*h); explicit Euler on the zero mode."""
    h = np.asarray(h, dtype=float)
    h_hat = np.fft.fft2(h)
    d_potential_hat = np.fft.fft2(h**3 - c * h)
    etd = coefficients.decay * h_hat - coefficients.integrating * d_potential_hat
    euler = h_hat - dt * d_potential_hat
    new_hat = np.where(coefficients.laplacian != 0, etd, euler)
    return np.fft.ifft2(new_hat).real


def evolve(h, drive, dx, dt):
    """Step h through each drive value (C at the start of the step).

    Returns (final h, space average after each step).
    """
    h = np.asarray(h, dtype=float)
    coefficients = etd_coefficients(h.shape[0], dx, dt)
    averages = np.empty(len(drive))
    for k, c in enumerate(drive):
        h = etd_step(h, c, coefficients, dt)
        averages[k] = h.mean()
    return h, averages


def _drive(tmin, dt, steps):
    times = tmin + np.arange(steps) * dt
    if HALF_PERIOD > 0:
        return AMPLITUDE * np.sin(np.pi * times / HALF_PERIOD)
    return np.full(steps, AMPLITUDE)


def main(argv=None):
    """Evolve file0.dat for the fixed run and write fileAveout.dat."""
    dx = LENGTH / GRID
    steps = int((END_TIME - START_TIME) / TIME_STEP)
    print(f"Loops: {steps}", end="")

    tokens = Path("file0.dat").read_text().split()
    if len(tokens) < GRID * GRID:
        raise ValueError(f"file0.dat: expected {GRID * GRID} values")
    h = np.array(tokens[:GRID * GRID], dtype=float).reshape(GRID, GRID)

    drive = _drive(START_TIME, TIME_STEP, steps)
    coefficients = etd_coefficients(GRID, dx, TIME_STEP)
    averages = np.empty(steps)
    for k, c in enumerate(drive):
        h = etd_step(h, c, coefficients, TIME_STEP)
        averages[k] = h.mean()
        now = (k + 1) * TIME_STEP + START_TIME
        if math.fmod(now, 15.0) == 0:
            print(f"{now:.1f}")

    times = START_TIME + (np.arange(steps) + 1) * TIME_STEP
    reset_files(".", ["fileAveout.dat"])
    append_series("fileAveout.dat", times, averages)
    return 0


if __name__ == "__main__":
    sys.exit(main())