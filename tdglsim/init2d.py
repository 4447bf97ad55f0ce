"""Initial 2D states: circular front, random, flat and stripe profiles."""

from __future__ import annotations

import sys

import numpy as np

from .datafiles import State2D, read_params_txt, reset_files, uniform_noise, write_state


def grid_size(length, dx):
    """Return (N, dx') with N = int(length/dx) and dx' = length/N."""
    n = int(length / dx)
    if n < 1:
        raise ValueError("lattice is empty: length is smaller than dx")
    return n, length / n


def _coordinates(n, dx):
    return np.arange(n) * dx


def circle_profile(length, dx, u0, r0):
    """Circular front of radius r0 centred in the box, +u0 inside and -u0 outside."""
    n, dx = grid_size(length, dx)
    x = _coordinates(n, dx)
    r = np.hypot(x[:, None] - length / 2, x[None, :] - length / 2)
    return State2D(time=0.0, dx=dx, h=-u0 * np.tanh((r - r0) / np.sqrt(2)))


def random_profile(n, u0, mean, rng=None):
    """n x n field of uniform noise between mean-u0 and mean+u0."""
    if rng is None:
        rng = np.random.default_rng()
    return uniform_noise(rng, mean - u0, mean + u0, (n, n))


def flat_profile(n, u0):
    """n x n field equal to u0 everywhere."""
    return np.full((n, n), float(u0))


def stripe_profile(length, dx, u0):
    """Stripe along y between x = L/3 and x = 2L/3."""
    n, dx = grid_size(length, dx)
    x = _coordinates(n, dx)
    column = u0 * (np.tanh(x - length / 3) - np.tanh(x - 2 * length / 3) - 1)
    return State2D(time=0.0, dx=dx, h=np.repeat(column[:, None], n, axis=1))


def _args(argv, required):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < required:
        print("Not enought input arguments", file=sys.stderr)
        return None
    return argv


def _read_dx():
    dx, _ = read_params_txt("params.txt")
    return dx


def main_circle(argv=None):
    """Arguments L, u0, r0; writes state.dat with a circular front."""
    argv = _args(argv, 3)
    if argv is None:
        return 1
    length, u0, r0 = float(argv[0]), float(argv[1]), float(argv[2])
    if r0 >= length / 2:
        print("WARNING: Radius of the circle is larger than L/2!!!")
    state = circle_profile(length, _read_dx(), u0, r0)
    print(f"New dx = {state.dx:.6f}")
    write_state("state.dat", state)
    reset_files(".", ["state_gradient.dat", "fileCout.dat", "fileAveout.dat", "fileRadiout.dat"])
    return 0


def _random_state(argv):
    length, u0 = float(argv[0]), float(argv[1])
    mean = float(argv[2]) if len(argv) > 2 else 0.0
    n, dx = grid_size(length, _read_dx())
    print(f"New dx = {dx:.6f}")
    write_state("state.dat", State2D(time=0.0, dx=dx, h=random_profile(n, u0, mean)))


def main_random(argv=None):
    """Arguments L, u0 [, mean]; random state.dat and fresh observable files."""
    argv = _args(argv, 2)
    if argv is None:
        return 1
    _random_state(argv)
    reset_files(
        ".", ["fileQ2.dat", "fileGrad2.dat", "fileCout.dat", "fileAveout.dat", "stateFFT.dat"]
    )
    return 0


def main_random_fft(argv=None):
    """Arguments L, u0 [, mean]; random state.dat only."""
    argv = _args(argv, 2)
    if argv is None:
        return 1
    _random_state(argv)
    return 0


def main_flat(argv=None):
    """Arguments L, u0; flat state.dat."""
    argv = _args(argv, 2)
    if argv is None:
        return 1
    length, u0 = float(argv[0]), float(argv[1])
    n, dx = grid_size(length, _read_dx())
    print(f"New dx = {dx:.6f}")
    write_state("state.dat", State2D(time=0.0, dx=dx, h=flat_profile(n, u0)))
    reset_files(".", ["fileCout.dat", "fileAveout.dat"])
    return 0


def main_stripe(argv=None):
    """Arguments L, u0; stripe state.dat."""
    argv = _args(argv, 2)
    if argv is None:
        return 1
    length, u0 = float(argv[0]), float(argv[1])
    state = stripe_profile(length, _read_dx(), u0)
    print(f"New dx = {state.dx:.6f}")
    write_state("state.dat", state)
    reset_files(".", ["fileCout.dat", "fileAveout.dat"])
    return 0