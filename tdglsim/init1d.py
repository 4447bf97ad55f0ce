"""Initial 1D states: flat, flat with noise, sine, single kink and two kinks."""

from __future__ import annotations

import sys
import time
from pathlib import Path

import numpy as np

from .datafiles import (
    Result1D,
    read_parameters,
    reset_files,
    uniform_noise,
    write_init,
    write_result,
)
from .init2d import grid_size


def _new_seed():
    return int(time.time())


def flat_with_noise(n, u0, eps, rng=None):
    """Flat profile u0 with modes 1 .. n/2-2 perturbed by amplitude eps and random phases."""
    if n < 1:
        raise ValueError("lattice size must be positive")
    if rng is None:
        rng = np.random.default_rng()
    spectrum = np.fft.fft(np.full(n, float(u0)))
    count = max(0, n // 2 - 2)
    if count:
        phases = uniform_noise(rng, 0.0, 2 * np.pi, count)
        spectrum[1:1 + count] += eps * n * np.exp(1j * phases)
    return np.fft.ifft(spectrum).real


def flat_profile(n, u0):
    """Profile equal to u0 at all n sites."""
    if n < 1:
        raise ValueError("lattice size must be positive")
    return np.full(n, float(u0))


def sine_profile(length, dx, u0, wavelength=None, eps=0.0):
    """Return (x, u) with u = u0 - eps*sin(2*pi*x/wavelength) on the adjusted lattice."""
    if wavelength is None:
        wavelength = length
    n, dx = grid_size(length, dx)
    x = np.arange(n) * dx
    return x, u0 - eps * np.sin(2 * np.pi * x / wavelength)


def kink_profile(length, dx, c, center=None):
    """Return (x, u) with the stationary kink sqrt(c)*tanh((x-center)*sqrt(c/2))."""
    if center is None:
        center = length / 2
    if c < 0:
        raise ValueError("the kink needs a non-negative C")
    n, dx = grid_size(length, dx)
    x = np.arange(n) * dx
    return x, np.sqrt(c) * np.tanh((x - center) * np.sqrt(c / 2))


def double_kink(x, x1, x2):
    """tanh(x-x1) - tanh(x-x2) - 1: a +1 plateau between x1 and x2 on a -1 background."""
    return np.tanh(np.asarray(x, dtype=float) - x1) - np.tanh(np.asarray(x, dtype=float) - x2) - 1


def two_kinks_profile(n, dx):
    """Double kink with fronts at L/3 and 2L/3, L = n*dx."""
    if n < 1:
        raise ValueError("lattice size must be positive")
    length = n * dx
    x = np.arange(n) * dx
    return double_kink(x, length / 3, 2 * length / 3)


def _argv(argv):
    return sys.argv[1:] if argv is None else argv


def _write_result_file(seed, x, u, dx):
    params = read_parameters("parameters.dat")
    result = Result1D(
        time=0.0,
        dx=dx,
        dt=params.dt,
        seed=seed,
        amplitude=params.amplitude,
        half_period=params.half_period,
        offset=params.offset,
        x=x,
        u=u,
    )
    write_result("tdgl_result.dat", result)


def main_flateps(argv=None):
    """Arguments N, u0, eps; flat fileinit.dat with random-phase perturbation."""
    argv = _argv(argv)
    n = int(float(argv[0])) if len(argv) > 0 else 1000
    u0 = float(argv[1]) if len(argv) > 1 else 0.0
    eps = float(argv[2]) if len(argv) > 2 else 0.0
    seed = _new_seed()
    u = flat_with_noise(n, u0, eps, np.random.default_rng(seed))
    write_init("fileinit.dat", seed, u)
    reset_files(".", ["fileCout.dat", "fileAveout.dat"])
    return 0


def main_flat(argv=None):
    """Arguments N, u0; flat fileinit.dat (u0 random in (0, 2) if absent)."""
    argv = _argv(argv)
    seed = _new_seed()
    rng = np.random.default_rng(seed)
    n = int(float(argv[0])) if len(argv) > 0 else 1000
    if len(argv) > 1:
        u0 = float(argv[1])
    else:
        u0 = float(uniform_noise(rng, 1.0, 1.0, None))
    write_init("fileinit.dat", seed, flat_profile(n, u0))
    reset_files(".", ["fileCout.dat", "fileAveout.dat"])
    return 0


def main_sine(argv=None):
    """Arguments L, dx, u0, wavelength, eps; sine fileinit.dat and tdgl_result.dat."""
    argv = _argv(argv)
    length = float(argv[0]) if len(argv) > 0 else 1000.0
    dx = float(argv[1]) if len(argv) > 1 else 0.1
    u0 = float(argv[2]) if len(argv) > 2 else 0.0
    wavelength = float(argv[3]) if len(argv) > 3 else length
    eps = float(argv[4]) if len(argv) > 4 else 0.0
    seed = _new_seed()
    x, u = sine_profile(length, dx, u0, wavelength, eps)
    dx = length / len(u)
    print(f"New dx = {dx:.6f}")
    write_init("fileinit.dat", seed, u)
    _write_result_file(seed, x, u, dx)
    reset_files(".", ["fileCout.dat", "fileAveout.dat"])
    return 0


def main_kink(argv=None):
    """Arguments L, dx, C, center; single kink fileinit.dat and tdgl_result.dat."""
    argv = _argv(argv)
    length = float(argv[0]) if len(argv) > 0 else 1000.0
    dx = float(argv[1]) if len(argv) > 1 else 0.1
    c = float(argv[2]) if len(argv) > 2 else 1.0
    center = float(argv[3]) if len(argv) > 3 else length / 2
    seed = _new_seed()
    x, u = kink_profile(length, dx, c, center)
    dx = length / len(u)
    print(f"New dx = {dx:.6f}")
    write_init("fileinit.dat", seed, u)
    _write_result_file(seed, x, u, dx)
    Path("fileCout.dat").write_text(f"0 {c:.20f}\n")
    reset_files(".", ["fileAveout.dat", "filex0.dat"])
    return 0


def main_two_kinks(argv=None):
    """Arguments N [, u0]; double kink fileinit.dat using dx from parameters.dat."""
    argv = _argv(argv)
    n = int(float(argv[0])) if len(argv) > 0 else 1000
    seed = _new_seed()
    params = read_parameters("parameters.dat")
    write_init("fileinit.dat", seed, two_kinks_profile(n, params.dx))
    reset_files(".", ["fileCout.dat", "fileAveout.dat"])
    return 0