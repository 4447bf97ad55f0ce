"""Readers and writers for the simulation data files, and random initial states."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path

import numpy as np

_PARAMETER_KEYS = {
    "dx": "dx",
    "dt": "dt",
    "A": "amplitude",
    "T": "half_period",
    "Cave": "offset",
}


@dataclass
class Parameters:
    """Evolution parameters stored in parameters.dat."""

    dx: float
    dt: float
    amplitude: float
    half_period: float
    offset: float


@dataclass
class Result1D:
    """A 1D state together with the run parameters stored in tdgl_result.dat."""

    time: float
    dx: float
    dt: float
    seed: int
    amplitude: float
    half_period: float
    offset: float
    x: np.ndarray
    u: np.ndarray

    @property
    def n(self):
        return len(self.u)


@dataclass
class State2D:
    """A square 2D field h[i, j] sampled at (i*dx, j*dx) at a given time."""

    time: float
    dx: float
    h: np.ndarray

    @property
    def n(self):
        return self.h.shape[0]


def read_parameters(path):
    """Read a parameters.dat file of 'key value' pairs."""
    tokens = Path(path).read_text().split()
    values = {}
    for key, value in zip(tokens[::2], tokens[1::2]):
        if key in _PARAMETER_KEYS:
            values[_PARAMETER_KEYS[key]] = float(value)
    missing = [k for k, name in _PARAMETER_KEYS.items() if name not in values]
    if missing:
        raise ValueError(f"{path}: missing parameters {', '.join(missing)}")
    return Parameters(**values)


def read_params_txt(path):
    """Read 'dx = ...' and 'dt = ...' lines; return (dx, dt), dt None if absent."""
    values = {}
    for line in Path(path).read_text().splitlines():
        key, sep, value = line.partition("=")
        if sep:
            values[key.strip()] = float(value)
    if "dx" not in values:
        raise ValueError(f"{path}: no dx entry")
    return values["dx"], values.get("dt")


def write_params_txt(path, dx, dt):
    """Write a params.txt file."""
    Path(path).write_text(f"dx = {dx:.6f}\ndt = {dt:.6f}")


def read_result(path):
    """Read a tdgl_result.dat file."""
    tokens = Path(path).read_text().split()
    if len(tokens) < 8:
        raise ValueError(f"{path}: incomplete header")
    n = int(tokens[0])
    body = np.array(tokens[8:8 + 2 * n], dtype=float)
    if body.size < 2 * n:
        raise ValueError(f"{path}: expected {n} rows")
    rows = body.reshape(n, 2)
    return Result1D(
        time=float(tokens[1]),
        dx=float(tokens[2]),
        dt=float(tokens[3]),
        seed=int(tokens[4]),
        amplitude=float(tokens[5]),
        half_period=float(tokens[6]),
        offset=float(tokens[7]),
        x=rows[:, 0].copy(),
        u=rows[:, 1].copy(),
    )


def write_result(path, result, x_digits=5):
    """Write a tdgl_result.dat file."""
    with open(path, "w") as out:
        out.write(
            f"{result.n} {result.time:.10f} {result.dx:.10f} {result.dt:.10f} "
            f"{result.seed} {result.amplitude:.6f} {result.half_period:.6f} "
            f"{result.offset:.6f}\n"
        )
        for x, u in zip(result.x, result.u):
            out.write(f"{x:.{x_digits}f} {u:.20f}\n")


def read_init(path):
    """Read a fileinit.dat file; return (seed, values)."""
    tokens = Path(path).read_text().split()
    if len(tokens) < 2:
        raise ValueError(f"{path}: incomplete header")
    seed, n = int(tokens[0]), int(tokens[1])
    values = np.array(tokens[2:2 + n], dtype=float)
    if values.size < n:
        raise ValueError(f"{path}: expected {n} values")
    return seed, values


def write_init(path, seed, values):
    """Write a fileinit.dat file."""
    values = np.asarray(values, dtype=float)
    with open(path, "w") as out:
        out.write(f"{seed} {len(values)}\n")
        for value in values:
            out.write(f"{value:.20f}\n")


def read_state(path):
    """Read a 2D state file: header 'N time dx', then N*N rows 'x y h'."""
    tokens = Path(path).read_text().split()
    if len(tokens) < 3:
        raise ValueError(f"{path}: incomplete header")
    n = int(tokens[0])
    body = np.array(tokens[3:3 + 3 * n * n], dtype=float)
    if body.size < 3 * n * n:
        raise ValueError(f"{path}: expected {n * n} rows")
    h = body.reshape(n * n, 3)[:, 2].reshape(n, n)
    return State2D(time=float(tokens[1]), dx=float(tokens[2]), h=h)


def write_state(path, state, coord_digits=5):
    """Write a 2D state file, rows ordered with i outermost."""
    n = state.n
    with open(path, "w") as out:
        out.write(f"{n} {state.time:.6f} {state.dx:.6f}\n")
        for i in range(n):
            x = i * state.dx
            for j, value in enumerate(state.h[i]):
                y = j * state.dx
                out.write(f"{x:.{coord_digits}f} {y:.{coord_digits}f} {value:.20f}\n")


def reset_files(directory, names):
    """Create (or truncate) each named file in directory."""
    directory = Path(directory)
    for name in names:
        (directory / name).write_text("")


def append_series(path, times, values):
    """Append 'time value' rows to a series file."""
    with open(path, "a") as out:
        for t, value in zip(times, values):
            out.write(f"{t:.5f} {value:.20f}\n")


def uniform_noise(rng, low, high, size):
    """Noise low*(1-r1) + high*r2 with r1, r2 independent uniform draws in [0, 1)."""
    r1 = rng.random(size)
    r2 = rng.random(size)
    return low * (1 - r1) + high * r2


def main_random_1d(argv=None):
    """Prepare a random 1D state: arguments N, eps, mean."""
    if argv is None:
        argv = sys.argv[1:]
    n = int(float(argv[0])) if len(argv) > 0 else 1000
    eps = float(argv[1]) if len(argv) > 1 else 0.0
    mean = float(argv[2]) if len(argv) > 2 else 0.0

    params = read_parameters("parameters.dat")
    seed = int(time.time())
    rng = np.random.default_rng(seed)
    u = uniform_noise(rng, -eps, eps, n) + mean
    write_init("fileinit.dat", seed, u)

    result = Result1D(
        time=0.0,
        dx=params.dx,
        dt=params.dt,
        seed=seed,
        amplitude=params.amplitude,
        half_period=params.half_period,
        offset=params.offset,
        x=np.arange(n) * params.dx,
        u=u,
    )
    write_result("tdgl_result.dat", result)
    reset_files(".", ["fileCout.dat", "fileAveout.dat", "fileq2Aveout.dat", "fileumax.dat"])
    return 0


def main_random_2d(argv=None):
    """Prepare a random 2D run under .saves/<name>: arguments L, u0, name."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 3:
        print("Not enought input arguments", file=sys.stderr)
        return 1
    length = float(argv[0])
    u0 = float(argv[1])
    name = argv[2]
    mean = 0.0

    dx, dt = read_params_txt("params.txt")
    if dt is None:
        raise ValueError("params.txt: no dt entry")
    n = int(length / dx)
    if n < 1:
        raise ValueError("lattice is empty: L is smaller than dx")
    dx = length / n
    print(f"New dx = {dx:.6f}")

    save_dir = Path(".saves") / name
    os.makedirs(save_dir, mode=0o700, exist_ok=True)
    rng = np.random.default_rng()
    init_h = uniform_noise(rng, mean - u0, mean + u0, (n, n))
    state_h = uniform_noise(rng, mean - u0, mean + u0, (n, n))
    write_state(save_dir / "state.dat", State2D(time=0.0, dx=dx, h=state_h))
    write_state(save_dir / "init.dat", State2D(time=0.0, dx=dx, h=init_h))
    print(f"State prepared at: {save_dir / 'init.dat'}")
    write_params_txt(save_dir / "params.txt", dx, dt)
    reset_files(save_dir, ["fileQ2.dat", "fileGrad2.dat", "fileCout.dat", "fileAveout.dat"])
    return 0