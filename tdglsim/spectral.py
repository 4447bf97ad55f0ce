"""Spectral lattice helpers and the Fourier dump of a 2D state."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np

from .datafiles import read_state


def wavenumbers(n, spacing):
    """Angular wavenumbers of an n-point periodic lattice with the given spacing.

    The Nyquist mode of an even lattice is taken as positive.
    """
    if n < 1:
        raise ValueError("lattice size must be positive")
    if spacing <= 0:
        raise ValueError("lattice spacing must be positive")
    index = np.rint(np.fft.fftfreq(n, d=1.0 / n))
    if n % 2 == 0:
        index[n // 2] = n // 2
    return index * 2 * np.pi / (n * spacing)


def squared_wavenumbers(n, spacing):
    """Return the n x n table of qx**2 + qy**2."""
    q = wavenumbers(n, spacing)
    return q[:, None] ** 2 + q[None, :] ** 2


def field_spectrum(field):
    """Unnormalised forward 2D discrete Fourier transform of a real field."""
    return np.fft.fft2(np.asarray(field, dtype=float))


def _write_q_grid(path, header, q, values):
    with open(path, "w") as out:
        out.write(header)
        for i, qx in enumerate(q):
            for j, qy in enumerate(q):
                out.write(f"{qx:.20f} {qy:.20f} {values[i, j]:.20f}\n")


def write_spectrum_files(state_path, directory):
    """Write fftr.dat, ffti.dat and fftmodulus.dat for the state in state_path.

    Returns the paths written, in that order.
    """
    state = read_state(state_path)
    n = state.n
    directory = Path(directory)
    q = wavenumbers(n, state.dx)
    q2 = squared_wavenumbers(n, state.dx)
    spectrum = field_spectrum(state.h)
    header = f"{n} {state.time:.6f} {state.dx:.6f}\n"

    real_path = directory / "fftr.dat"
    imag_path = directory / "ffti.dat"
    modulus_path = directory / "fftmodulus.dat"
    _write_q_grid(real_path, header, q, spectrum.real)
    _write_q_grid(imag_path, header, q, spectrum.imag)
    modulus = np.abs(spectrum)
    with open(modulus_path, "w") as out:
        out.write(header)
        for q2_value, mod_value in zip(q2.ravel(), modulus.ravel()):
            out.write(f"{q2_value:.20f} {mod_value:.20f}\n")
    return real_path, imag_path, modulus_path


def main(argv=None):
    """Dump the spectrum of state.dat in the working directory."""
    if argv is None:
        argv = sys.argv[1:]
    state = read_state("state.dat")
    print(f"Loaded\nN={state.n}\ndx={state.dx:.6f}")
    write_spectrum_files("state.dat", ".")
    return 0


if __name__ == "__main__":
    sys.exit(main())