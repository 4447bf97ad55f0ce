# tdglsim

Numerical solvers for the time-dependent Ginzburg-Landau (TDGL) equation

    du/dt = laplacian(u) + C(t) u - u^3

in one and two dimensions with periodic boundaries, where the control
parameter `C(t)` may be constant, a sine wave `Cave + A sin(pi t / (T/2))`,
or a series read from a file.

Simulations are run as a chain of short evolutions: every run starts from the
state the previous run left behind, and appends its observables (the drive
`C(t)`, space averages, spectral averages) to plain-text files of
`time value` rows.

## Installation

    pip install .

The only runtime dependency is NumPy. Install the `test` extra
(`pip install .[test]`) to run the test suite with pytest.

## One-dimensional workflow

All 1D commands work in the current directory. Evolution parameters are read
from `parameters.dat`:

    dx 0.1
    dt 0.01
    A 1
    T -1
    Cave 1

`T` here is the half period; a value of zero or less keeps `C(t)` constant
at `Cave`.

### Preparing an initial state

    tdgl-init1d-random [N] [EPS] [MEAN]

uniform noise of amplitude `EPS` around `MEAN` (defaults 1000, 0, 0). Writes
`fileinit.dat` and `tdgl_result.dat`, and empties `fileCout.dat`,
`fileAveout.dat`, `fileq2Aveout.dat` and `fileumax.dat`.

    tdgl-init1d-flat [N] [U0]

flat profile; without `U0` the level is drawn at random between 0 and 2.

    tdgl-init1d-flateps [N] [U0] [EPS]

flat profile with the Fourier modes 1 to N/2-2 each perturbed by amplitude
`EPS` and a random phase.

    tdgl-init1d-two-kinks [N]

plateau at +1 between L/3 and 2L/3 on a -1 background, with `dx` from
`parameters.dat`.

These three write `fileinit.dat` (seed and size on the first line, one value
per line after it) and empty `fileCout.dat` and `fileAveout.dat`.

    tdgl-init1d-sine [L] [DX] [U0] [LAMBDA] [EPS]
    tdgl-init1d-kink [L] [DX] [C] [XC]

`u0 - eps sin(2 pi x / lambda)`, or the stationary kink
`sqrt(C) tanh((x - xc) sqrt(C/2))`, on a lattice of `int(L/DX)` sites with
`dx` adjusted to `L/N`. Both write `fileinit.dat` and `tdgl_result.dat` (with
`dt`, `A`, `T` and `Cave` from `parameters.dat`). The kink command starts
`fileCout.dat` with the row `0 C` and empties `fileAveout.dat` and
`filex0.dat`; the sine command empties `fileCout.dat` and `fileAveout.dat`.

### Evolving

    tdgl-fd1d [DELTAT] [A] [PERIOD] [CAVE] [DT]

explicit finite-difference Euler steps from `fileinit.dat`, starting at
`t = 0`. Arguments override `parameters.dat`; `PERIOD` is the full period of
the sine. Writes `tdgl_result.dat`, and rewrites `fileCout.dat` and
`fileAveout.dat`.

    tdgl-1d [DELTAT] [A [PERIOD [CAVE] [RESTART] [DT]]]
    tdgl-1d DELTAT CFILE

pseudo-spectral Crank-Nicolson steps continuing from `tdgl_result.dat`
(default span 10). By default the sine is measured from `t = 0`, so `C(t)`
runs on smoothly across consecutive runs; with `RESTART` equal to 1 it starts
again from the beginning of this run. With a file name as the second
argument, `C(t)` is taken from the second column of that file, repeated
periodically if it is shorter than the run. The run overwrites
`tdgl_result.dat` and appends `C(t)`, the space average, the `q^2` average
and `max |u|` to `fileCout.dat`, `fileAveout.dat`, `fileq2Aveout.dat` and
`fileumax.dat`.

## Two-dimensional workflow

Lattice parameters come from `params.txt`:

    dx = 0.5
    dt = 0.01

`state.dat` starts with `N tmin dx` and lists `x y u` for every lattice site,
`x` outermost. Initialisers write coordinates with 5 decimals, the evolution
commands with 20.

### Preparing an initial state

    tdgl-init2d-random L U0 NAME

creates the directory `.saves/NAME/` holding a random state `state.dat`, a
second, independently drawn random state `init.dat`, a `params.txt` with the
adjusted `dx` and `dt`, and empty `fileQ2.dat`, `fileGrad2.dat`,
`fileCout.dat` and `fileAveout.dat`.

The other initialisers write `state.dat` in the current directory, reading
`dx` from `params.txt` and adjusting it to `L/int(L/dx)`:

    tdgl-init2d-random-plain L U0 [MEAN]   # also empties fileQ2.dat, fileGrad2.dat,
                                           # fileCout.dat, fileAveout.dat, stateFFT.dat
    tdgl-init2d-random-fft L U0 [MEAN]     # state.dat only
    tdgl-init2d-flat L U0                  # also empties fileCout.dat, fileAveout.dat
    tdgl-init2d-stripe L U0                # stripe between x = L/3 and 2L/3; same files
    tdgl-init2d-circle L U0 R0             # circular front of radius R0; also empties
                                           # state_gradient.dat, fileCout.dat,
                                           # fileAveout.dat, fileRadiout.dat

The circle command prints a warning when `R0` is at least `L/2`. Commands
missing required arguments print a message and exit with status 1.

### Evolving

    tdgl-2d TSPAN NAME [FROM_TOP] [LOOP_READ]

Crank-Nicolson evolution of `.saves/NAME/state.dat` with `dt` from
`.saves/NAME/params.txt` and `C(t)` from `.saves/NAME/fileCin.dat`. The
file's time step (its second time value) must match `dt` to within `dt/1000`.
It is read from the row matching the state's time, or from its first row when
`FROM_TOP` is 1, and is read again from the top when it runs out if
`LOOP_READ` is 1; otherwise a short file stops the run with status 1.
`C(t)` is appended to `fileCout.dat`; the `q^2` average and the ratio of box
area to the summed squared gradient are sampled at up to 1000 equally spaced
steps and appended to `fileQ2.dat` and `fileGrad2.dat` in the same directory.

    tdgl-radius2d TSPAN CFILE [FROM_TOP] [LOOP_READ]
    tdgl-grad2d TSPAN CFILE [FROM_TOP] [LOOP_READ]

the same evolution on `state.dat` and `params.txt` in the current directory,
with the drive file named on the command line. Both append `fileCout.dat` and
`fileAveout.dat` and write the last sampled `|grad u|^2` to
`state_gradient.dat`. `tdgl-radius2d` appends the gradient-weighted mean
squared distance from the box centre to `fileRadiout.dat`; `tdgl-grad2d`
appends the `q^2` average to `fileQ2.dat` and the mean squared gradient to
`fileGrad2.dat`, and writes the modulus of the final spectrum to
`stateFFT.dat`.

    tdgl-fd2d
    tdgl-etd2d

fixed-parameter solvers reading `file0.dat` (one value per line). `tdgl-fd2d`
runs explicit finite differences on a 2 x 2 lattice of length 1000, writes
the final field to `file1.dat` and appends the space average to
`fileAveout.dat`. `tdgl-etd2d` runs first-order exponential time differencing
on a 4 x 4 lattice of length 200 and rewrites `fileAveout.dat`. Both use
`dt = 0.01` up to `t = 10000` with `C(t) = sin(pi t / 0.5)`.

### Spectrum of a state

    tdgl-fft

reads `state.dat` and writes the real and imaginary parts of its 2D Fourier
transform, against `(qx, qy)`, to `fftr.dat` and `ffti.dat`, and the modulus
against `q^2` to `fftmodulus.dat`.

## Library use

The numerical pieces are importable on their own and work on NumPy arrays:

- `tdglsim.spectral`: `wavenumbers`, `squared_wavenumbers`, `field_spectrum`,
  `write_spectrum_files`.
- `tdglsim.datafiles`: readers and writers for every file format above
  (`read_parameters`, `read_params_txt`, `read_result`/`write_result`,
  `read_init`/`write_init`, `read_state`/`write_state`, `append_series`) and
  the `Parameters`, `Result1D` and `State2D` dataclasses.
- `tdglsim.init1d` and `tdglsim.init2d`: profile builders such as
  `kink_profile`, `sine_profile`, `circle_profile` and `stripe_profile`.
- Solvers: `tdglsim.fd1d.explicit_step`, `tdglsim.fd2d.explicit_step`,
  `tdglsim.spectral1d.crank_nicolson_step`,
  `tdglsim.cn2d.crank_nicolson_step`, `tdglsim.etd2d.etd_step`, and the
  `evolve` function of each solver module, which returns the new field
  together with the recorded observables.
- `tdglsim.cn2d.read_drive` reads a drive file and raises `DriveFileError`
  when it does not fit the run.

## What it does not do

The package only writes plain-text data files; it has no plotting or
visualisation. The `tdgl-fd2d` and `tdgl-etd2d` commands take no arguments:
their lattice, time step, run length and drive are fixed in their modules,
though the underlying `evolve` functions accept any values. All computation
runs in a single process with NumPy.