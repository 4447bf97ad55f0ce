[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tdglsim"
version = "0.1.0"
description = "Time-dependent Ginzburg-Landau simulations in one and two dimensions with a driven control parameter"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "ginzburg-landau",
    "tdgl",
    "phase-field",
    "coarsening",
    "pseudo-spectral",
    "crank-nicolson",
    "finite-difference",
    "exponential-time-differencing",
    "simulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tdgl-fft = "tdglsim.spectral:main"
tdgl-init1d-random = "tdglsim.datafiles:main_random_1d"
tdgl-init1d-flateps = "tdglsim.init1d:main_flateps"
tdgl-init1d-flat = "tdglsim.init1d:main_flat"
tdgl-init1d-sine = "tdglsim.init1d:main_sine"
tdgl-init1d-kink = "tdglsim.init1d:main_kink"
tdgl-init1d-two-kinks = "tdglsim.init1d:main_two_kinks"
tdgl-init2d-random = "tdglsim.datafiles:main_random_2d"
tdgl-init2d-circle = "tdglsim.init2d:main_circle"
tdgl-init2d-random-plain = "tdglsim.init2d:main_random"
tdgl-init2d-random-fft = "tdglsim.init2d:main_random_fft"
tdgl-init2d-flat = "tdglsim.init2d:main_flat"
tdgl-init2d-stripe = "tdglsim.init2d:main_stripe"
tdgl-fd1d = "tdglsim.fd1d:main"
tdgl-fd2d = "tdglsim.fd2d:main"
tdgl-1d = "tdglsim.spectral1d:main"
tdgl-etd2d = "tdglsim.etd2d:main"
tdgl-2d = "tdglsim.cn2d:main"
tdgl-radius2d = "tdglsim.radius2d:main"
tdgl-grad2d = "tdglsim.grad2d:main"

[tool.hatch.build.targets.wheel]
packages = ["tdglsim"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
