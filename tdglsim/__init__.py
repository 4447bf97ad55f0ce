"""Time-dependent Ginzburg-Landau solvers, initial states and data files in 1D and 2D."""

__version__ = "0.1.0"