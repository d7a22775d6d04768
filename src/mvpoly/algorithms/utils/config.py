"""Module-level settings shared by the polynomial kernels."""

FASTMATH = False  # Global flag for Numba's fastmath option

# Default tolerance for approximate coefficient comparison
TOL = 1e-12

# Variable name used by constructors that build a univariate polynomial
DEFAULT_VARIABLE = "t"
