"""Kernels on dense univariate coefficient vectors.

Coefficient vectors are 1-D NumPy arrays in ascending power order, i.e.
``c[i]`` multiplies ``t**i``.  They are produced by
:meth:`mvpoly.algorithms.polynomial.polynomial.Polynomial.get_coefficients`.
"""

from __future__ import annotations

import numpy as np
from numba import njit

from mvpoly.algorithms.utils.config import FASTMATH
from mvpoly.utils.log_config import logger


@njit(fastmath=FASTMATH, cache=False)
def _poly_horner(c: np.ndarray, t):
    """Evaluate ``sum(c[i] * t**i)`` at a scalar with Horner's scheme."""
    n = c.shape[0]
    result = c[n - 1] * 1.0
    for i in range(n - 2, -1, -1):
        result = result * t + c[i]
    return result


def _is_native(value) -> bool:
    return isinstance(value, (int, float, complex, np.number))


def _poly_eval(c: np.ndarray, t):
    """Evaluate a coefficient vector at a scalar or an array of points.

    Scalars go through the numba Horner kernel when both the coefficients and
    the point are native numbers; object coefficients (e.g. ``Fraction``) and
    non-native points use ``numpy.polynomial``.
    """
    if c.shape[0] == 0:
        return np.zeros_like(np.asarray(t, dtype=float))[()]
    if np.ndim(t) == 0:
        if c.dtype.kind in "biufc" and _is_native(t):
            return _poly_horner(c, t)
        return np.polynomial.polynomial.polyval(t, c)
    return np.polynomial.polynomial.polyval(np.asarray(t), c)


def _poly_trim(c: np.ndarray) -> np.ndarray:
    """Drop exactly-zero leading (highest power) coefficients."""
    nz = np.flatnonzero(c)
    if nz.size == 0:
        return c[:0]
    return c[: nz[-1] + 1]


def _poly_pad(c: np.ndarray, size: int) -> np.ndarray:
    if c.shape[0] >= size:
        return c
    out = np.zeros(size, dtype=c.dtype)
    out[: c.shape[0]] = c
    return out


def _companion_roots(c: np.ndarray) -> np.ndarray:
    """Roots of a polynomial of degree >= 2 as companion-matrix eigenvalues."""
    companion = np.polynomial.polynomial.polycompanion(c)
    return np.linalg.eigvals(companion).astype(np.complex128)


def _poly_roots(c: np.ndarray) -> np.ndarray:
    """Dispatch on the effective degree of *c*.

    Degree 0 has no roots, degree 1 is solved in closed form and higher
    degrees go through the companion matrix.  The result has one entry per
    degree and no guaranteed order.
    """
    trimmed = _poly_trim(c)
    if trimmed.shape[0] != c.shape[0]:
        logger.debug(f"Trimmed {c.shape[0] - trimmed.shape[0]} zero leading coefficient(s) before root finding")
    degree = trimmed.shape[0] - 1
    if degree <= 0:
        return np.empty(0, dtype=np.complex128)
    if degree == 1:
        return np.array([-trimmed[0] / trimmed[1]], dtype=np.complex128)
    logger.debug(f"Solving degree {degree} polynomial through its companion matrix")
    return _companion_roots(trimmed)


def _poly_allclose(a: np.ndarray, b: np.ndarray, tol: float) -> bool:
    """Elementwise comparison of two coefficient vectors of any lengths."""
    size = max(a.shape[0], b.shape[0])
    return bool(np.allclose(_poly_pad(a, size), _poly_pad(b, size), rtol=tol, atol=tol))
