import numpy as np
import pytest

from mvpoly.algorithms.polynomial.algebra import (_poly_allclose, _poly_eval,
                                                  _poly_horner, _poly_roots,
                                                  _poly_trim)


def _assert_array_close(a, b, msg=""):
    assert a.shape == b.shape, msg + " shape mismatch"
    assert np.allclose(a, b, rtol=1e-12, atol=1e-12), msg + f"\n{a}\n!=\n{b}"


def test_horner_matches_polyval():
    c = np.array([1.0, -2.0, 0.5, 3.0])
    for t in (-1.5, 0.0, 0.3, 2.0):
        assert _poly_horner(c, t) == pytest.approx(np.polynomial.polynomial.polyval(t, c))


def test_horner_complex_coefficients():
    c = np.array([1.0 + 1.0j, 2.0])
    assert _poly_horner(c, 2.0) == pytest.approx(5.0 + 1.0j)


def test_eval_array_and_empty():
    c = np.array([0.0, 1.0, 1.0])
    _assert_array_close(_poly_eval(c, np.array([1.0, 2.0])), np.array([2.0, 6.0]))
    assert _poly_eval(np.zeros(0), 3.0) == 0.0


def test_trim():
    _assert_array_close(_poly_trim(np.array([1.0, 2.0, 0.0, 0.0])), np.array([1.0, 2.0]))
    assert _poly_trim(np.zeros(3)).shape == (0,)


@pytest.mark.parametrize("c, expected", [
    (np.array([5.0]), np.empty(0)),
    (np.array([0.0]), np.empty(0)),
    (np.array([-4.0, 2.0]), np.array([2.0])),
    (np.array([6.0, -5.0, 1.0]), np.array([2.0, 3.0])),
    (np.array([-6.0, 11.0, -6.0, 1.0]), np.array([1.0, 2.0, 3.0])),
])
def test_roots_by_degree(c, expected):
    roots = _poly_roots(c)
    assert roots.dtype == np.complex128
    _assert_array_close(np.sort(roots.real), expected, "roots")
    _assert_array_close(roots.imag, np.zeros_like(expected), "imaginary parts")


def test_roots_satisfy_polynomial():
    rng = np.random.default_rng(5)
    for _ in range(10):
        c = rng.uniform(-1.0, 1.0, 6)
        for r in _poly_roots(c):
            scale = np.sum(np.abs(c) * np.abs(r) ** np.arange(c.shape[0]))
            assert abs(np.polynomial.polynomial.polyval(r, c)) <= 1e-9 * scale


def test_allclose_different_lengths():
    assert _poly_allclose(np.array([1.0, 2.0]), np.array([1.0, 2.0, 0.0]), 1e-12)
    assert not _poly_allclose(np.array([1.0, 2.0]), np.array([1.0, 2.0, 1e-3]), 1e-12)
