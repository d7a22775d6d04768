"""Multivariate polynomials as sums of monomials over named variables.

The :class:`Polynomial` container keeps one monomial per distinct term-set.
Every operation that could create two monomials with the same exponents
re-runs :meth:`Polynomial.make_monomials_unique`; scaling operations cannot
and skip it.

Notes
-----
- Univariate-only operations (coefficient extraction, calculus, root
  finding, approximate comparison) raise
  :class:`~mvpoly.algorithms.utils.exceptions.NotUnivariateError` on
  polynomials that mix variables.
- :meth:`Polynomial.subs` renames variables in place without merging the
  duplicates it may create.
"""

from __future__ import annotations

import copy
import numbers
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Set, Tuple

import numpy as np

from mvpoly.algorithms.polynomial.algebra import (_poly_allclose, _poly_eval,
                                                  _poly_roots)
from mvpoly.algorithms.polynomial.base import Monomial, Term
from mvpoly.algorithms.polynomial.variables import (NO_VARIABLE,
                                                    variable_name_to_id)
from mvpoly.algorithms.utils.config import DEFAULT_VARIABLE, TOL
from mvpoly.algorithms.utils.exceptions import (MissingVariableError,
                                                NotUnivariateError,
                                                VariableNameError)
from mvpoly.utils.log_config import logger


def _is_scalar(value) -> bool:
    return isinstance(value, numbers.Number)


class Polynomial:
    """Sum of monomials.

    Parameters
    ----------
    monomials : iterable of Monomial, optional
        Monomials to copy in, e.g. a slice of another polynomial's
        :meth:`get_monomials`.  Duplicate term-sets are merged.  With no
        argument the zero polynomial (no monomials) is built.

    See Also
    --------
    Polynomial.constant, Polynomial.from_terms, Polynomial.variable,
    Polynomial.from_variable_id, Polynomial.from_coefficients
    """

    __slots__ = ("_monomials",)

    # NumPy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, monomials: Iterable[Monomial] = ()):
        self._monomials = list(monomials)
        self.make_monomials_unique()

    # Construction

    @classmethod
    def constant(cls, scalar) -> "Polynomial":
        """Polynomial with a single constant monomial."""
        return cls._wrap([Monomial(scalar)])

    @classmethod
    def from_terms(cls, coefficient, terms: Iterable[Term]) -> "Polynomial":
        """Single monomial ``coefficient * prod(terms)``; repeated variables are merged."""
        return cls._wrap([Monomial(coefficient, tuple(terms))])

    @classmethod
    def variable(cls, name: str = DEFAULT_VARIABLE, index: int = 1) -> "Polynomial":
        """The polynomial ``1 * name`` for a named variable."""
        return cls.from_variable_id(variable_name_to_id(name, index))

    @classmethod
    def from_variable_id(cls, var_id: int, coefficient=1.0) -> "Polynomial":
        """The polynomial ``coefficient * v`` for an already encoded variable id."""
        return cls._wrap([Monomial(coefficient, (Term(var_id, 1),))])

    @classmethod
    def from_coefficients(cls, coefficients: Sequence, name: str = DEFAULT_VARIABLE,
                          index: int = 1) -> "Polynomial":
        """Univariate polynomial from a dense ascending coefficient vector.

        Zero entries are kept, so :meth:`get_coefficients` returns the same
        vector.
        """
        var = variable_name_to_id(name, index)
        monomials = []
        for power, coefficient in enumerate(np.asarray(coefficients).tolist()):
            terms = (Term(var, power),) if power > 0 else ()
            monomials.append(Monomial(coefficient, terms))
        return cls._wrap(monomials)

    @classmethod
    def random(cls, num_coefficients: int, name: str = DEFAULT_VARIABLE,
               rng: Optional[np.random.Generator] = None) -> "Polynomial":
        """Univariate polynomial with coefficients drawn uniformly from [-1, 1)."""
        if rng is None:
            rng = np.random.default_rng()
        return cls.from_coefficients(rng.uniform(-1.0, 1.0, num_coefficients), name)

    @classmethod
    def _wrap(cls, monomials) -> "Polynomial":
        # Monomials already free of duplicate term-sets.
        poly = cls.__new__(cls)
        poly._monomials = list(monomials)
        return poly

    def copy(self) -> "Polynomial":
        return self._wrap(self._monomials)

    def __copy__(self) -> "Polynomial":
        return self.copy()

    def __deepcopy__(self, memo) -> "Polynomial":
        return self._wrap(copy.deepcopy(self._monomials, memo))

    # Normalisation

    def make_monomials_unique(self) -> None:
        """Merge monomials with identical term-sets by adding coefficients.

        The first occurrence keeps its position in the monomial list.
        """
        merged = {}
        for monomial in self._monomials:
            key = monomial.term_set()
            existing = merged.get(key)
            if existing is None:
                merged[key] = monomial
            else:
                merged[key] = Monomial(existing.coefficient + monomial.coefficient, existing.terms)
        self._monomials = list(merged.values())

    @property
    def is_univariate(self) -> bool:
        """True if every monomial involves at most one, common, variable."""
        unique_var = NO_VARIABLE
        for monomial in self._monomials:
            if not monomial.terms:
                continue
            if len(monomial.terms) > 1:
                return False
            var = monomial.terms[0].var
            if unique_var == NO_VARIABLE:
                unique_var = var
            elif var != unique_var:
                return False
        return True

    def _require_univariate(self, operation: str) -> None:
        if not self.is_univariate:
            raise NotUnivariateError(f"{operation} is only defined for univariate polynomials")

    # Queries

    def get_number_of_coefficients(self) -> int:
        return len(self._monomials)

    def get_degree(self) -> int:
        """Largest per-monomial degree (product of powers, see :meth:`Monomial.get_degree`)."""
        return max((m.get_degree() for m in self._monomials), default=0)

    def get_simple_variable(self) -> int:
        """Id of the variable if this is exactly ``c * v``, else ``NO_VARIABLE``."""
        if len(self._monomials) != 1:
            return NO_VARIABLE
        terms = self._monomials[0].terms
        if len(terms) != 1 or terms[0].power != 1:
            return NO_VARIABLE
        return terms[0].var

    def get_monomials(self) -> Tuple[Monomial, ...]:
        return tuple(self._monomials)

    def get_coefficients(self) -> np.ndarray:
        """Dense coefficient vector indexed by power.

        Raises
        ------
        NotUnivariateError
            If the polynomial is not univariate.
        """
        self._require_univariate("get_coefficients")
        dtype = np.result_type(float, *[np.asarray(m.coefficient).dtype for m in self._monomials])
        coefficients = np.zeros(self.get_degree() + 1, dtype=dtype)
        for monomial in self._monomials:
            power = monomial.terms[0].power if monomial.terms else 0
            coefficients[power] = monomial.coefficient
        return coefficients

    def get_variables(self) -> Set[int]:
        return {term.var for monomial in self._monomials for term in monomial.terms}

    def is_affine(self) -> bool:
        """True if every monomial is a constant or a single variable to power 1."""
        return all(m.get_degree() <= 1 and len(m.terms) <= 1 for m in self._monomials)

    def __len__(self) -> int:
        return len(self._monomials)

    def __iter__(self) -> Iterator[Monomial]:
        return iter(tuple(self._monomials))

    # Evaluation and substitution

    def evaluate_partial(self, values: Mapping[int, object]) -> "Polynomial":
        """Substitute values for some variables, keeping the others symbolic.

        Parameters
        ----------
        values : mapping
            Variable id to scalar value.

        Returns
        -------
        Polynomial
            New, re-normalised polynomial.
        """
        return Polynomial(m.evaluate(values) for m in self._monomials)

    def evaluate_multivariate(self, values: Mapping[int, object]):
        """Evaluate to a scalar; every variable must appear in *values*."""
        missing = self.get_variables() - set(values)
        if missing:
            raise MissingVariableError(f"No value given for variable id(s) {sorted(missing)}")
        total = 0.0
        for monomial in self._monomials:
            total = total + monomial.evaluate(values).coefficient
        return total

    def evaluate_univariate(self, t):
        """Evaluate a univariate polynomial at a scalar or array of points."""
        return _poly_eval(self.get_coefficients(), t)

    def subs(self, orig: int, replacement: int) -> None:
        """Rename variable *orig* to *replacement* in place.

        Monomials whose term-sets become identical are not merged; call
        :meth:`make_monomials_unique` afterwards if that matters.
        """
        renamed = []
        for monomial in self._monomials:
            terms = tuple(Term(replacement, t.power) if t.var == orig else t for t in monomial.terms)
            renamed.append(Monomial(monomial.coefficient, terms))
        self._monomials = renamed
        if len({m.term_set() for m in renamed}) != len(renamed):
            logger.warning(f"subs({orig}, {replacement}) left monomials with duplicate exponents unmerged")

    # Calculus

    def derivative(self, derivative_order: int = 1) -> "Polynomial":
        """Derivative of order *derivative_order* of a univariate polynomial."""
        self._require_univariate("derivative")
        if derivative_order < 0:
            raise ValueError(f"Derivative order must be non-negative, got {derivative_order}")
        if derivative_order == 0:
            return self.copy()

        monomials = []
        for monomial in self._monomials:
            if not monomial.terms or monomial.terms[0].power < derivative_order:
                continue
            coefficient = monomial.coefficient
            term = monomial.terms[0]
            power = term.power
            for _ in range(derivative_order):
                coefficient = coefficient * power
                power -= 1
            terms = (Term(term.var, power),) if power >= 1 else ()
            monomials.append(Monomial(coefficient, terms))
        return self._wrap(monomials)

    def integral(self, integration_constant=0.0) -> "Polynomial":
        """Antiderivative of a univariate polynomial.

        Parameters
        ----------
        integration_constant : scalar, default 0.0
            Value of the result at zero.

        Raises
        ------
        NotUnivariateError
            If the polynomial is not univariate.
        VariableNameError
            If the polynomial has a constant monomial but no variable to
            integrate over.
        """
        self._require_univariate("integral")
        var = next((m.terms[0].var for m in self._monomials if m.terms), NO_VARIABLE)

        monomials = []
        for monomial in self._monomials:
            if not monomial.terms:
                if var == NO_VARIABLE:
                    raise VariableNameError("don't know the variable name")
                monomials.append(Monomial(monomial.coefficient, (Term(var, 1),)))
            else:
                term = monomial.terms[0]
                monomials.append(Monomial(monomial.coefficient / (term.power + 1),
                                          (Term(term.var, term.power + 1),)))
        monomials.append(Monomial(integration_constant))
        return Polynomial(monomials)

    def roots(self) -> np.ndarray:
        """Complex roots of a univariate polynomial, one per degree, unordered."""
        self._require_univariate("roots")
        return _poly_roots(self.get_coefficients())

    def is_approx(self, other: "Polynomial", tol: float = TOL) -> bool:
        """Compare dense coefficient vectors elementwise within *tol*."""
        return _poly_allclose(self.get_coefficients(), other.get_coefficients(), tol)

    # Compound assignment

    def __iadd__(self, other):
        if isinstance(other, Polynomial):
            self._monomials.extend(other._monomials)
            self.make_monomials_unique()
            return self
        if _is_scalar(other):
            self._add_constant(other)
            return self
        return NotImplemented

    def __isub__(self, other):
        if isinstance(other, Polynomial):
            negated = [-m for m in other._monomials]
            self._monomials.extend(negated)
            self.make_monomials_unique()
            return self
        if _is_scalar(other):
            self._add_constant(-other)
            return self
        return NotImplemented

    def __imul__(self, other):
        if isinstance(other, Polynomial):
            self._monomials = [a * b for a in self._monomials for b in other._monomials]
            self.make_monomials_unique()
            return self
        if _is_scalar(other):
            self._monomials = [m.scaled(other) for m in self._monomials]
            return self
        return NotImplemented

    def __itruediv__(self, other):
        if _is_scalar(other):
            self._monomials = [Monomial(m.coefficient / other, m.terms) for m in self._monomials]
            return self
        return NotImplemented

    def _add_constant(self, scalar) -> None:
        for i, monomial in enumerate(self._monomials):
            if not monomial.terms:
                self._monomials[i] = Monomial(monomial.coefficient + scalar)
                return
        self._monomials.append(Monomial(scalar))

    # Value-returning operators

    def __add__(self, other):
        if not (isinstance(other, Polynomial) or _is_scalar(other)):
            return NotImplemented
        ret = self.copy()
        ret += other
        return ret

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if not (isinstance(other, Polynomial) or _is_scalar(other)):
            return NotImplemented
        ret = self.copy()
        ret -= other
        return ret

    def __rsub__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        ret = -self
        ret += other
        return ret

    def __mul__(self, other):
        if not (isinstance(other, Polynomial) or _is_scalar(other)):
            return NotImplemented
        ret = self.copy()
        ret *= other
        return ret

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        ret = self.copy()
        ret /= other
        return ret

    def __neg__(self) -> "Polynomial":
        return self._wrap([-m for m in self._monomials])

    def __pos__(self) -> "Polynomial":
        return self.copy()

    def __pow__(self, exponent: int) -> "Polynomial":
        if not isinstance(exponent, numbers.Integral):
            return NotImplemented
        if exponent < 0:
            raise ValueError(f"Polynomial exponent must be non-negative, got {exponent}")
        ret = Polynomial.constant(1.0)
        for _ in range(exponent):
            ret *= self
        return ret

    # Comparison and printing

    def __eq__(self, other) -> bool:
        if _is_scalar(other):
            other = Polynomial.constant(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        # Exactly-zero monomials compare equal to absent ones
        mine = {m.term_set(): m.coefficient for m in self._monomials if m.coefficient != 0}
        theirs = {m.term_set(): m.coefficient for m in other._monomials if m.coefficient != 0}
        return mine == theirs

    __hash__ = None

    def __str__(self) -> str:
        if not self._monomials:
            return "0"
        return "+".join(str(m) for m in self._monomials)

    def __repr__(self) -> str:
        return f"Polynomial({str(self)!r})"
