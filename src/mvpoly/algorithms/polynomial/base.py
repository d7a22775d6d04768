"""Value types for the monomial representation.

A :class:`Monomial` is a coefficient times a product of :class:`Term`
objects, each term being a variable id raised to a non-negative integer
power.  Both types are immutable; polynomials rebuild monomials rather than
patching them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Tuple

from mvpoly.algorithms.polynomial.variables import id_to_variable_name


@dataclass(frozen=True)
class Term:
    """One ``(variable, power)`` factor of a monomial."""

    var: int
    power: int = 1

    def __post_init__(self):
        if self.power < 0:
            raise ValueError(f"Term power must be non-negative, got {self.power}")

    def __str__(self) -> str:
        label = id_to_variable_name(self.var)
        if self.power == 1:
            return label
        return f"{label}^{self.power}"


def _merge_terms(terms: Iterable[Term]) -> Tuple[Term, ...]:
    """Merge repeated variables by adding their powers, keeping first-seen order.

    Zero powers are dropped, so ``x^0`` is the same term-set as a constant.
    """
    powers = {}
    for term in terms:
        powers[term.var] = powers.get(term.var, 0) + term.power
    return tuple(Term(var, power) for var, power in powers.items() if power > 0)


@dataclass(frozen=True)
class Monomial:
    """Coefficient times a product of terms.

    Parameters
    ----------
    coefficient : scalar
        Numeric coefficient.
    terms : iterable of Term, optional
        Variable factors.  Repeated variables are merged at construction.
        No terms means a constant monomial.
    """

    coefficient: object = 1.0
    terms: Tuple[Term, ...] = field(default=())

    def __post_init__(self):
        object.__setattr__(self, "terms", _merge_terms(self.terms))

    @property
    def is_constant(self) -> bool:
        return not self.terms

    def term_set(self) -> frozenset:
        """Order-independent key identifying the exponents of this monomial."""
        return frozenset(self.terms)

    def has_same_exponents(self, other: "Monomial") -> bool:
        """Return True if both monomials carry the same set of terms."""
        if len(self.terms) != len(other.terms):
            return False
        return all(term in other.terms for term in self.terms)

    def get_degree(self) -> int:
        """Product of the term powers, or 0 for a constant.

        This is deliberately not the total degree: ``x^2*y^3`` has degree 6.
        """
        if not self.terms:
            return 0
        degree = self.terms[0].power
        for term in self.terms[1:]:
            degree *= term.power
        return degree

    def get_degree_of(self, var: int) -> int:
        for term in self.terms:
            if term.var == var:
                return term.power
        return 0

    def try_factor(self, divisor: "Monomial") -> Optional["Monomial"]:
        """Divide by *divisor* if it divides this monomial exactly.

        Returns
        -------
        Monomial or None
            The quotient, or None when some divisor variable is missing or has
            a larger power than in this monomial.
        """
        new_terms = []
        for term in self.terms:
            divisor_power = divisor.get_degree_of(term.var)
            if term.power < divisor_power:
                return None
            if term.power - divisor_power > 0:
                new_terms.append(Term(term.var, term.power - divisor_power))
        for divisor_term in divisor.terms:
            if not self.get_degree_of(divisor_term.var):
                return None
        return Monomial(self.coefficient / divisor.coefficient, tuple(new_terms))

    def factor(self, divisor: "Monomial") -> "Monomial":
        """Trial division returning a sentinel on failure.

        A failed division yields a constant monomial whose coefficient is
        exactly zero.  Callers must test for that sentinel; use
        :meth:`try_factor` to tell it apart from a genuine zero quotient.
        """
        result = self.try_factor(divisor)
        if result is None:
            return Monomial(0)
        return result

    def evaluate(self, values: Mapping[int, object]) -> "Monomial":
        """Fold the assigned variables of *values* into the coefficient."""
        coefficient = self.coefficient
        remaining = []
        for term in self.terms:
            if term.var in values:
                coefficient = coefficient * values[term.var] ** term.power
            else:
                remaining.append(term)
        return Monomial(coefficient, tuple(remaining))

    def scaled(self, factor) -> "Monomial":
        return Monomial(self.coefficient * factor, self.terms)

    def __mul__(self, other: "Monomial") -> "Monomial":
        if not isinstance(other, Monomial):
            return NotImplemented
        return Monomial(self.coefficient * other.coefficient, self.terms + other.terms)

    def __neg__(self) -> "Monomial":
        return Monomial(-self.coefficient, self.terms)

    def __str__(self) -> str:
        return "*".join([str(self.coefficient)] + [str(term) for term in self.terms])
