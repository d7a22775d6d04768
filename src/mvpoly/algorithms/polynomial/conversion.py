"""Conversion between :class:`Polynomial` objects and SymPy expressions.

Symbols are named with the display labels of
:func:`~mvpoly.algorithms.polynomial.variables.id_to_variable_name`, e.g.
``x1`` for ``variable_name_to_id("x", 1)``.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
import sympy as sp

from mvpoly.algorithms.polynomial.base import Monomial, Term
from mvpoly.algorithms.polynomial.polynomial import Polynomial
from mvpoly.algorithms.polynomial.variables import (id_to_variable_name,
                                                    parse_variable_name,
                                                    variable_name_to_id)
from mvpoly.algorithms.utils.exceptions import (ConversionError,
                                                VariableNameError)


def polynomial_to_sympy(poly: Polynomial) -> sp.Expr:
    """Convert a polynomial to an expanded SymPy expression."""
    expr = sp.Integer(0)
    for monomial in poly.get_monomials():
        coefficient = monomial.coefficient
        if isinstance(coefficient, np.generic):
            coefficient = coefficient.item()
        mon = sp.Integer(1)
        for term in monomial.terms:
            mon *= sp.Symbol(id_to_variable_name(term.var)) ** term.power
        expr += sp.sympify(coefficient) * mon
    return sp.expand(expr)


def _number_to_scalar(number: sp.Expr):
    value = complex(number.evalf())
    if value.imag == 0:
        return value.real
    return value


def _symbol_to_id(symbol: sp.Symbol) -> int:
    try:
        return variable_name_to_id(*parse_variable_name(symbol.name))
    except VariableNameError as exc:
        raise ConversionError(f"Symbol '{symbol}' is not a valid variable label") from exc


def _extract_term_details(term: sp.Expr) -> Tuple[object, List[Term]]:
    """Split one additive term into its numeric coefficient and variable terms."""
    if isinstance(term, sp.Mul):
        factors = term.args
    else:
        factors = (term,)

    coefficient = 1.0
    terms = []
    for factor in factors:
        if factor.is_number:
            coefficient = coefficient * _number_to_scalar(factor)
        elif isinstance(factor, sp.Symbol):
            terms.append(Term(_symbol_to_id(factor), 1))
        elif isinstance(factor, sp.Pow):
            base, exp_obj = factor.args
            if not isinstance(base, sp.Symbol):
                raise ConversionError(f"Base of '{factor}' in term '{term}' is not a symbol")
            if not exp_obj.is_Integer or int(exp_obj) < 0:
                raise ConversionError(f"Exponent in '{factor}' is not a non-negative integer: {exp_obj}")
            terms.append(Term(_symbol_to_id(base), int(exp_obj)))
        else:
            raise ConversionError(f"Unexpected factor type '{type(factor).__name__}' (value: {factor}) in term '{term}'")
    return coefficient, terms


def sympy_to_polynomial(expr) -> Polynomial:
    """Convert a polynomial SymPy expression to a :class:`Polynomial`.

    Parameters
    ----------
    expr : sympy.Expr or str
        Expression in symbols named by variable labels (``x1``, ``q2``, ...).
        It is expanded before conversion.

    Returns
    -------
    Polynomial
        Polynomial with one monomial per distinct term-set.

    Raises
    ------
    ConversionError
        If a term has a non-numeric factor other than a variable power, a
        non-integer or negative exponent, or a symbol that is not a valid
        variable label.
    """
    expanded_expr = sp.expand(sp.sympify(expr))

    terms_to_process = []
    if isinstance(expanded_expr, sp.Add):
        terms_to_process.extend(expanded_expr.args)
    elif expanded_expr != 0:
        terms_to_process.append(expanded_expr)

    monomials = []
    for term in terms_to_process:
        coefficient, terms = _extract_term_details(term)
        monomials.append(Monomial(coefficient, tuple(terms)))
    return Polynomial(monomials)
