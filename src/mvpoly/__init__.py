"""mvpoly: symbolic multivariate polynomial algebra.

Polynomials are sums of monomials over named variables.  They support
arithmetic, differentiation and integration, partial evaluation, variable
substitution and univariate root finding.
"""

from mvpoly.algorithms.polynomial import (NO_VARIABLE, Monomial, Polynomial,
                                          Term, VariableId,
                                          id_to_variable_name,
                                          is_valid_variable_name,
                                          parse_variable_name,
                                          polynomial_to_sympy,
                                          sympy_to_polynomial,
                                          variable_name_to_id)
from mvpoly.algorithms.utils.exceptions import (ConversionError,
                                                MissingVariableError,
                                                MvpolyError,
                                                NotUnivariateError,
                                                VariableNameError)

__version__ = "0.1.0"

__all__ = [
    "Term",
    "Monomial",
    "Polynomial",
    "VariableId",
    "NO_VARIABLE",
    "is_valid_variable_name",
    "variable_name_to_id",
    "id_to_variable_name",
    "parse_variable_name",
    "polynomial_to_sympy",
    "sympy_to_polynomial",
    "MvpolyError",
    "NotUnivariateError",
    "VariableNameError",
    "MissingVariableError",
    "ConversionError",
]
