"""Multivariate polynomial engine public API.

Exposes the value types, the :class:`Polynomial` container, the variable
name codec and the SymPy bridge.
"""

from .base import Monomial, Term
from .conversion import polynomial_to_sympy, sympy_to_polynomial
from .polynomial import Polynomial
from .variables import (MAX_INDEX, MAX_NAME_PART, NAME_CHARS, NO_VARIABLE,
                        VariableId, id_to_variable_name,
                        is_valid_variable_name, parse_variable_name,
                        variable_name_to_id)

__all__ = [
    "Term",
    "Monomial",
    "Polynomial",
    "VariableId",
    "NAME_CHARS",
    "MAX_NAME_PART",
    "MAX_INDEX",
    "NO_VARIABLE",
    "is_valid_variable_name",
    "variable_name_to_id",
    "id_to_variable_name",
    "parse_variable_name",
    "polynomial_to_sympy",
    "sympy_to_polynomial",
]
