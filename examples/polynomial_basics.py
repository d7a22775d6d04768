"""Example script: building, differentiating and solving small polynomials.

Run with
    python examples/polynomial_basics.py
"""

import os
import sys

# Add the project src directory to the Python path so that absolute imports work when
# the script is executed from the project root.
sys.path.append(os.path.join(os.path.dirname(__file__), "..", "src"))

from mvpoly import Polynomial, polynomial_to_sympy, variable_name_to_id
from mvpoly.utils.log_config import logger


def main() -> None:
    """Walk through the main polynomial operations."""
    t = Polynomial.variable("t")
    p = (t - 1) * (t - 2) * (t - 3)
    logger.info("p(t) = %s", p)
    logger.info("coefficients: %s", p.get_coefficients())
    logger.info("roots: %s", p.roots())

    dp = p.derivative()
    logger.info("p'(t) = %s", dp)
    logger.info("integral of p'(t) matches p: %s", dp.integral(-6.0).is_approx(p))

    x = Polynomial.variable("x")
    y = Polynomial.variable("y")
    q = x ** 2 * y + 3 * y - 1
    x_id = variable_name_to_id("x")
    y_id = variable_name_to_id("y")
    logger.info("q = %s", q)
    logger.info("q with x = 2: %s", q.evaluate_partial({x_id: 2.0}))
    logger.info("q(2, 1) = %s", q.evaluate_multivariate({x_id: 2.0, y_id: 1.0}))
    logger.info("as sympy: %s", polynomial_to_sympy(q))


if __name__ == "__main__":
    main()
