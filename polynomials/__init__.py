"""Single-variable polynomials with a canonical sparse representation.

Important names:
 - Term: a single summand c*x^p
 - Polynomial: canonical collection of terms with arithmetic operators
 - Polynomial.parse: str -> Polynomial (see polynomials.parse)
 - pprint: Polynomial -> str
"""

from polynomials.terms import Term
from polynomials.polynomial import Polynomial
from polynomials.printing import pprint
