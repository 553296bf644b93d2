"""Sparse polynomial arithmetic over an arbitrary coefficient type."""

from .polynomials import Polynomial, DivisionByZeroPolynomial, divide, gcd, format_term, format_polynomial
from .parse import parse_polynomial, PolynomialSyntaxError
