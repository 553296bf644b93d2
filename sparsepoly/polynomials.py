"""Sparse polynomials of one variable over an arbitrary coefficient type.

A Polynomial stores only its nonzero terms, as a dictionary from exponent to
coefficient.  The coefficient type is supplied by the caller: anything with
+, -, *, /, unary -, abs(), str() and comparisons against 0 works (int,
float, fractions.Fraction, decimal.Decimal).  Exact division results need a
field such as Fraction; with int coefficients `/` produces floats.

Important functions and classes:
 - Polynomial: the polynomial type, with the usual arithmetic operators
 - divide: Euclidean division returning (quotient, remainder)
 - gcd: monic greatest common divisor
 - format_polynomial: the printed form, e.g. "3*x^2+2*x+1"

Errors raised by the coefficient type itself (e.g. ZeroDivisionError from
Fraction) propagate unchanged.
"""

from sparsepoly.common import check_type, typechecked
from sparsepoly.logging import task, event
from sparsepoly.opts import Option

variable = Option("variable", str, "x", description="Symbol used to print and parse polynomials", metavar="NAME")

class DivisionByZeroPolynomial(ZeroDivisionError):
    """Raised when dividing by (or reducing modulo) the zero polynomial."""
    def __init__(self, dividend):
        super().__init__("division of {} by the zero polynomial".format(dividend))
        self.dividend = dividend

class Polynomial(object):
    """A polynomial c0 + c1*x + ... + cn*x^n stored sparsely.

    Construction:
        Polynomial([c0, c1, ..., cn])   dense coefficients, index = exponent
        Polynomial(iterable)            same, consumed lazily
        Polynomial(c, power)            the monomial c*x^power
        Polynomial.monomial(c, power)   same
        Polynomial.from_terms({e: c})   sparse coefficients
        Polynomial()                    the zero polynomial

    No stored coefficient is ever equal to 0, so two polynomials are equal
    exactly when their term dictionaries are.

    Binary operators (+, -, *, /, //, %, **) return new objects; compound
    operators (+=, -=, *=) update the receiver in place.  Plain numbers are
    promoted to constant polynomials wherever a polynomial is expected.
    """

    __slots__ = ("terms",)

    def __init__(self, coefficients=(), power=None):
        self.terms = {}
        if isinstance(coefficients, Polynomial):
            self.terms = dict(coefficients.terms)
            return
        if power is not None:
            check_type(power, int, "power")
            if power < 0:
                raise ValueError("negative exponent {}".format(power))
            if coefficients != 0:
                self.terms[power] = coefficients
            return
        try:
            it = iter(coefficients)
        except TypeError:
            if coefficients != 0:
                self.terms[0] = coefficients
            return
        for i, c in enumerate(it):
            if c != 0:
                self.terms[i] = c

    @classmethod
    @typechecked
    def monomial(cls, coefficient=0, power : int = 0):
        return cls(coefficient, power)

    @classmethod
    def from_terms(cls, terms):
        """Build a polynomial from a dict (or iterable of pairs) exponent -> coefficient."""
        if isinstance(terms, dict):
            terms = terms.items()
        res = cls()
        for power, c in terms:
            res[power] = res[power] + c
        return res

    @classmethod
    def _coerce(cls, value):
        if isinstance(value, Polynomial):
            return value
        return cls(value, 0)

    def copy(self):
        res = Polynomial()
        res.terms = dict(self.terms)
        return res

    __copy__ = copy

    # Accessors ################################################################

    def __iter__(self):
        for power in sorted(self.terms):
            yield power, self.terms[power]

    def __reversed__(self):
        for power in sorted(self.terms, reverse=True):
            yield power, self.terms[power]

    def __getitem__(self, power):
        return self.terms.get(power, 0)

    @typechecked
    def __setitem__(self, power : int, coefficient):
        if power < 0:
            raise ValueError("negative exponent {}".format(power))
        if coefficient == 0:
            self.terms.pop(power, None)
        else:
            self.terms[power] = coefficient

    def __delitem__(self, power):
        self.terms.pop(power, None)

    def degree(self):
        """The highest exponent with a nonzero coefficient, or -1 for zero."""
        return max(self.terms) if self.terms else -1

    def leading_coefficient(self):
        return self[self.degree()]

    def to_list(self):
        """Dense coefficient list; `Polynomial(p.to_list()) == p`."""
        return [self[i] for i in range(self.degree() + 1)]

    def __bool__(self):
        return bool(self.terms)

    def _normalize(self):
        for power in [power for power, c in self.terms.items() if c == 0]:
            del self.terms[power]

    # Arithmetic ###############################################################

    def __iadd__(self, other):
        other = Polynomial._coerce(other)
        for power, c in other.terms.items():
            self.terms[power] = self[power] + c
        self._normalize()
        return self

    def __isub__(self, other):
        other = Polynomial._coerce(other)
        for power, c in other.terms.items():
            self.terms[power] = self[power] - c
        self._normalize()
        return self

    def __imul__(self, other):
        other = Polynomial._coerce(other)
        tmp = Polynomial()
        for p1, c1 in self.terms.items():
            for p2, c2 in other.terms.items():
                power = p1 + p2
                tmp.terms[power] = tmp[power] + c1 * c2
        tmp._normalize()
        self.terms = tmp.terms
        return self

    def __add__(self, other):
        res = self.copy()
        res += other
        return res

    def __radd__(self, other):
        return Polynomial._coerce(other) + self

    def __sub__(self, other):
        res = self.copy()
        res -= other
        return res

    def __rsub__(self, other):
        return Polynomial._coerce(other) - self

    def __mul__(self, other):
        res = self.copy()
        res *= other
        return res

    def __rmul__(self, other):
        return Polynomial._coerce(other) * self

    def __neg__(self):
        res = Polynomial()
        res.terms = { power : -c for power, c in self.terms.items() }
        return res

    def __pos__(self):
        return self.copy()

    @typechecked
    def __pow__(self, exponent : int):
        if exponent < 0:
            raise ValueError("negative power {}".format(exponent))
        res = Polynomial(1, 0)
        base = self.copy()
        while exponent:
            if exponent & 1:
                res *= base
            exponent >>= 1
            if exponent:
                base *= base
        return res

    def __truediv__(self, other):
        return divide(self, Polynomial._coerce(other))[0]

    def __rtruediv__(self, other):
        return divide(Polynomial._coerce(other), self)[0]

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other):
        return divide(self, Polynomial._coerce(other))[1]

    def __rmod__(self, other):
        return divide(Polynomial._coerce(other), self)[1]

    def __divmod__(self, other):
        return divide(self, Polynomial._coerce(other))

    def __rdivmod__(self, other):
        return divide(Polynomial._coerce(other), self)

    def gcd(self, other):
        return gcd(self, Polynomial._coerce(other))

    def __call__(self, value=0):
        """Evaluate at `value` by Horner's rule."""
        res = 0
        power = self.degree()
        if power == 0:
            return self.terms[0]

        terms = reversed(self)
        term = next(terms, None)
        while power > 0:
            if term is None:
                while power > 0:
                    res *= value
                    power -= 1
            else:
                term_power, c = term
                while power > term_power:
                    res *= value
                    power -= 1
                res += c
                term = next(terms, None)
        return res

    # Comparison & printing ####################################################

    def __eq__(self, other):
        return self.terms == Polynomial._coerce(other).terms

    __hash__ = None

    def __str__(self):
        return format_polynomial(self)

    def __repr__(self):
        return "Polynomial.from_terms({{{}}})".format(", ".join(
            "{!r}: {!r}".format(power, c) for power, c in self))

def divide(left, right):
    """Euclidean division: returns (quotient, remainder).

    The result satisfies left == quotient*right + remainder with
    remainder.degree() < right.degree() whenever the coefficient type divides
    exactly.  Raises DivisionByZeroPolynomial if right is zero.
    """
    if not right:
        raise DivisionByZeroPolynomial(left)
    remainder = left.copy()
    quotient = Polynomial()
    right_degree = right.degree()
    right_leading = right.leading_coefficient()
    with task("divide", dividend_degree=left.degree(), divisor_degree=right_degree):
        while remainder.degree() >= right_degree:
            power = remainder.degree()
            step = Polynomial.monomial(remainder[power] / right_leading, power - right_degree)
            quotient += step
            remainder -= right * step
            # the leading term cancels exactly in a field; inexact types
            # (floats) may leave residue that must not stall the loop
            del remainder[power]
    return quotient, remainder

def gcd(left, right):
    """The monic greatest common divisor of two polynomials.

    Runs Euclid's algorithm on copies of the inputs, then scales the result
    so its leading coefficient is 1.  gcd(0, 0) is the zero polynomial.
    """
    left = Polynomial._coerce(left).copy()
    right = Polynomial._coerce(right).copy()
    with task("gcd", left_degree=left.degree(), right_degree=right.degree()):
        while right:
            left, right = right, left % right
            event("remainder of degree {}".format(right.degree()))
        if left:
            lead = left.leading_coefficient()
            for power in left.terms:
                left.terms[power] = left.terms[power] / lead
    return left

@typechecked
def format_term(power : int, coefficient, first : bool = False, symbol : str = "x") -> str:
    """Print a single term c*x^power as it appears inside a polynomial."""
    out = []
    if not first and coefficient > 0:
        out.append("+")
    if coefficient < 0:
        out.append("-")
    magnitude = abs(coefficient)
    if power == 0 or magnitude != 1:
        out.append(str(magnitude))
    if power > 0:
        if magnitude != 1:
            out.append("*")
        out.append(symbol)
        if power > 1:
            out.append("^{}".format(power))
    return "".join(out)

def format_polynomial(polynomial, symbol=None):
    """Print terms from the highest exponent down, e.g. "3*x^2-x+1"."""
    if symbol is None:
        symbol = variable.value
    if not polynomial:
        return "0"
    return "".join(
        format_term(power, c, first=(i == 0), symbol=symbol)
        for i, (power, c) in enumerate(reversed(polynomial)))
