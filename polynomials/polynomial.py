"""Class for representing polynomials of one variable.

A Polynomial stores its terms in canonical form:
 - sorted by power, highest first, with no two terms sharing a power
 - no term has a zero multiplier
 - the zero polynomial has no terms at all

Every constructor and arithmetic operation produces a fresh canonical
Polynomial.  The single exception is item assignment (`p[power] = c`), which
updates `p` in place; use `with_coefficient` to get an updated copy instead.
"""

import math
import numbers

from polynomials.terms import Term, check_power
from polynomials.printing import pprint
from polynomials.logging import event

def _as_term(t):
    if isinstance(t, Term):
        return t
    multiplier, power = t
    return Term(multiplier, power)

def canonicalize(terms):
    """Bring an arbitrary collection of terms into canonical form.

    The input may be unsorted, contain several terms with the same power, and
    contain zero multipliers.  The terms are sorted by descending power,
    adjacent terms with equal powers are summed, and zero terms are dropped.

    Returns a new list of Term objects.
    """
    terms = sorted((_as_term(t) for t in terms), key=lambda t: -t.power)

    grouped = []
    for t in terms:
        if grouped and grouped[-1].power == t.power:
            grouped[-1] = grouped[-1].with_multiplier(grouped[-1].multiplier + t.multiplier)
        else:
            grouped.append(t)

    return [t for t in grouped if t.multiplier != 0]

class Polynomial(object):
    __slots__ = ("_terms",)

    def __init__(self, terms=()):
        """Build a polynomial from Terms and/or (multiplier, power) pairs."""
        self._terms = canonicalize(terms)

    @classmethod
    def _from_canonical(cls, terms):
        p = cls.__new__(cls)
        p._terms = terms
        return p

    @classmethod
    def from_terms(cls, terms):
        return cls(terms)

    @classmethod
    def constant(cls, r):
        """The polynomial r*x^0 (or the zero polynomial if r == 0)."""
        if not isinstance(r, numbers.Real):
            raise TypeError("cannot convert {!r} to a polynomial".format(r))
        return cls([Term(r, 0)])

    @staticmethod
    def parse(text):
        from polynomials.parse import parse
        return parse(text)

    @property
    def terms(self):
        return tuple(self._terms)

    @property
    def degree(self):
        return self._terms[0].power if self._terms else 0

    @property
    def count(self):
        return len(self._terms)

    @property
    def is_zero(self):
        return all(t.multiplier == 0 for t in self._terms)

    def leading_term(self):
        if not self._terms:
            return Term(0, 0)
        return self._terms[0]

    def copy(self):
        return Polynomial._from_canonical(list(self._terms))

    def __len__(self):
        return len(self._terms)

    def __iter__(self):
        return iter(tuple(self._terms))

    def __bool__(self):
        return not self.is_zero

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self._terms == other._terms
        if isinstance(other, numbers.Real):
            return self._terms == Polynomial.constant(other)._terms
        return NotImplemented

    # Item assignment mutates polynomials, so they cannot be hashed.
    __hash__ = None

    def __str__(self):
        return pprint(self._terms)

    def __repr__(self):
        return "Polynomial({!r})".format([(t.multiplier, t.power) for t in self._terms])

    # Indexed access ###########################################################

    def _locate(self, power):
        """Find where a term with the given power is or would be.

        Returns (i, found): the index of the first term whose power is not
        greater than `power`, and whether that term has exactly `power`.
        """
        i = 0
        while i < len(self._terms) and self._terms[i].power > power:
            i += 1
        return i, (i < len(self._terms) and self._terms[i].power == power)

    def __getitem__(self, power):
        check_power(power)
        i, found = self._locate(power)
        return self._terms[i].multiplier if found else 0.0

    def __setitem__(self, power, value):
        check_power(power)
        if not isinstance(value, numbers.Real):
            raise TypeError("coefficient must be a real number, not {!r}".format(value))
        i, found = self._locate(power)
        if found:
            if value != 0:
                self._terms[i] = self._terms[i].with_multiplier(value)
            else:
                del self._terms[i]
        elif value != 0:
            self._terms.insert(i, Term(value, power))

    def with_coefficient(self, power, value):
        """Return a copy of this polynomial whose coefficient at `power` is `value`."""
        p = self.copy()
        p[power] = value
        return p

    # Arithmetic ###############################################################

    def add(self, other):
        return Polynomial(self._terms + other._terms)

    def subtract(self, other):
        return self.add(other.scale(-1))

    def scale(self, k):
        if not isinstance(k, numbers.Real):
            raise TypeError("cannot scale a polynomial by {!r}".format(k))
        if k == 0:
            return Polynomial()
        return Polynomial(t * k for t in self._terms)

    def multiply_term(self, term):
        return Polynomial(t * term for t in self._terms)

    def multiply(self, other):
        if self.is_zero or other.is_zero:
            return Polynomial()
        if len(self._terms) == 1:
            return other.multiply_term(self._terms[0])
        if len(other._terms) == 1:
            return self.multiply_term(other._terms[0])
        event("expanding product of {} and {} terms".format(len(self._terms), len(other._terms)))
        return Polynomial(
            t
            for mine in self._terms
            for t in other.multiply_term(mine)._terms)

    def divide(self, k):
        """Multiply by 1/k.

        Dividing by zero does not raise: the multipliers become infinite (or
        NaN), as they would under IEEE-754 division.
        """
        if not isinstance(k, numbers.Real):
            raise TypeError("cannot divide a polynomial by {!r}".format(k))
        if k == 0:
            reciprocal = math.copysign(math.inf, k)
        elif math.isnan(k):
            reciprocal = math.nan
        else:
            reciprocal = 1 / k
        return self.scale(reciprocal)

    def __neg__(self):
        return self.scale(-1)

    def __pos__(self):
        return self.copy()

    def __add__(self, other):
        if isinstance(other, Polynomial):
            return self.add(other)
        if isinstance(other, numbers.Real):
            return self.add(Polynomial.constant(other))
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, numbers.Real):
            return Polynomial.constant(other).add(self)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Polynomial):
            return self.subtract(other)
        if isinstance(other, numbers.Real):
            return self.subtract(Polynomial.constant(other))
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, numbers.Real):
            return Polynomial.constant(other).subtract(self)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return self.multiply(other)
        if isinstance(other, Term):
            return self.multiply_term(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (Term, numbers.Real)):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return self.divide(other)
        return NotImplemented
