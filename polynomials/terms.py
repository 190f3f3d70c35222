"""Class for representing a single term c*x^p."""

import functools
import numbers

from polynomials.printing import format_term

def check_power(power):
    """Raise ValueError unless `power` is a nonnegative integer."""
    if isinstance(power, bool) or not isinstance(power, numbers.Integral):
        raise ValueError("power must be an integer, not {!r}".format(power))
    if power < 0:
        raise ValueError("power must be nonnegative, not {}".format(power))

@functools.total_ordering
class Term(object):
    """A term of the form c*x^p with real c and nonnegative integer p.

    Terms are immutable.  They order by power, highest first, so that
    `sorted(terms)` puts them in canonical polynomial order.
    """
    __slots__ = ("multiplier", "power")

    def __init__(self, multiplier, power=0):
        check_power(power)
        if not isinstance(multiplier, numbers.Real):
            raise TypeError("multiplier must be a real number, not {!r}".format(multiplier))
        object.__setattr__(self, "multiplier", float(multiplier))
        object.__setattr__(self, "power", int(power))

    def __setattr__(self, name, value):
        raise AttributeError("Term is immutable")

    def __delattr__(self, name):
        raise AttributeError("Term is immutable")

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.multiplier == other.multiplier and self.power == other.power

    def __lt__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return (-self.power, self.multiplier) < (-other.power, other.multiplier)

    def __hash__(self):
        return hash((self.multiplier, self.power))

    def __iter__(self):
        yield self.multiplier
        yield self.power

    def __str__(self):
        return format_term(self.multiplier, self.power)

    def unsigned_str(self):
        return format_term(self.multiplier, self.power, signed=False)

    def __repr__(self):
        return "Term({!r}, {!r})".format(self.multiplier, self.power)

    def with_multiplier(self, multiplier):
        return Term(multiplier, self.power)

    def __mul__(self, other):
        if isinstance(other, Term):
            return Term(self.multiplier * other.multiplier, self.power + other.power)
        if isinstance(other, numbers.Real):
            return Term(self.multiplier * other, self.power)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return Term(other * self.multiplier, self.power)
        return NotImplemented

    def __neg__(self):
        return Term(-self.multiplier, self.power)
