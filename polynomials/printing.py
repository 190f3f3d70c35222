"""Rendering of terms and polynomials as text.

The output of `pprint` is always accepted by `polynomials.parse.parse` and
reparses to an equal polynomial (as long as every coefficient is finite).
"""

from decimal import Decimal
import math

VARIABLE = "x"
EXPONENT = "^"

def format_coefficient(c):
    """Spell a float positionally, without a trailing ".0".

    The digits are those of repr(c), which is the shortest string that reads
    back as the same float, so no precision is lost.  Scientific notation is
    expanded because the pattern grammar has no exponent syntax for numbers.
    """
    if not math.isfinite(c):
        return repr(float(c))
    s = format(Decimal(repr(float(c))), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s

def format_term(multiplier, power, signed=True):
    """Render multiplier*x^power.

    With signed=False the magnitude of the multiplier is used; the caller is
    responsible for writing the sign.
    """
    if not signed:
        multiplier = abs(multiplier)
    if power == 0:
        return format_coefficient(multiplier)
    if power == 1:
        var = VARIABLE
    else:
        var = "{}{}{}".format(VARIABLE, EXPONENT, power)
    if multiplier == 1:
        return var
    if multiplier == -1:
        return "-" + var
    return format_coefficient(multiplier) + var

def pprint(terms):
    """Render a canonical polynomial (or any canonical sequence of terms)."""
    terms = list(terms)
    if not terms:
        return "0"
    s = str(terms[0])
    for t in terms[1:]:
        s += " {} {}".format("+" if t.multiplier > 0 else "-", t.unsigned_str())
    return s
