"""Parser for polynomial patterns such as "3x^2 - 5x + 7".

The important function is:
 - parse: str -> Polynomial

Grammar (after all whitespace has been removed and a "+" has been prepended
if the pattern does not begin with a sign):

    pattern : term | pattern term
    term    : SIGN coeff var
    coeff   : <empty> | NUMBER
    var     : <empty> | VAR | VAR EXPONENT

A missing coefficient means 1, so a bare sign denotes the constant +1 or -1.
Terms may repeat powers or cancel; the result is canonicalized.
"""

# builtin
import re

# 3rd party
from ply import lex, yacc

# ours
from polynomials.terms import Term
from polynomials.polynomial import Polynomial
from polynomials.printing import VARIABLE, EXPONENT
from polynomials.logging import task, event

class PolynomialSyntaxError(ValueError):
    """A pattern could not be parsed.

    `start` and `end` delimit the offending characters in the pattern with
    its whitespace removed; `text` is that substring.
    """
    def __init__(self, message, start, end, text):
        super().__init__("{} at {}:{}: {!r}".format(message, start, end, text))
        self.start = start
        self.end = end
        self.text = text

class MalformedNumberError(PolynomialSyntaxError):
    def __init__(self, start, end, text):
        super().__init__("Invalid numeric token", start, end, text)

class MissingExponentError(PolynomialSyntaxError):
    def __init__(self, start, text):
        super().__init__("No integer after {!r}".format(EXPONENT), start, start + len(text), text)

class UnexpectedTokenError(PolynomialSyntaxError):
    def __init__(self, start, end, text):
        super().__init__("Unexpected input", start, end, text)

class EmptyPatternError(PolynomialSyntaxError):
    def __init__(self):
        super().__init__("Empty polynomial pattern", 0, 0, "")

# Lexer ########################################################################

tokens = ("SIGN", "NUMBER", "VAR", "EXPONENT")

def make_lexer():

    def t_SIGN(t):
        r"[+\-]"
        return t

    @lex.TOKEN(re.escape(VARIABLE))
    def t_VAR(t):
        return t

    def t_NUMBER(t):
        r"[0-9.]+"
        try:
            t.value = float(t.value)
        except ValueError:
            raise MalformedNumberError(
                _position(t.lexer, t.lexpos),
                _position(t.lexer, t.lexpos + len(t.value)),
                t.value)
        return t

    def t_EXPONENT(t):
        r"\^[0-9]*"
        digits = t.value[1:]
        if not digits:
            raise MissingExponentError(_position(t.lexer, t.lexpos), t.value)
        t.value = int(digits)
        return t

    def t_error(t):
        pos = _position(t.lexer, t.lexpos)
        raise UnexpectedTokenError(pos, pos + 1, t.value[0])

    return lex.lex()

def _position(lexer, lexpos):
    """Map a lexer offset back to an offset in the caller's pattern."""
    return lexpos - lexer.implicit_sign

_lexer = make_lexer()

def tokenize(s):
    """Yield the tokens of a whitespace-free, sign-prefixed pattern."""
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.implicit_sign = 0
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################

def make_parser():
    start = "pattern"

    def p_pattern(p):
        """pattern : term
                   | pattern term"""
        if len(p) == 2:
            p[0] = [p[1]]
        else:
            p[0] = p[1] + [p[2]]

    def p_term(p):
        """term : SIGN coeff var"""
        multiplier = -p[2] if p[1] == "-" else p[2]
        p[0] = Term(multiplier, p[3])

    def p_coeff(p):
        """coeff :
                 | NUMBER"""
        p[0] = p[1] if len(p) > 1 else 1.0

    def p_var(p):
        """var :
               | VAR
               | VAR EXPONENT"""
        if len(p) == 1:
            p[0] = 0
        elif len(p) == 2:
            p[0] = 1
        else:
            p[0] = p[2]

    def p_error(p):
        # Every pattern starts with a sign and every term may end after any
        # of its parts, so the input never ends early; p is a token that
        # cannot continue the current term (e.g. "x^2.5", "3^2", "xx").
        text = p.lexer.lexdata[p.lexpos:p.lexer.lexpos]
        start = _position(p.lexer, p.lexpos)
        raise UnexpectedTokenError(start, start + len(text), text)

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def normalize(pattern):
    """Remove all whitespace; whitespace never separates tokens."""
    return "".join(pattern.split())

def parse_terms(pattern):
    """Parse a pattern into its (uncanonicalized) list of Terms."""
    s = normalize(pattern)
    if not s:
        raise EmptyPatternError()
    implicit_sign = 0
    if s[0] not in "+-":
        s = "+" + s
        implicit_sign = 1
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.implicit_sign = implicit_sign
    return _parser.parse(s, lexer=lexer)

def parse(pattern):
    """Parse a pattern such as "3x^2 - 5x + 7" as a Polynomial."""
    with task("parse", pattern=pattern):
        terms = parse_terms(pattern)
        event("read {} terms".format(len(terms)))
        return Polynomial(terms)
