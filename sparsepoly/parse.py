"""Parser for polynomial expressions.

The accepted language is the printed form produced by `format_polynomial`
("3*x^2+2*x+1", "-x") extended with parentheses, quotient (/), remainder (%),
integer powers and a gcd(p, q) form:

    (x^2 - 1) / (x - 1)
    gcd(x^3 - x, x^2 + 2*x + 1)

The important functions are:
 - tokenize:         str -> iterator of ply tokens
 - parse_polynomial: str -> Polynomial
"""

# builtin
from fractions import Fraction

# 3rd party
from ply import lex, yacc

# ours
from sparsepoly.polynomials import Polynomial, gcd, variable

class PolynomialSyntaxError(ValueError):
    """Raised for text that does not describe a polynomial."""
    def __init__(self, message, position=None):
        if position is not None:
            message = "at offset {}: {}".format(position, message)
        super().__init__(message)
        self.position = position

# Function names become KW_* tokens for the lexer.
_KEYWORDS = ["gcd"]

# Each operator has a name and a syntax.  Each becomes an OP_* token for the
# lexer.  So, e.g. ("PLUS", "+") matches "+" and the token will be named
# OP_PLUS.
_OPERATORS = [
    ("PLUS", "+"),
    ("MINUS", "-"),
    ("TIMES", "*"),
    ("DIVIDE", "/"),
    ("MOD", "%"),
    ("CARET", "^"),
    ("COMMA", ","),
    ("OPEN_PAREN", "("),
    ("CLOSE_PAREN", ")"),
    ]

# Lexer ########################################################################

def keyword_token_name(kw):
    return "KW_{}".format(kw.upper())

def op_token_name(opname):
    return "OP_{}".format(opname.upper())

# Enumerate token names
tokens = []
for kw in _KEYWORDS:
    tokens.append(keyword_token_name(kw))
for opname, op in _OPERATORS:
    tokens.append(op_token_name(opname))
tokens += ["WORD", "NUM", "DECIMAL"]
tokens = tuple(tokens) # freeze tokens

def make_lexer():

    # ply discovers string rules by scanning the caller's local variables, so
    # each operator needs its own named local here.
    t_OP_PLUS        = r"\+"
    t_OP_MINUS       = r"-"
    t_OP_TIMES       = r"\*"
    t_OP_DIVIDE      = r"/"
    t_OP_MOD         = r"%"
    t_OP_CARET       = r"\^"
    t_OP_COMMA       = r","
    t_OP_OPEN_PAREN  = r"\("
    t_OP_CLOSE_PAREN = r"\)"

    def t_WORD(t):
        r"[a-zA-Z_]\w*"
        if t.value in _KEYWORDS:
            t.type = keyword_token_name(t.value)
        return t

    def t_DECIMAL(t):
        r"\d+\.\d+"
        return t

    def t_NUM(t):
        r"\d+"
        return t

    t_ignore = " \t\r\n"

    def t_error(t):
        raise PolynomialSyntaxError("illegal character {}".format(repr(t.value[0])), t.lexpos)

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################

def _constant(p, text, position):
    try:
        return Polynomial(p.lexer.coefficient(text), 0)
    except (ValueError, ArithmeticError) as e:
        raise PolynomialSyntaxError("bad coefficient {!r} ({})".format(text, e), position)

def make_parser():
    start = "poly"

    precedence = (
        ("left", "OP_PLUS", "OP_MINUS"),
        ("left", "OP_TIMES", "OP_DIVIDE", "OP_MOD"),
        ("right", "UNARY"),
        ("left", "OP_CARET"))

    def p_poly_binop(p):
        """poly : poly OP_PLUS poly
                | poly OP_MINUS poly
                | poly OP_TIMES poly
                | poly OP_DIVIDE poly
                | poly OP_MOD poly"""
        if p[2] == "+":
            p[0] = p[1] + p[3]
        elif p[2] == "-":
            p[0] = p[1] - p[3]
        elif p[2] == "*":
            p[0] = p[1] * p[3]
        elif p[2] == "/":
            p[0] = p[1] / p[3]
        elif p[2] == "%":
            p[0] = p[1] % p[3]

    def p_poly_unop(p):
        """poly : OP_MINUS poly %prec UNARY
                | OP_PLUS poly %prec UNARY"""
        p[0] = -p[2] if p[1] == "-" else p[2]

    def p_poly_power(p):
        """poly : poly OP_CARET NUM"""
        # scaling by the field's one keeps p^0 in the coefficient type
        p[0] = _constant(p, "1", p.lexpos(2)) * p[1] ** int(p[3])

    def p_poly_group(p):
        """poly : OP_OPEN_PAREN poly OP_CLOSE_PAREN"""
        p[0] = p[2]

    def p_poly_gcd(p):
        """poly : KW_GCD OP_OPEN_PAREN poly OP_COMMA poly OP_CLOSE_PAREN"""
        p[0] = gcd(p[3], p[5])

    def p_poly_constant(p):
        """poly : NUM
                | DECIMAL"""
        p[0] = _constant(p, p[1], p.lexpos(1))

    def p_poly_variable(p):
        """poly : WORD"""
        if p[1] != p.lexer.symbol:
            raise PolynomialSyntaxError("unknown name {!r} (the variable is {!r})".format(p[1], p.lexer.symbol), p.lexpos(1))
        p[0] = Polynomial(p.lexer.coefficient("1"), 1)

    def p_error(p):
        if p is None:
            raise PolynomialSyntaxError("unexpected end of input")
        raise PolynomialSyntaxError("unexpected {}".format(repr(p.value)), p.lexpos)

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def parse_polynomial(s, coefficient=Fraction, symbol=None):
    """Parse a string as a polynomial.

    Numbers are converted with `coefficient` (Fraction by default, so that
    "1/3*x" is exact).  `symbol` defaults to the `variable` option.
    """
    lexer = _lexer.clone()
    lexer.coefficient = coefficient
    lexer.symbol = variable.value if symbol is None else symbol
    return _parser.parse(s, lexer=lexer)
