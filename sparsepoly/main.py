#!/usr/bin/env python

"""
Main entry point for the sparsepoly command line tool. Run with --help for
options.
"""

from fractions import Fraction
import sys
import argparse

from sparsepoly import common
from sparsepoly import opts
from sparsepoly import logging
from sparsepoly.parse import parse_polynomial, PolynomialSyntaxError
from sparsepoly.polynomials import DivisionByZeroPolynomial

FIELDS = {
    "int": int,
    "rational": Fraction,
    "float": float,
}

field = opts.Option("field", str, "rational", description="Coefficient type for parsed numbers", choices=sorted(FIELDS))
profile = opts.Option("profile", str, "", description="Write task timings to this file on exit", metavar="PATH")

def read_point(text):
    """Parse the --at argument, which must be a constant."""
    point = parse_polynomial(text, coefficient=FIELDS[field.value])
    if point.degree() > 0:
        raise PolynomialSyntaxError("--at expects a constant, not {}".format(point))
    return point[0]

def evaluate(text, args, point=None):
    """Compute the output line for one expression."""
    poly = parse_polynomial(text, coefficient=FIELDS[field.value])
    if args.degree:
        return str(poly.degree())
    if point is not None:
        return str(poly(point))
    return str(poly)

def run(argv=None):
    """Entry point for the sparsepoly executable.

    This procedure reads sys.argv (or `argv`) and prints one result per
    expression.  Returns the exit status.  Option values are put back as they
    were once the call finishes.
    """

    parser = argparse.ArgumentParser(description='Sparse polynomial calculator.')
    parser.add_argument("-f", "--file", metavar="FILE", default=None, help="Read expressions, one per line, from FILE ('-' for stdin)")
    parser.add_argument("--at", metavar="VALUE", default=None, help="Print the value of each polynomial at the constant VALUE")
    parser.add_argument("--degree", action="store_true", help="Print the degree of each polynomial")

    internal_opts = parser.add_argument_group("Options")
    opts.setup(internal_opts)

    parser.add_argument("expressions", metavar="EXPR", nargs="*", help="Polynomial expressions, e.g. 'gcd(x^2-1, x^2+2*x+1)'")
    args = parser.parse_args(argv)

    saved = opts.snapshot()
    opts.read(args)
    try:
        return _run(args)
    finally:
        opts.restore(saved)

def _run(args):
    point = None
    if args.at is not None:
        try:
            point = read_point(args.at)
        except (PolynomialSyntaxError, DivisionByZeroPolynomial) as e:
            print("Error: {}".format(e), file=sys.stderr)
            return 1

    expressions = list(args.expressions)
    if args.file is not None or not expressions:
        with common.open_maybe_stdin(args.file or "-") as f:
            expressions.extend(line.strip() for line in f if line.strip())

    status = 0
    try:
        with logging.task("sparsepoly", count=len(expressions)):
            for text in expressions:
                try:
                    print(evaluate(text, args, point))
                except (PolynomialSyntaxError, DivisionByZeroPolynomial) as e:
                    print("Error: {}".format(e), file=sys.stderr)
                    status = 1
    finally:
        if profile.value:
            logging.dump_profile(profile.value)
    return status

def main():
    sys.exit(run())

if __name__ == "__main__":
    main()
