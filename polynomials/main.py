#!/usr/bin/env python

"""
Command-line calculator for polynomial patterns. Run with --help for options.
"""

import sys
import argparse
import functools

from polynomials.parse import parse, PolynomialSyntaxError
from polynomials import opts
from polynomials import logging
from polynomials.polynomial import Polynomial
from polynomials.printing import format_coefficient

profile_path = opts.Option("profile", str, "", metavar="FILE", description="Write task timings to FILE")

_OPERATIONS = {
    "add": Polynomial.add,
    "sub": Polynomial.subtract,
    "mul": Polynomial.multiply,
}

def run(argv=None):
    """Entry point for the polynomials executable.

    This procedure reads argv (default: sys.argv) and prints the result of
    combining the given patterns.  Returns the process exit status.
    """

    parser = argparse.ArgumentParser(
        description="Single-variable polynomial calculator.",
        epilog="Put \"--\" before the patterns if the first one starts with \"-\".")
    parser.add_argument("--op", choices=sorted(_OPERATIONS), default="add", help="How to combine the patterns; default=add")
    parser.add_argument("--scale", metavar="K", type=float, default=None, help="Multiply the result by K")
    parser.add_argument("--divide", metavar="K", type=float, default=None, help="Divide the result by K")
    parser.add_argument("--coefficient", metavar="N", type=int, default=None, help="Print only the coefficient of x^N")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    parser.add_argument("patterns", metavar="PATTERN", nargs="+", help="Polynomial such as '3x^2 - 5x + 7'")
    args = parser.parse_args(argv)
    opts.read(args)

    try:
        with logging.task("evaluate", op=args.op, count=len(args.patterns)):
            polys = [parse(p) for p in args.patterns]
            result = functools.reduce(_OPERATIONS[args.op], polys)
            if args.scale is not None:
                result = result.scale(args.scale)
            if args.divide is not None:
                result = result.divide(args.divide)
    except PolynomialSyntaxError as e:
        print("error: {}".format(e), file=sys.stderr)
        return 1

    if args.coefficient is not None:
        if args.coefficient < 0:
            print("error: power must be nonnegative, not {}".format(args.coefficient), file=sys.stderr)
            return 1
        print(format_coefficient(result[args.coefficient]))
    else:
        print(result)

    if profile_path.value:
        with open(profile_path.value, "w") as f:
            logging.dump_profile(f)

    return 0

if __name__ == "__main__":
    sys.exit(run())
