#!usr/bin/env python3

# Solve a system of three nonlinear equations using full Newton and
# chord Newton, comparing the number of iterations needed.
#
# Usage:  newton_example.py [eps] [maxits] [x1 x2 x3]
#
# Last updated: October 2026.

import math
import sys

import numpy as np

from pynewton.solve import (InvalidInputError, NewtonSystem, SolverError,
                            options_from_text)


def f1(x):
    return x[0] + math.exp(x[0] - 1) + (x[1] + x[2]) ** 2 - 27


def f2(x):
    return x[0] * math.exp(x[1] - 2) + x[2] ** 2 - 10


def f3(x):
    return x[2] + math.sin(x[1] - 2) + x[1] ** 2 - 7


args = sys.argv[1:]
opts, replaced = options_from_text(args[0] if len(args) > 0 else None,
                                   args[1] if len(args) > 1 else None)
for name in replaced:
    print(f"Using default {name} = {getattr(opts, name)}")

x0 = [1.5, 2.5, 2.5]
try:
    if len(args) > 2:
        x0 = [float(s) for s in args[2:]]
except ValueError:
    sys.exit("Invalid initial guess, enter a valid number for each "
             "equation.")

nls = NewtonSystem([f1, f2, f3])
try:
    result = nls.solve(x0, eps=opts.eps, maxits=opts.maxits, verbose=True)
except (SolverError, InvalidInputError) as e:
    sys.exit(f"Solver error: {e}")

print("\nResult x = " +
      np.array2string(result.x, precision=6, suppress_small=True,
                      separator=', ', sign=' ', floatmode='fixed'))
print(f"Full Newton iterations:  {result.primal_iterations}" +
      ("" if result.converged else " (not converged)"))
if result.chord.failed:
    print(f"Chord Newton:            failed ({result.chord.error.args[0]})")
else:
    print(f"Chord Newton iterations: {result.reuse_iterations}" +
          ("" if result.chord.converged else " (not converged)"))
