import math

import numpy as np


# ======================================================================

# Test systems of equations.  Each equation takes the full vector `x`.

def f1(x):
    return x[0] + math.exp(x[0] - 1) + (x[1] + x[2]) ** 2 - 27


def f2(x):
    return x[0] * math.exp(x[1] - 2) + x[2] ** 2 - 10


def f3(x):
    return x[2] + math.sin(x[1] - 2) + x[1] ** 2 - 7


worked_example = [f1, f2, f3]
worked_example_x0 = [1.0, 2.0, 3.0]


def worked_example_vec(x):
    return [f(x) for f in worked_example]


def linear_system(x):
    """A simple linear system with exact solution x = (1, 2, ..., n)."""
    n = len(x)
    a = linear_system_matrix(n)
    return a @ np.asarray(x) - a @ np.arange(1.0, n + 1)


def linear_system_matrix(n):
    return np.array([[1.0 + i * j + (n if i == j else 0)
                      for j in range(n)] for i in range(n)])
