"""
.. This module acts as the top-level API documentation.

.. module: pynewton

Solution of square systems of nonlinear equations by Newton's method.
See :mod:`pynewton.solve`.
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)
