from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose

from .nonlinear_tst_systems import (worked_example, worked_example_vec,
                                    worked_example_x0)


# ======================================================================

class TestEquationSet(TestCase):
    def test_residual(self):
        from pynewton.solve import EquationSet

        eqs = EquationSet(worked_example)
        self.assertEqual(eqs.n, 3)
        self.assertEqual(len(eqs), 3)

        # At x0 = (1, 2, 3): f1 = 1 + 1 + 25 - 27, f2 = 1 + 9 - 10,
        # f3 = 3 + 0 + 4 - 7.
        assert_allclose(eqs.residual(worked_example_x0), [0.0, 0.0, 0.0],
                        atol=1e-14)
        assert_allclose(eqs([2.0, 2.0, 3.0]),
                        [np.e, 1.0, 0.0], rtol=1e-14)

    def test_bad_construction(self):
        from pynewton.solve import EquationSet

        with self.assertRaises(ValueError):
            EquationSet([])
        with self.assertRaises(ValueError):
            EquationSet([lambda x: x[0], 3.0])
        with self.assertRaises(ValueError):
            EquationSet.from_vector_func(worked_example_vec, 0)

    def test_dimension_mismatch(self):
        from pynewton.solve import EquationSet, InvalidInputError

        eqs = EquationSet(worked_example)
        with self.assertRaises(InvalidInputError):
            eqs.residual([1.0, 2.0])
        with self.assertRaises(InvalidInputError):
            eqs.jacobian([1.0, 2.0, 3.0, 4.0])

        # Also a ValueError, for general handling.
        with self.assertRaises(ValueError):
            eqs.residual([[1.0, 2.0, 3.0]])

    def test_jacobian(self):
        from pynewton.solve import EquationSet, FD_STEP

        eqs = EquationSet(worked_example)
        x0 = np.array(worked_example_x0)
        jac, fx = eqs.jacobian(x0)

        # Caller's vector is untouched and the residual is returned.
        assert_allclose(x0, worked_example_x0)
        assert_allclose(fx, eqs.residual(x0))

        # Analytic Jacobian at (1, 2, 3).
        x1, x2, x3 = x0
        exact = np.array([
            [1 + np.exp(x1 - 1), 2 * (x2 + x3), 2 * (x2 + x3)],
            [np.exp(x2 - 2), x1 * np.exp(x2 - 2), 2 * x3],
            [0.0, np.cos(x2 - 2) + 2 * x2, 1.0]])
        self.assertEqual(jac.shape, (3, 3))
        assert_allclose(jac, exact, atol=1e4 * FD_STEP)

    def test_vector_func(self):
        from pynewton.solve import EquationSet, InvalidInputError

        eqs_vec = EquationSet.from_vector_func(worked_example_vec, 3)
        eqs = EquationSet(worked_example)
        x = [1.5, 2.5, 2.0]
        self.assertEqual(eqs_vec.n, 3)
        assert_allclose(eqs_vec.residual(x), eqs.residual(x))
        assert_allclose(eqs_vec.jacobian(x)[0], eqs.jacobian(x)[0])

        # Function result of the wrong length.
        bad = EquationSet.from_vector_func(lambda x: [x[0], x[1], 0.0], 2)
        with self.assertRaises(InvalidInputError):
            bad.residual([1.0, 2.0])
