from unittest import TestCase


# ======================================================================

class TestSolverError(TestCase):
    def test_str(self):
        from pynewton.solve import SolverError

        e = SolverError("Non-finite step at iteration 4.",
                        details="Iteration diverged.")
        self.assertIsNone(e.flag)
        self.assertEqual(str(e), "Non-finite step at iteration 4.\n"
                                 "details -> Iteration diverged.")

    def test_singular_matrix_attributes(self):
        from pynewton.solve import SingularMatrixError, SolverError

        e = SingularMatrixError("Zero pivot.", row=2, pivot=0.0)
        self.assertIsInstance(e, SolverError)
        self.assertEqual((e.row, e.pivot), (2, 0.0))
        self.assertIn("row -> 2", str(e))
        self.assertIn("pivot -> 0.0", str(e))
