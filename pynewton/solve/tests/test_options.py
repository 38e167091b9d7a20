from unittest import TestCase


# ======================================================================

class TestNewtonOptions(TestCase):
    def setUp(self):
        from pynewton.solve import get_newton_options
        self.orig = get_newton_options()

    def tearDown(self):
        from pynewton.solve import set_newton_options
        set_newton_options(eps=self.orig.eps, maxits=self.orig.maxits,
                           verbose=self.orig.verbose)

    def test_defaults(self):
        from pynewton.solve import get_newton_options

        opts = get_newton_options()
        self.assertEqual(opts.eps, 1e-6)
        self.assertEqual(opts.maxits, 1000)
        self.assertFalse(opts.verbose)

    def test_set_options(self):
        from pynewton.solve import get_newton_options, set_newton_options

        set_newton_options(eps=1e-9)
        self.assertEqual(get_newton_options().eps, 1e-9)
        self.assertEqual(get_newton_options().maxits, 1000)

        # Invalid values or names leave options unchanged.
        with self.assertRaises(ValueError):
            set_newton_options(eps=-1.0)
        with self.assertRaises(ValueError):
            set_newton_options(maxits=0)
        with self.assertRaises(KeyError):
            set_newton_options(tol=1e-3)
        self.assertEqual(get_newton_options().eps, 1e-9)

    def test_options_from_text(self):
        from pynewton.solve import options_from_text

        opts, replaced = options_from_text('1e-8', '250')
        self.assertEqual((opts.eps, opts.maxits), (1e-8, 250))
        self.assertEqual(replaced, [])

        opts, replaced = options_from_text(' 0.001 ', None)
        self.assertEqual((opts.eps, opts.maxits), (0.001, 1000))
        self.assertEqual(replaced, ['maxits'])

        for eps_text, maxits_text in (('', ''), ('abc', '-3'),
                                      ('-1e-6', '0'), ('0', '2.5'),
                                      ('nan', 'ten')):
            opts, replaced = options_from_text(eps_text, maxits_text)
            self.assertEqual((opts.eps, opts.maxits), (1e-6, 1000))
            self.assertEqual(replaced, ['eps', 'maxits'])
