import unittest
from strutils import trim

class TestLStrip(unittest.TestCase):
    def test_lstrip(self):
        self.assertEqual(trim.lstrip(' \t\r\nabc \n'), 'abc \n')

    def test_all_whitespace(self):
        self.assertEqual(trim.lstrip(' \t\r\n'), '')

    def test_vertical_tab_kept(self):
        self.assertEqual(trim.lstrip('\vabc'), '\vabc')

class TestRStrip(unittest.TestCase):
    def test_rstrip(self):
        self.assertEqual(trim.rstrip(' abc\r\n\t '), ' abc')

    def test_empty(self):
        self.assertEqual(trim.rstrip(''), '')

class TestStrip(unittest.TestCase):
    samples = ['', '   ', 'abc', '  abc  ', '\tT4 R3\r\n', ' a b ', '\x0ca\x0c']

    def test_strip(self):
        self.assertEqual(trim.strip('  Dover-Foxcroft \n'), 'Dover-Foxcroft')

    def test_inner_whitespace_kept(self):
        self.assertEqual(trim.strip(' a \t b '), 'a \t b')

    def test_idempotent(self):
        for s in self.samples:
            with self.subTest(s=s):
                self.assertEqual(trim.strip(trim.strip(s)), trim.strip(s))

    def test_no_surrounding_whitespace(self):
        for s in self.samples:
            with self.subTest(s=s):
                stripped = trim.strip(s)
                if stripped:
                    self.assertNotIn(stripped[0], ' \t\r\n')
                    self.assertNotIn(stripped[-1], ' \t\r\n')
