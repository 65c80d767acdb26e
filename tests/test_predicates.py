import unittest
from stringfix import predicates

class TestIsAlpha(unittest.TestCase):
    def test_letters(self):
        self.assertTrue(predicates.is_alpha('asdfasdgf'))

    def test_unicode_letters(self):
        self.assertTrue(predicates.is_alpha('żółwΩ'))

    def test_digit(self):
        self.assertFalse(predicates.is_alpha('1asdfasdgf'))

    def test_empty_is_vacuously_true(self):
        self.assertTrue(predicates.is_alpha(''))

    def test_combining_mark(self):
        self.assertTrue(predicates.is_alpha('cafe\u0301'))

    def test_leading_combining_mark(self):
        self.assertFalse(predicates.is_alpha('\u0301cafe'))

class TestIsAlphanumeric(unittest.TestCase):
    def test_letters_and_digits(self):
        self.assertTrue(predicates.is_alphanumeric('asdfasdgf124'))

    def test_punctuation(self):
        self.assertFalse(predicates.is_alphanumeric('!!!!ayyy?????%$@#$^%'))

    def test_empty_is_vacuously_true(self):
        self.assertTrue(predicates.is_alphanumeric(''))

    def test_combining_mark(self):
        self.assertTrue(predicates.is_alphanumeric('re\u0301sume\u03012'))

class TestIsNumeric(unittest.TestCase):
    def test_decimal(self):
        self.assertTrue(predicates.is_numeric('123.456'))

    def test_two_decimal_points(self):
        self.assertFalse(predicates.is_numeric('123.456.789'))

    def test_letters(self):
        self.assertFalse(predicates.is_numeric('123hello'))

    def test_empty_is_vacuously_true(self):
        self.assertTrue(predicates.is_numeric(''))

class TestIsIntegral(unittest.TestCase):
    def test_digits(self):
        self.assertTrue(predicates.is_integral('123'))

    def test_decimal_point(self):
        self.assertFalse(predicates.is_integral('123.5'))

    def test_empty_is_vacuously_true(self):
        self.assertTrue(predicates.is_integral(''))

class TestIsEmpty(unittest.TestCase):
    def test_whitespace_only(self):
        self.assertTrue(predicates.is_empty('  \n\t'))

    def test_zero_length(self):
        self.assertTrue(predicates.is_empty(''))

    def test_content(self):
        self.assertFalse(predicates.is_empty('  \n123\t   '))

class TestCharacterPredicates(unittest.TestCase):
    def test_is_punctuation(self):
        self.assertTrue(predicates.is_punctuation('!'))
        self.assertTrue(predicates.is_punctuation('-'))
        self.assertFalse(predicates.is_punctuation('$'))
        self.assertFalse(predicates.is_punctuation('a'))

    def test_is_mark(self):
        self.assertTrue(predicates.is_mark('\u0301'))
        self.assertFalse(predicates.is_mark('e'))

    def test_is_whitespace(self):
        for char in (' ', '\t', '\n', '\r', ' '):
            with self.subTest(char=char):
                self.assertTrue(predicates.is_whitespace(char))
