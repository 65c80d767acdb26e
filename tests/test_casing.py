import unittest
from stringfix import casing

class TestCamelize(unittest.TestCase):
    def test_combining_mark_kept(self):
        self.assertEqual(casing.camelize('cafe\u0301 au lait'), 'cafe\u0301AuLait')

    def test_spaces(self):
        self.assertEqual(casing.camelize(' Big test big pass pls'), 'bigTestBigPassPls')

    def test_kebab_and_snake(self):
        self.assertEqual(casing.camelize('i-am-a-kebab_and_a_snake'), 'iAmAKebabAndASnake')

    def test_digits_and_punctuation_separate(self):
        self.assertEqual(casing.camelize('B!g t3st b!g p@ss pls'), 'bGTStBGPSsPls')

    def test_no_words(self):
        self.assertEqual(casing.camelize('123 !!'), '')

class TestSlugify(unittest.TestCase):
    def test_sentence(self):
        self.assertEqual(casing.slugify('have a good day!'), 'have-a-good-day')

    def test_punctuation_runs(self):
        self.assertEqual(casing.slugify("you!really%%%Shouldn't Have"), 'you-really-shouldn-t-have')

    def test_combining_mark_kept(self):
        self.assertEqual(casing.slugify('Cre\u0300me bru\u0302le\u0301e'), 'cre\u0300me-bru\u0302le\u0301e')

    def test_preserve_case(self):
        self.assertEqual(casing.slugify('Have a GOOD day', preserve_case=True), 'Have-a-GOOD-day')

    def test_no_words(self):
        self.assertEqual(casing.slugify(''), '')

class TestSnakeCase(unittest.TestCase):
    def test_combining_mark_kept(self):
        self.assertEqual(casing.snake_case('Cafe\u0301 Noir'), 'cafe\u0301_noir')

    def test_mixed(self):
        self.assertEqual(casing.snake_case('crazy!case-4-TEST'), 'crazy_case_test')

    def test_no_words(self):
        self.assertEqual(casing.snake_case('42'), '')

class TestCapitalize(unittest.TestCase):
    def test_mixed_case(self):
        self.assertEqual(casing.capitalize('hELLO wORLD'), 'Hello world')

    def test_empty(self):
        self.assertEqual(casing.capitalize(''), '')

    def test_leading_non_letter(self):
        self.assertEqual(casing.capitalize('1ABC'), '1abc')
