import unittest
from itertools import permutations
from stringy import cases
from stringy.entities import CaseStyle
from stringy.exceptions import InvalidCaseError, SameCaseError

IDENTIFIERS = {
    CaseStyle.CAMEL: ['myVariableName', 'value', 'html5Parser', 'aB'],
    CaseStyle.PASCAL: ['MyVariableName', 'Value', 'Html5Parser', 'AB'],
    CaseStyle.SNAKE: ['my_variable_name', 'value', 'html5_parser', 'a_b'],
    CaseStyle.KEBAB: ['my-variable-name', 'value', 'html5-parser', 'a-b'],
}

class TestConvertCase(unittest.TestCase):
    def test_kebab_to_camel(self):
        result = cases.convert_case('my-variable-name', CaseStyle.KEBAB, CaseStyle.CAMEL)
        self.assertEqual(result, 'myVariableName')

    def test_camel_to_pascal(self):
        result = cases.convert_case('myVariableName', CaseStyle.CAMEL, CaseStyle.PASCAL)
        self.assertEqual(result, 'MyVariableName')

    def test_pascal_to_snake(self):
        result = cases.convert_case('MyVariableName', CaseStyle.PASCAL, CaseStyle.SNAKE)
        self.assertEqual(result, 'my_variable_name')

    def test_string_values(self):
        result = cases.convert_case('my_variable_name', 'snake_case', 'kebab-case')
        self.assertEqual(result, 'my-variable-name')

    def test_all_pairs(self):
        for source, target in permutations(CaseStyle, 2):
            for original, expected in zip(IDENTIFIERS[source], IDENTIFIERS[target]):
                with self.subTest(source=source, target=target, value=original):
                    self.assertEqual(cases.convert_case(original, source, target), expected)

    def test_round_trip(self):
        for source, target in permutations(CaseStyle, 2):
            for original in IDENTIFIERS[source]:
                with self.subTest(source=source, target=target, value=original):
                    converted = cases.convert_case(original, source, target)
                    self.assertEqual(cases.convert_case(converted, target, source), original)

    def test_empty_string(self):
        for source, target in permutations(CaseStyle, 2):
            with self.subTest(source=source, target=target):
                self.assertEqual(cases.convert_case('', source, target), '')

    def test_single_word_to_pascal(self):
        self.assertEqual(cases.convert_case('word', CaseStyle.SNAKE, CaseStyle.PASCAL), 'Word')
        self.assertEqual(cases.convert_case('word', CaseStyle.SNAKE, CaseStyle.CAMEL), 'word')
        self.assertEqual(cases.convert_case('word', CaseStyle.CAMEL, CaseStyle.KEBAB), 'word')

    def test_acronym_normalizes_to_consecutive_hyphens(self):
        self.assertEqual(cases.convert_case('userID', CaseStyle.CAMEL, CaseStyle.KEBAB), 'user-i-d')
        self.assertEqual(cases.convert_case('user-i-d', CaseStyle.KEBAB, CaseStyle.CAMEL), 'userID')

    def test_acronym_does_not_round_trip_through_snake(self):
        snake = cases.convert_case('userID', CaseStyle.CAMEL, CaseStyle.SNAKE)
        self.assertEqual(snake, 'user_i_d')
        self.assertEqual(cases.convert_case('user_id', CaseStyle.SNAKE, CaseStyle.CAMEL), 'userId')

    def test_consecutive_separators(self):
        self.assertEqual(cases.convert_case('a--b', CaseStyle.KEBAB, CaseStyle.CAMEL), 'aB')
        self.assertEqual(cases.convert_case('trailing-', CaseStyle.KEBAB, CaseStyle.PASCAL), 'Trailing')

    def test_same_case_raises(self):
        for style in CaseStyle:
            with self.subTest(style=style):
                with self.assertRaises(SameCaseError) as context:
                    cases.convert_case('value', style, style.value)
                self.assertIn(style.value, str(context.exception))

    def test_invalid_case_raises(self):
        with self.assertRaises(InvalidCaseError) as context:
            cases.convert_case('value', 'invalid', CaseStyle.KEBAB)
        self.assertEqual(context.exception.value, 'invalid')
        self.assertIn('camelCase', str(context.exception))
        self.assertEqual(context.exception.code, 3)

    def test_invalid_target_raises(self):
        with self.assertRaises(InvalidCaseError):
            cases.convert_case('value', CaseStyle.KEBAB, 'Title Case')

    def test_invalid_case_is_value_error(self):
        with self.assertRaises(ValueError):
            cases.convert_case('value', 'invalid', 'invalid')

class TestToKebab(unittest.TestCase):
    def test_pascal(self):
        self.assertEqual(cases.to_kebab('MyValue', CaseStyle.PASCAL), 'my-value')

    def test_camel(self):
        self.assertEqual(cases.to_kebab('myValue', CaseStyle.CAMEL), 'my-value')

    def test_kebab_unchanged(self):
        self.assertEqual(cases.to_kebab('my-Value', CaseStyle.KEBAB), 'my-Value')

    def test_non_ascii_uppercase_is_not_a_boundary(self):
        self.assertEqual(cases.to_kebab('caféÉclair', CaseStyle.CAMEL), 'caféÉclair')

class TestDotNotationToCamelCase(unittest.TestCase):
    def test_dotted_path(self):
        result = cases.dot_notation_to_camel_case('some.dotted.path')
        self.assertEqual(result, 'someDottedPath')

    def test_without_dots(self):
        self.assertEqual(cases.dot_notation_to_camel_case('plain'), 'plain')

    def test_empty(self):
        self.assertEqual(cases.dot_notation_to_camel_case(''), '')
