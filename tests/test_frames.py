import unittest
import pandas as pd
from stringy import frames
from stringy.entities import CaseStyle
from stringy.exceptions import InvalidCaseError, SameCaseError

class TestConvertSeries(unittest.TestCase):
    def test_convert_series(self):
        series = pd.Series(['first_name', None, 'last_name'])
        result = frames.convert_series(series, CaseStyle.SNAKE, CaseStyle.CAMEL)
        self.assertEqual(result.tolist()[0], 'firstName')
        self.assertTrue(pd.isna(result.iloc[1]))
        self.assertEqual(result.tolist()[2], 'lastName')
        self.assertEqual(series.tolist()[0], 'first_name')

    def test_same_case(self):
        with self.assertRaises(SameCaseError):
            frames.convert_series(pd.Series(['a']), 'snake_case', CaseStyle.SNAKE)

class TestConvertColumns(unittest.TestCase):
    def test_convert_columns(self):
        frame = pd.DataFrame({'firstName': ['Ada'], 'birthYear': [1815], 0: ['x']})
        result = frames.convert_columns(frame, CaseStyle.CAMEL, CaseStyle.SNAKE)
        self.assertEqual(list(result.columns), ['first_name', 'birth_year', 0])
        self.assertEqual(list(frame.columns), ['firstName', 'birthYear', 0])
        self.assertEqual(result['birth_year'].iloc[0], 1815)

    def test_invalid_case(self):
        frame = pd.DataFrame({'a': [1]})
        with self.assertRaises(InvalidCaseError):
            frames.convert_columns(frame, 'Title Case', CaseStyle.SNAKE)
