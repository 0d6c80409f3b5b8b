import doctest
import unittest
from stringy import bases, cases, entities, helpers, positions, wrapper

class TestDocstringExamples(unittest.TestCase):
    def test_examples(self):
        for module in (bases, cases, entities, helpers, positions, wrapper):
            with self.subTest(module=module.__name__):
                result = doctest.testmod(module)
                self.assertEqual(result.failed, 0)
