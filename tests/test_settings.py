import tempfile
import unittest
from pathlib import Path
from stringy.exceptions import StringyError
from stringy.settings import Settings, get_settings

class TestPackagedSettings(unittest.TestCase):
    def test_defaults_match_dataclass(self):
        self.assertEqual(get_settings(), Settings())

    def test_cached(self):
        self.assertIs(get_settings(), get_settings())

    def test_yaml_escapes(self):
        self.assertEqual(get_settings().ucwords_delimiters, ' \t\r\n\f\v')

class TestLoad(unittest.TestCase):
    def _write(self, text: str) -> Path:
        directory = tempfile.TemporaryDirectory()
        self.addCleanup(directory.cleanup)
        path = Path(directory.name) / 'settings.yaml'
        path.write_text(text, encoding='utf-8')
        return path

    def test_partial_file(self):
        settings = Settings.load(self._write('pad_string: "*"\nwrap_width: 20\n'))
        self.assertEqual(settings.pad_string, '*')
        self.assertEqual(settings.wrap_width, 20)
        self.assertEqual(settings.encoding, 'utf-8')

    def test_non_ascii_values(self):
        settings = Settings.load(self._write('pad_string: "·"\nucwords_delimiters: " —"\n'))
        self.assertEqual(settings.pad_string, '·')
        self.assertEqual(settings.ucwords_delimiters, ' —')

    def test_empty_file(self):
        self.assertEqual(Settings.load(self._write('')), Settings())

    def test_unknown_key(self):
        with self.assertRaises(StringyError) as context:
            Settings.load(self._write('colour: blue\n'))
        self.assertIn('colour', str(context.exception))

    def test_invalid_encoding(self):
        with self.assertRaises(StringyError):
            Settings.load(self._write('encoding: not-a-codec\n'))

    def test_invalid_values(self):
        with self.assertRaises(StringyError):
            Settings(pad_string='')
        with self.assertRaises(StringyError):
            Settings(wrap_width=0)
