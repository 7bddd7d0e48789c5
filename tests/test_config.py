import os
import tempfile
import unittest
from pathlib import Path

from lowterms import InvalidArgument, Rational, SimplifiedRational
from lowterms.config import Settings, load_settings, settings_from_mapping


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        settings = Settings()
        self.assertEqual(settings.variant, "simplified")
        self.assertEqual(settings.log_level, "WARNING")
        self.assertIs(settings.rational_class, SimplifiedRational)

    def test_from_mapping(self):
        settings = settings_from_mapping({"variant": "plain", "log_level": "debug"})
        self.assertIs(settings.rational_class, Rational)
        self.assertEqual(settings.log_level, "DEBUG")

    def test_bad_values(self):
        for data in ({"variant": "reduced"}, {"log_level": "LOUD"}, {"colour": "red"}):
            with self.subTest(data=data):
                with self.assertRaises(InvalidArgument):
                    settings_from_mapping(data)


class LoadSettingsTests(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmpdir.name)
        self._cwd = os.getcwd()
        os.chdir(self.tmp)

    def tearDown(self):
        os.chdir(self._cwd)
        self._tmpdir.cleanup()

    def test_missing_default_file_gives_defaults(self):
        self.assertEqual(load_settings(), Settings())

    def test_default_file_is_read(self):
        (self.tmp / "lowterms.toml").write_text('[lowterms]\nvariant = "plain"\n')
        self.assertEqual(load_settings().variant, "plain")

    def test_explicit_path(self):
        path = self.tmp / "custom.toml"
        path.write_text('[lowterms]\nlog_level = "INFO"\n')
        settings = load_settings(str(path))
        self.assertEqual(settings.log_level, "INFO")
        self.assertEqual(settings.variant, "simplified")

    def test_explicit_path_must_exist(self):
        with self.assertRaises(FileNotFoundError):
            load_settings(str(self.tmp / "missing.toml"))

    def test_table_required(self):
        path = self.tmp / "bad.toml"
        path.write_text('lowterms = "plain"\n')
        with self.assertRaises(InvalidArgument):
            load_settings(str(path))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
