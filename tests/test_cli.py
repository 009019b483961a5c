"""
Tests for the subquote command line
"""

import io
import json
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from subquote.cli import default_cache_directory, main


SUBTITLE = """1
00:00:01,000 --> 00:00:03,000
Keep your friends close.

2
00:00:04,000 --> 00:00:06,000
Keep your enemies closer!
"""


class TestCommandLine(unittest.TestCase):
    """Tests for argument handling, validation and exit status."""

    def setUp(self):
        """Set up a subtitle file and a cache directory."""
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.tmp = Path(tmp.name)
        self.cache_dir = self.tmp / "cache"
        self.cache_dir.mkdir()
        self.subtitle = self.tmp / "godfather.srt"
        self.subtitle.write_text(SUBTITLE, encoding="utf-8")

    def run_main(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(list(argv))
        return status, out.getvalue(), err.getvalue()

    def test_prints_quote(self):
        """Test a successful run prints one punctuated line."""
        status, out, err = self.run_main(
            str(self.subtitle), "--cache", str(self.cache_dir), "--seed", "1"
        )
        self.assertEqual(status, 0)
        self.assertEqual(err, "")
        lines = out.splitlines()
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("Keep"))
        self.assertIn(lines[0][-1], ".,!?")
        self.assertTrue((self.cache_dir / "godfather.word").is_file())

    def test_char_unit_cache(self):
        """Test that the char unit writes a .char cache file."""
        status, _, _ = self.run_main(
            str(self.subtitle), "-u", "char", "--cache", str(self.cache_dir)
        )
        self.assertEqual(status, 0)
        self.assertTrue((self.cache_dir / "godfather.char").is_file())

    def test_length_bound(self):
        """Test that --length limits the number of tokens."""
        status, out, _ = self.run_main(
            str(self.subtitle), "-l", "1", "--cache", str(self.cache_dir)
        )
        self.assertEqual(status, 0)
        self.assertLessEqual(len(out.split()), 2)

    def test_invalid_length(self):
        """Test that a length below 1 is reported."""
        status, out, err = self.run_main(
            str(self.subtitle), "-l", "0", "--cache", str(self.cache_dir)
        )
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertIn("quote length must be greater or equal to 1", err)

    def test_errors_joined(self):
        """Test that all validation problems are reported together."""
        status, _, err = self.run_main(
            str(self.tmp / "missing.srt"), "--cache", str(self.tmp / "nocache")
        )
        self.assertEqual(status, 1)
        self.assertIn("couldn't read specified cache directory", err)
        self.assertIn("; specified subtitle is not a file", err)
        self.assertEqual(len(err.strip().splitlines()), 1)

    def test_default_cache_created(self):
        """Test that the default cache directory is created under XDG_CACHE_HOME."""
        xdg = self.tmp / "xdg"
        xdg.mkdir()
        with mock.patch.dict(os.environ, {"XDG_CACHE_HOME": str(xdg)}):
            self.assertEqual(default_cache_directory(), str(xdg / "subquote"))
            status, _, _ = self.run_main(str(self.subtitle))
        self.assertEqual(status, 0)
        self.assertTrue((xdg / "subquote" / "godfather.word").is_file())

    def test_no_default_cache(self):
        """Test the error when no cache directory can be determined."""
        with mock.patch.dict(os.environ, {}, clear=True):
            status, _, err = self.run_main(str(self.subtitle))
        self.assertEqual(status, 1)
        self.assertIn("--cache /path/to/cache", err)

    def test_config_file(self):
        """Test settings from a JSON config file, with flags taking precedence."""
        config_file = self.tmp / "run.json"
        config_file.write_text(json.dumps({
            "cache_directory": str(self.cache_dir),
            "unit": "char",
            "quote_length": 3,
        }), encoding="utf-8")
        status, _, _ = self.run_main(str(self.subtitle), "--config", str(config_file))
        self.assertEqual(status, 0)
        self.assertTrue((self.cache_dir / "godfather.char").is_file())

        status, _, _ = self.run_main(
            str(self.subtitle), "--config", str(config_file), "-u", "word"
        )
        self.assertEqual(status, 0)
        self.assertTrue((self.cache_dir / "godfather.word").is_file())

    def test_bad_config_file(self):
        """Test that an unreadable config file is reported."""
        status, _, err = self.run_main(
            str(self.subtitle), "--config", str(self.tmp / "none.json")
        )
        self.assertEqual(status, 1)
        self.assertIn("couldn't read config file", err)

    def write_config(self, settings):
        config_file = self.tmp / "run.json"
        config_file.write_text(json.dumps(settings), encoding="utf-8")
        return str(config_file)

    def test_config_cache_directory_type(self):
        """Test that a non-string cache directory is reported, not raised."""
        for value in (None, 3, ["a"]):
            with self.subTest(value=value):
                config_file = self.write_config({"cache_directory": value})
                status, out, err = self.run_main(str(self.subtitle), "--config", config_file)
                self.assertEqual(status, 1)
                self.assertEqual(out, "")
                self.assertTrue(err.startswith("Error: cache_directory must be a string"))
                self.assertEqual(len(err.strip().splitlines()), 1)

    def test_config_verbose_type(self):
        """Test that verbose must be a JSON boolean."""
        config_file = self.write_config({
            "cache_directory": str(self.cache_dir),
            "verbose": "no",
        })
        status, _, err = self.run_main(str(self.subtitle), "--config", config_file)
        self.assertEqual(status, 1)
        self.assertIn("verbose must be true or false", err)

    def test_config_seed_type(self):
        """Test that seed must be a JSON integer."""
        config_file = self.write_config({
            "cache_directory": str(self.cache_dir),
            "seed": "seven",
        })
        status, _, err = self.run_main(str(self.subtitle), "--config", config_file)
        self.assertEqual(status, 1)
        self.assertIn("seed must be an integer", err)

    def test_corrupt_cache_reported(self):
        """Test that pipeline errors surface as a single error line."""
        (self.cache_dir / "godfather.word").write_text("garbage", encoding="utf-8")
        status, out, err = self.run_main(str(self.subtitle), "--cache", str(self.cache_dir))
        self.assertEqual(status, 1)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("Error: couldn't deserialize cached file"))


if __name__ == '__main__':
    unittest.main()
