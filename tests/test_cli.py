"""Tests for plainsight/cli.py.

Runs main() in-process with a missing config file so defaults apply;
stdout/stdin are patched, nothing touches the network.
"""

import io
import json
import logging
import os
import sys
import tempfile
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from rich.console import Console

from plainsight import cli

NO_CONFIG = ["--config", "/nonexistent/config.txt"]
CI_TEXT = "Researchers reported the Confidence Interval (CI) for each group."
CI_DEF = "a range that likely contains the true value"


def _run_json(argv):
    with patch("sys.stdout", new_callable=io.StringIO) as out:
        code = cli.main(argv + NO_CONFIG + ["--json"])
    return code, json.loads(out.getvalue())


class TestJsonOutput(unittest.TestCase):
    """--json prints the SimplifyResult as a JSON object."""

    def test_paragraph(self):
        code, data = _run_json(["The study utilized 45 participants."])
        self.assertEqual(code, 0)
        self.assertEqual(data, {"simple": "The study used 45 participants.", "bullets": [], "terms": []})

    def test_bullets_mode_flag(self):
        code, data = _run_json(["Cats sleep. Cats sleep. Dogs bark.", "--mode", "bullets"])
        self.assertEqual(code, 0)
        self.assertEqual(data["bullets"], ["Cats sleep.", "Dogs bark."])
        self.assertEqual(data["simple"], "")

    def test_inline_glossary_on_by_default(self):
        _, data = _run_json([CI_TEXT])
        self.assertIn(f"Confidence Interval [{CI_DEF}]", data["simple"])
        self.assertEqual(data["terms"], [{"term": "confidence interval", "definition": CI_DEF}])

    def test_no_inline_glossary_flag(self):
        _, data = _run_json([CI_TEXT, "--no-inline-glossary"])
        self.assertNotIn("[", data["simple"])
        self.assertEqual([t["term"] for t in data["terms"]], ["confidence interval"])

    def test_reads_stdin(self):
        with patch("sys.stdin", io.StringIO("We utilize tools.")):
            _, data = _run_json([])
        self.assertEqual(data["simple"], "We use tools.")

    def test_reads_file(self):
        fd, path = tempfile.mkstemp(suffix=".txt")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write("Prior to lunch we ate.")
        self.addCleanup(os.unlink, path)
        _, data = _run_json(["--file", path])
        self.assertEqual(data["simple"], "Before lunch we ate.")

    def test_custom_glossary_file(self):
        fd, path = tempfile.mkstemp(suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump({"kidneys": "organs that filter blood"}, fh)
        self.addCleanup(os.unlink, path)
        _, data = _run_json(["The kidneys filter blood.", "--glossary", path])
        self.assertEqual(data["terms"], [{"term": "kidneys", "definition": "organs that filter blood"}])


class TestErrors(unittest.TestCase):
    """Configuration problems exit with status 2."""

    def test_bad_glossary_file(self):
        buf = io.StringIO()
        with patch.object(cli, "console", Console(file=buf, width=120)):
            code = cli.main(["Text.", "--glossary", "/nonexistent/glossary.json"] + NO_CONFIG)
        self.assertEqual(code, 2)
        self.assertIn("Error", buf.getvalue())

    def test_missing_input_file(self):
        buf = io.StringIO()
        with patch.object(cli, "console", Console(file=buf, width=120)):
            code = cli.main(["--file", "/nonexistent/input.txt"] + NO_CONFIG)
        self.assertEqual(code, 2)
        self.assertIn("Error", buf.getvalue())

    def test_bad_mode_in_config(self):
        fd, path = tempfile.mkstemp(suffix=".txt")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write("mode = analogy\n")
        self.addCleanup(os.unlink, path)
        with patch.object(cli, "console", Console(file=io.StringIO(), width=120)):
            code = cli.main(["Text.", "--config", path])
        self.assertEqual(code, 2)

    def test_invalid_mode_flag_rejected_by_argparse(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                cli.main(["Text.", "--mode", "analogy"] + NO_CONFIG)


class TestLogLevel(unittest.TestCase):
    """log_level from config.txt never breaks startup."""

    def test_level_names(self):
        self.assertEqual(cli._log_level("debug"), logging.DEBUG)
        self.assertEqual(cli._log_level(" INFO "), logging.INFO)

    def test_numeric_level_passes_through(self):
        self.assertEqual(cli._log_level(10), 10)

    def test_unknown_level_falls_back_to_warning(self):
        self.assertEqual(cli._log_level("chatty"), logging.WARNING)

    def test_main_runs_with_numeric_level_in_config(self):
        fd, path = tempfile.mkstemp(suffix=".txt")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write("log_level = 10\n")
        self.addCleanup(os.unlink, path)
        with patch("sys.stdout", new_callable=io.StringIO) as out:
            code = cli.main(["Cats sleep.", "--config", path, "--json"])
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out.getvalue())["simple"], "Cats sleep.")


class TestRichOutput(unittest.TestCase):
    """Default output is rendered with rich."""

    def test_paragraph_and_terms_table(self):
        buf = io.StringIO()
        with patch.object(cli, "console", Console(file=buf, width=200)):
            code = cli.main([CI_TEXT] + NO_CONFIG)
        self.assertEqual(code, 0)
        out = buf.getvalue()
        self.assertIn(f"[{CI_DEF}]", out)
        self.assertIn("confidence interval", out)

    def test_bullets(self):
        buf = io.StringIO()
        with patch.object(cli, "console", Console(file=buf, width=200)):
            cli.main(["Cats sleep. Dogs bark.", "--mode", "bullets"] + NO_CONFIG)
        self.assertIn("• Cats sleep.", buf.getvalue())


if __name__ == "__main__":
    unittest.main()
