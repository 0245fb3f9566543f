import contextlib
import io
import json
import unittest

from fluent_contracts import cli
from tests._util import tmp_dir


class ParseOptionsTests(unittest.TestCase):
    def test_defaults(self):
        opts = cli.parse_options([])
        self.assertEqual(
            opts,
            {"output": None, "heading_level": 2, "contracts": None, "verbosity": "WARNING"},
        )

    def test_flags(self):
        opts = cli.parse_options(
            ["--output", "out.md", "--heading-level", "3", "--contracts", "String", "List"]
        )
        self.assertEqual(opts["output"], "out.md")
        self.assertEqual(opts["heading_level"], 3)
        self.assertEqual(opts["contracts"], ["String", "List"])

    def test_config_overrides_flags(self):
        with tmp_dir() as td:
            cfg = td / "cfg.json"
            cfg.write_text(json.dumps({"heading_level": 4}), encoding="utf-8")
            opts = cli.parse_options(["--config", str(cfg), "--heading-level", "3"])
        self.assertEqual(opts["heading_level"], 4)
        self.assertIsNone(opts["output"])

    def test_missing_config(self):
        with self.assertRaises(FileNotFoundError):
            cli.parse_options(["--config", "/definitely/not/here.json"])

    def test_config_with_unknown_key(self):
        with tmp_dir() as td:
            cfg = td / "cfg.json"
            cfg.write_text(json.dumps({"colour": "red"}), encoding="utf-8")
            with self.assertRaisesRegex(ValueError, "Unknown option"):
                cli.parse_options(["--config", str(cfg)])

    def test_unknown_contract_choice(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.parse_options(["--contracts", "Nope"])


class MainTests(unittest.TestCase):
    def test_writes_stdout(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = cli.main(["--contracts", "Bool"])
        self.assertEqual(code, 0)
        self.assertTrue(out.getvalue().startswith("## Bool\n"))

    def test_dash_means_stdout(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            cli.main(["--output", "-", "--contracts", "Duration"])
        self.assertIn("- `be_shorter_than`", out.getvalue())

    def test_writes_file(self):
        with tmp_dir() as td:
            target = td / "docs" / "SUPPORTED.md"
            code = cli.main(["--output", str(target), "--heading-level", "1"])
            self.assertEqual(code, 0)
            text = target.read_text(encoding="utf-8")
        self.assertIn("# DataFrame\n", text)

    def test_bad_config_exits(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--config", "/definitely/not/here.json"])
        self.assertEqual(ctx.exception.code, 2)

    def test_bad_heading_level_exits(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.main(["--heading-level", "0"])


if __name__ == "__main__":
    unittest.main()
