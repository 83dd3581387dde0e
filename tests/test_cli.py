#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
End-to-end suite for the *decomment* command line.

The sample tree is rebuilt per test by tests/tools/build_fixtures.py so every
test starts from pristine, comment-laden sources.
"""
from __future__ import annotations

import json
import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from decomment.cli import main

TOOLS_DIR = Path(__file__).resolve().parent / "tools"
BUILD_SCRIPT = TOOLS_DIR / "build_fixtures.py"
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"


def _exit_code(argv) -> int:
    try:
        main(argv)
    except SystemExit as exc:
        return int(exc.code or 0)
    raise AssertionError("main() must always exit")


class CliTestBase(unittest.TestCase):
    def setUp(self) -> None:
        self._td = tempfile.TemporaryDirectory()
        self.root = Path(self._td.name) / "fixtures"
        subprocess.check_call([sys.executable, str(BUILD_SCRIPT), str(self.root)], stdout=subprocess.DEVNULL)

    def tearDown(self) -> None:
        self._td.cleanup()

    def read(self, rel: str) -> str:
        return (self.root / rel).read_text(encoding="utf-8")


class StripRunTests(CliTestBase):
    def test_strips_every_supported_language(self) -> None:
        self.assertEqual(_exit_code([str(self.root), "-q"]), 0)

        c_src = self.read("src/main.c")
        self.assertIn("#include <stdio.h>", c_src)
        self.assertIn('printf("hello // world\\n");', c_src)
        self.assertNotIn("Entry point", c_src)
        self.assertNotIn("greet", c_src)
        self.assertNotIn("done", c_src)

        py_src = self.read("src/util.py")
        self.assertIn('"""Helpers. # not a comment"""', py_src)
        self.assertIn('URL = "http://example.com/#anchor"', py_src)
        self.assertNotIn("homepage", py_src)
        self.assertNotIn("sum two numbers", py_src)

        hs_src = self.read("src/Main.hs")
        self.assertNotIn("Module header", hs_src)
        self.assertNotIn("still comment", hs_src)
        self.assertNotIn("greet", hs_src)
        self.assertIn('putStrLn "--not a comment"', hs_src)
        self.assertTrue(hs_src.startswith("\nmodule Main where\n"))

        html = self.read("web/index.html")
        self.assertIn("<!DOCTYPE html>", html)
        self.assertIn("<p>text</p>", html)
        self.assertNotIn("banner", html)

    def test_line_structure_is_preserved(self) -> None:
        py_before = self.read("src/util.py").count("\n")
        c_before = self.read("src/main.c").count("\n")
        _exit_code([str(self.root), "-q"])
        # util.py only has line comments: every line survives.
        self.assertEqual(self.read("src/util.py").count("\n"), py_before)
        # main.c loses the one line break inside its two-line block comment.
        self.assertEqual(self.read("src/main.c").count("\n"), c_before - 1)

    def test_unsupported_and_hidden_files_untouched(self) -> None:
        readme = self.read("docs/README.md")
        secret = self.read(".hidden/secret.c")
        _exit_code([str(self.root), "-q"])
        self.assertEqual(self.read("docs/README.md"), readme)
        self.assertEqual(self.read(".hidden/secret.c"), secret)

    def test_include_hidden(self) -> None:
        _exit_code([str(self.root), "-q", "--include-hidden"])
        self.assertNotIn("keep me", self.read(".hidden/secret.c"))

    def test_second_run_changes_nothing(self) -> None:
        _exit_code([str(self.root), "-q"])
        snapshot = {p: p.read_bytes() for p in self.root.rglob("*") if p.is_file()}
        report_path = Path(self._td.name) / "report.json"
        _exit_code([str(self.root), "-q", "--report", str(report_path)])
        self.assertEqual({p: p.read_bytes() for p in self.root.rglob("*") if p.is_file()}, snapshot)
        data = json.loads(report_path.read_text(encoding="utf-8"))
        self.assertEqual(data["files_by_status"]["stripped"], 0)

    def test_parallel_jobs(self) -> None:
        self.assertEqual(_exit_code([str(self.root), "-q", "-j", "3"]), 0)
        self.assertNotIn("greet", self.read("src/main.c"))


class OptionTests(CliTestBase):
    def test_dry_run(self) -> None:
        before = self.read("src/main.c")
        self.assertEqual(_exit_code([str(self.root), "-q", "--dry-run"]), 0)
        self.assertEqual(self.read("src/main.c"), before)

    def test_formatted_copy(self) -> None:
        before = self.read("src/util.py")
        self.assertEqual(_exit_code([str(self.root), "-q", "--formatted-copy"]), 0)
        self.assertEqual(self.read("src/util.py"), before)
        self.assertNotIn("homepage", self.read("src/util_formatted.py"))
        self.assertFalse((self.root / "docs/README_formatted.md").exists())
        self.assertFalse((self.root / "clean/no_comments_formatted.py").exists())

    def test_report_file(self) -> None:
        report_path = Path(self._td.name) / "report.json"
        _exit_code([str(self.root), "-q", "--report", str(report_path)])
        data = json.loads(report_path.read_text(encoding="utf-8"))
        self.assertEqual(data["files_total"], 6)
        self.assertEqual(data["files_by_status"]["stripped"], 4)
        self.assertEqual(data["files_by_status"]["unchanged"], 1)
        self.assertEqual(data["files_by_status"]["skipped"], 1)
        self.assertEqual(data["root"], str(self.root))

    def test_logs_processed_files(self) -> None:
        with self.assertLogs("decomment", level="INFO") as logs:
            _exit_code([str(self.root)])
        joined = "\n".join(logs.output)
        self.assertIn("main.c", joined)
        self.assertIn("4 stripped", joined)


class ExitCodeTests(unittest.TestCase):
    def test_missing_argument(self) -> None:
        self.assertEqual(_exit_code([]), 2)

    def test_missing_directory(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self.assertEqual(_exit_code([str(Path(td) / "nope"), "-q"]), 1)

    def test_file_instead_of_directory(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            fp = Path(td) / "a.c"
            fp.write_text("// x\n", encoding="utf-8")
            self.assertEqual(_exit_code([str(fp), "-q"]), 1)
            self.assertEqual(fp.read_text(encoding="utf-8"), "// x\n")

    def test_unlistable_directory(self) -> None:
        real_scandir = os.scandir
        with tempfile.TemporaryDirectory() as td:
            fp = Path(td) / "a.c"
            fp.write_text("// x\n", encoding="utf-8")

            def deny_root(path="."):
                if Path(path) == Path(td):
                    raise PermissionError(13, "Permission denied", str(path))
                return real_scandir(path)

            with patch("decomment.io.walker.os.scandir", deny_root):
                self.assertEqual(_exit_code([td, "-q"]), 1)
            self.assertEqual(fp.read_text(encoding="utf-8"), "// x\n")


    def test_invalid_jobs(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            self.assertEqual(_exit_code([td, "-j", "0"]), 2)

    def test_version(self) -> None:
        self.assertEqual(_exit_code(["--version"]), 0)

    def test_module_entry_point(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            fp = Path(td) / "a.py"
            fp.write_text("x = 1  # one\n", encoding="utf-8")
            env = dict(os.environ, PYTHONPATH=str(SRC_ROOT), PYTHONIOENCODING="utf-8")
            proc = subprocess.run(
                [sys.executable, "-m", "decomment", td],
                env=env,
                capture_output=True,
                encoding="utf-8",
            )
            self.assertEqual(proc.returncode, 0, proc.stderr)
            self.assertEqual(fp.read_text(encoding="utf-8"), "x = 1  \n")
            self.assertIn("a.py", proc.stderr)


if __name__ == "__main__":
    unittest.main()
