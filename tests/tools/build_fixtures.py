#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Create / refresh the sample source tree used by the
end-to-end CLI tests of decomment.

Usage: build_fixtures.py [TARGET_DIR]   (default: <repo>/test-fixtures)

Idempotent: the target directory is wiped and rebuilt on every call.
"""
from __future__ import annotations

import shutil
import sys
import textwrap
from pathlib import Path

DEFAULT_ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


# ───────────────────── source files ─────────────────────
def _populate(root: Path) -> None:
    _write(root / "src/main.c", r"""
        #include <stdio.h>

        /* Entry point.
           Prints a greeting. */
        int main(void) {
            printf("hello // world\n"); // greet
            return 0; /* done */
        }
    """)

    _write(root / "src/util.py", r'''
        """Helpers. # not a comment"""
        URL = "http://example.com/#anchor"  # homepage


        def add(a, b):
            # sum two numbers
            return a + b
    ''')

    _write(root / "src/Main.hs", r"""
        {- Module header
           {- nested -} still comment -}
        module Main where

        main :: IO ()
        main = putStrLn "--not a comment" -- greet
    """)

    _write(root / "web/index.html", r"""
        <!DOCTYPE html>
        <html>
        <!-- banner -->
        <body><p>text<!-- note --></p></body>
        </html>
    """)

    _write(root / "docs/README.md", r"""
        # Title
        // not code
    """)

    _write(root / "clean/no_comments.py", r"""
        x = 1
    """)

    _write(root / ".hidden/secret.c", r"""
        int s; // keep me
    """)


def build(root: Path = DEFAULT_ROOT) -> Path:
    root = Path(root).resolve()
    if root.exists():
        shutil.rmtree(root)
    root.mkdir(parents=True)
    _populate(root)
    return root


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_ROOT
    print(build(target))
