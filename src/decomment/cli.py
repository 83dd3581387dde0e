from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from decomment.constants import ENV_DEBUG, ENV_JSON_LOGS
from decomment.core.errors import TraversalError
from decomment.core.report import RunReport
from decomment.io.storage import TextFileStorage
from decomment.io.walker import DirectoryWalker
from decomment.logging.factory import DefaultLoggerFactory
from decomment.logging.helpers import get_logger
from decomment.processing.classifier import ExtensionClassifier
from decomment.runtime.runner import DecommentRunner


logger = get_logger('decomment')


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Only DIR is required; every option keeps the plain "strip in place"
    behaviour when omitted.
    """
    from decomment import __version__

    p = argparse.ArgumentParser(
        prog="decomment",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "decomment – strip comments from every supported source file "
            "below DIR, in place.\n"
            "Languages are picked by extension: C-family, Python, Haskell and "
            "HTML/XML markup.\nOther files are left untouched."
        ),
    )
    p.add_argument("directory", metavar="DIR", help="Root directory to process recursively.")

    g_out = p.add_argument_group("Output")
    g_walk = p.add_argument_group("Traversal")
    g_log = p.add_argument_group("Logging")

    g_out.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the files that would change without writing anything.",
    )
    g_out.add_argument(
        "--formatted-copy",
        action="store_true",
        help=(
            "Write the result next to each file as <name>_formatted<ext> "
            "instead of overwriting the original."
        ),
    )
    g_out.add_argument(
        "--report",
        metavar="FILE",
        dest="report_path",
        help="Write a JSON run report to FILE.",
    )

    g_walk.add_argument(
        "--include-hidden",
        action="store_true",
        help="Also descend into hidden files and directories (names starting with '.').",
    )
    g_walk.add_argument(
        "-j",
        "--jobs",
        metavar="N",
        type=_positive_int,
        default=1,
        help="Number of files processed in parallel (default: 1).",
    )

    g_log.add_argument(
        "--json-logs",
        action="store_true",
        help=f"Emit log lines as JSON ({ENV_JSON_LOGS}=1 does the same).",
    )
    verbosity = g_log.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only warnings and errors.")

    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {raw!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _log_level(ns: argparse.Namespace) -> int:
    if ns.verbose:
        return logging.DEBUG
    if ns.quiet:
        return logging.WARNING
    return logging.INFO


def _configure_logging(*, json_logs: bool, level: int) -> None:
    """Configure process-wide logging, plain text or JSON."""
    factory = DefaultLoggerFactory(json_logs=json_logs, level=level)
    global logger
    logger = factory.get_logger('decomment')


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    raise SystemExit(code)


def run(argv: Sequence[str]) -> RunReport:
    """Parse *argv*, process the directory and return the run report."""
    ns = _build_parser().parse_args(list(argv))
    json_logs = ns.json_logs or os.getenv(ENV_JSON_LOGS) == '1'
    _configure_logging(json_logs=json_logs, level=_log_level(ns))

    runner = DecommentRunner(
        classifier=ExtensionClassifier.default(),
        storage=TextFileStorage(logger=get_logger('io.storage')),
        walker=DirectoryWalker(include_hidden=ns.include_hidden, logger=get_logger('io.walker')),
        logger=get_logger('runtime'),
        jobs=ns.jobs,
        dry_run=ns.dry_run,
        formatted_copy=ns.formatted_copy,
    )
    try:
        report = runner.run(Path(ns.directory))
    except TraversalError as exc:
        _fatal(f'⚠  {exc}')

    if ns.report_path:
        Path(ns.report_path).write_text(report.to_json(), encoding='utf-8')
    return report


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `decomment` and `python -m decomment`."""
    try:
        run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(0)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv(ENV_DEBUG) == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
