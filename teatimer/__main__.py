"""Entry point for teatimer."""

import argparse
import sys

from rich.console import Console
from rich.text import Text

from teatimer import __author__, __version__
from teatimer.app import Stopwatch
from teatimer.errors import TeaTimerError
from teatimer.log import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tt", description="Tea timer! Count up in seconds.")
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__} (by {__author__})",
    )
    return parser


def _fail(message: str) -> int:
    err = Console(stderr=True)
    err.print(Text.assemble(("tt: ", "bold red"), message))
    return 1


def main(argv=None) -> int:
    build_parser().parse_args(argv)
    setup_logging()

    stopwatch = Stopwatch()
    try:
        stopwatch.run()
    except TeaTimerError as exc:
        return _fail(str(exc))
    except OSError as exc:
        return _fail(f"terminal error: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
