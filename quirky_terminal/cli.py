"""Entry point for the quirky-terminal command line tool."""

from __future__ import annotations

import argparse
import logging

from . import __version__
from .art import NIGHT_OUT, THIRTY_YEARS_LATER, combine_art
from .modules import default_modules
from .renderer import draw

ART_GAP = 5


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="quirky-terminal",
        description="Show system facts beside a pair of ASCII portraits.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log unavailable system facts to stderr")
    args = parser.parse_args()

    configure_logging(args.verbose)

    scene = combine_art(NIGHT_OUT, THIRTY_YEARS_LATER, gap=ART_GAP)
    draw(scene, default_modules())


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(__package__).setLevel(logging.DEBUG if verbose else logging.WARNING)


if __name__ == "__main__":
    main()
