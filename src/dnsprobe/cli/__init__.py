"""Command-line interface for dnsprobe."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List

from .. import __version__
from ..errors import OptionsError
from ..options import Options, build_options
from ..resume import DEFAULT_RESUME_FILE
from .banner import show_banner
from .parser import _setup_logging, build_parser

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_OPTIONS_ERROR = 1

__all__ = [
    "EXIT_OK",
    "EXIT_OPTIONS_ERROR",
    "_setup_logging",
    "build_parser",
    "main",
    "parse_options",
]


def parse_options(
    argv: List[str] | None = None,
    resume_path: Path | str = DEFAULT_RESUME_FILE,
) -> Options:
    """Parse command-line arguments into validated options.

    Args:
        argv (List[str] | None): Optional argument list for parsing.
        resume_path (Path | str): Checkpoint file location.

    Returns:
        Options: Frozen options.

    Raises:
        OptionsError: If an rcode, resume file or input rule is invalid.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return build_options(args, resume_path=resume_path)


def main(argv: List[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Args:
        argv (List[str] | None): Optional argument list for parsing.

    Returns:
        int: Exit code (0=OK or version shown, 1=invalid options).
    """
    try:
        options = parse_options(argv)
    except OptionsError as exc:
        _setup_logging(logging.INFO)
        LOGGER.error("%s", exc)
        return EXIT_OPTIONS_ERROR

    _setup_logging(options.log_level)
    if not options.silent:
        show_banner()

    if options.version:
        print(f"Current Version: {__version__}")
        return EXIT_OK

    LOGGER.debug("Parsed options: %s", options)
    if options.resume and not options.resume_checkpoint.is_empty():
        LOGGER.info(
            "Resuming from %s (index %d)",
            options.resume_checkpoint.resume_from,
            options.resume_checkpoint.index,
        )
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
