"""Startup banner."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .. import __version__

BANNER = r"""
     __
 ___/ /__  ___ ___  _______  ___  ___
/ _  / _ \(_-</ _ \/ __/ _ \/ _ \/ -_)
\_,_/_//_/___/ .__/_/  \___/_.__/\__/
            /_/
"""


def show_banner(stream: Optional[TextIO] = None) -> None:
    """Print the banner and version.

    Args:
        stream (Optional[TextIO]): Destination stream; defaults to stderr.
    """
    target = stream if stream is not None else sys.stderr
    print(BANNER, file=target)
    print(f"\t\tv{__version__}\n", file=target)
