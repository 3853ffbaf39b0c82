"""Argument parser helpers for the CLI."""

from __future__ import annotations

import argparse
import logging
import time

from ..options import (
    DEFAULT_FLUSH_INTERVAL,
    DEFAULT_RATE_LIMIT,
    DEFAULT_RETRIES,
    DEFAULT_THREADS,
    DEFAULT_TRACE_MAX_RECURSION,
    DEFAULT_WILDCARD_THRESHOLD,
    QUERY_FLAGS,
)


def _setup_logging(level: int) -> None:
    """Configure logging for the selected level.

    Args:
        level (int): Logging level from the parsed options.
    """
    logging.Formatter.converter = time.gmtime  # UTC timestamps
    logging.basicConfig(
        level=level,
        format="%(asctime)sZ [%(levelname)s] %(name)s: %(message)s",
    )


def _flag(name: str, *aliases: str) -> list[str]:
    """Return option strings for a flag.

    Both ``-name`` and ``--name`` are accepted, aliases use a single dash.

    Args:
        name (str): Long flag name.
        *aliases (str): Short aliases.

    Returns:
        list[str]: Option strings for ``add_argument``.
    """
    return [*(f"-{alias}" for alias in aliases), f"-{name}", f"--{name}"]


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="dnsprobe",
        description="Fast multi-purpose DNS toolkit to run multiple probes",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        allow_abbrev=False,
    )
    input_group = parser.add_argument_group("Input")
    query_group = parser.add_argument_group("Query")
    filters_group = parser.add_argument_group("Filters")
    rate_limit_group = parser.add_argument_group("Rate-limit")
    output_group = parser.add_argument_group("Output")
    debug_group = parser.add_argument_group("Debug")
    optimization_group = parser.add_argument_group("Optimization")
    configs_group = parser.add_argument_group("Configurations")

    input_group.add_argument(
        *_flag("list", "l"),
        dest="hosts",
        default="",
        help="list of sub(domains)/hosts to resolve (file or stdin)",
    )
    input_group.add_argument(
        *_flag("domain", "d"),
        dest="domains",
        default="",
        help="list of domain to bruteforce (file or comma separated or stdin)",
    )
    input_group.add_argument(
        *_flag("wordlist", "w"),
        dest="wordlist",
        default="",
        help="list of words to bruteforce (file or comma separated or stdin)",
    )

    for name, _rdtype in QUERY_FLAGS:
        query_group.add_argument(
            *_flag(name),
            dest=name,
            action="store_true",
            help=f"query {name.upper()} record" + (" (default)" if name == "a" else ""),
        )

    filters_group.add_argument(
        *_flag("resp"),
        dest="response",
        action="store_true",
        help="display dns response",
    )
    filters_group.add_argument(
        *_flag("resp-only"),
        dest="response_only",
        action="store_true",
        help="display dns response only",
    )
    filters_group.add_argument(
        *_flag("rcode", "rc"),
        dest="rcode",
        default="",
        help="filter result by dns status code (eg. -rcode noerror,servfail,refused)",
    )

    rate_limit_group.add_argument(
        *_flag("c", "t"),
        dest="threads",
        type=int,
        default=DEFAULT_THREADS,
        help="number of concurrent threads to use",
    )
    rate_limit_group.add_argument(
        *_flag("rate-limit", "rl"),
        dest="rate_limit",
        type=int,
        default=DEFAULT_RATE_LIMIT,
        help="number of dns request/second to make (disabled as default)",
    )

    output_group.add_argument(
        *_flag("output", "o"),
        dest="output_file",
        default="",
        help="file to write output",
    )
    output_group.add_argument(
        *_flag("json"),
        dest="json",
        action="store_true",
        help="write output in JSONL(ines) format",
    )

    debug_group.add_argument(
        *_flag("silent"),
        dest="silent",
        action="store_true",
        help="display only results in the output",
    )
    debug_group.add_argument(
        *_flag("verbose", "v"),
        dest="verbose",
        action="store_true",
        help="display verbose output",
    )
    debug_group.add_argument(
        *_flag("debug", "raw"),
        dest="raw",
        action="store_true",
        help="display raw dns response",
    )
    debug_group.add_argument(
        *_flag("stats"),
        dest="show_statistics",
        action="store_true",
        help="display stats of the running scan",
    )
    debug_group.add_argument(
        *_flag("version"),
        dest="version",
        action="store_true",
        help="display version of dnsprobe",
    )

    optimization_group.add_argument(
        *_flag("retry"),
        dest="retries",
        type=int,
        default=DEFAULT_RETRIES,
        help="number of dns retries to make",
    )
    optimization_group.add_argument(
        *_flag("hostsfile", "hf"),
        dest="hosts_file",
        action="store_true",
        help="use system host file",
    )
    optimization_group.add_argument(
        *_flag("trace"),
        dest="trace",
        action="store_true",
        help="perform dns tracing",
    )
    optimization_group.add_argument(
        *_flag("trace-max-recursion"),
        dest="trace_max_recursion",
        type=int,
        default=DEFAULT_TRACE_MAX_RECURSION,
        help="max recursion for dns trace",
    )
    optimization_group.add_argument(
        *_flag("flush-interval"),
        dest="flush_interval",
        type=int,
        default=DEFAULT_FLUSH_INTERVAL,
        help="flush interval of output file",
    )
    optimization_group.add_argument(
        *_flag("resume"),
        dest="resume",
        action="store_true",
        help="resume existing scan",
    )

    configs_group.add_argument(
        *_flag("resolver", "r"),
        dest="resolvers",
        default="",
        help="list of resolvers to use (file or comma separated)",
    )
    configs_group.add_argument(
        *_flag("wildcard-threshold", "wt"),
        dest="wildcard_threshold",
        type=int,
        default=DEFAULT_WILDCARD_THRESHOLD,
        help="wildcard filter threshold",
    )
    configs_group.add_argument(
        *_flag("wildcard-domain", "wd"),
        dest="wildcard_domain",
        default="",
        help="domain name for wildcard filtering (other flags will be ignored)",
    )
    return parser
