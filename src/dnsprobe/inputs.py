"""Expansion of input flag values into individual items.

Input flags accept a literal, a comma separated list, a file path, or the
stdin marker.
"""

from __future__ import annotations

import ipaddress
import sys
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO

from .errors import ValidationError
from .validation import argument_has_stdin

DEFAULT_DNS_PORT = 53


class InputKind(Enum):
    """Kinds of input flag values."""

    EMPTY = "empty"
    STDIN = "stdin"
    FILE = "file"
    LIST = "list"


def classify_input(value: str) -> InputKind:
    """Classify an input flag value.

    Args:
        value (str): Raw flag value.

    Returns:
        InputKind: Kind of input the value refers to.
    """
    if value == "":
        return InputKind.EMPTY
    if argument_has_stdin(value):
        return InputKind.STDIN
    if Path(value).is_file():
        return InputKind.FILE
    return InputKind.LIST


def _clean_lines(lines: Iterable[str]) -> Iterator[str]:
    """Strip items and drop blanks.

    Args:
        lines (Iterable[str]): Raw items.

    Yields:
        str: Non-empty stripped item.
    """
    for line in lines:
        item = line.strip()
        if item:
            yield item


def expand_input(value: str, stdin: Optional[TextIO] = None) -> Iterator[str]:
    """Iterate the items referenced by an input flag value.

    Args:
        value (str): Raw flag value.
        stdin (Optional[TextIO]): Stream used for the stdin marker; defaults to ``sys.stdin``.

    Yields:
        str: Individual input item.
    """
    kind = classify_input(value)
    if kind is InputKind.EMPTY:
        return
    if kind is InputKind.STDIN:
        yield from _clean_lines(stdin if stdin is not None else sys.stdin)
    elif kind is InputKind.FILE:
        with Path(value).open(encoding="utf-8") as handle:
            yield from _clean_lines(handle)
    else:
        yield from _clean_lines(value.split(","))


def _parse_resolver(entry: str) -> str:
    """Normalize a resolver entry into ``address:port`` form.

    Args:
        entry (str): Resolver as ``ip``, ``ip:port`` or ``[ipv6]:port``.

    Returns:
        str: Normalized resolver address.

    Raises:
        ValidationError: If the address or port is invalid.
    """
    host, port = entry, str(DEFAULT_DNS_PORT)
    if entry.startswith("["):
        host, sep, rest = entry[1:].partition("]")
        if not sep or (rest and not rest.startswith(":")):
            raise ValidationError(f"invalid resolver '{entry}'")
        if rest:
            port = rest[1:]
    elif entry.count(":") == 1:
        host, port = entry.split(":", 1)
    try:
        address = ipaddress.ip_address(host)
    except ValueError as exc:
        raise ValidationError(f"invalid resolver '{entry}'") from exc
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ValidationError(f"invalid resolver port in '{entry}'")
    if address.version == 6:
        return f"[{address}]:{int(port)}"
    return f"{address}:{int(port)}"


def parse_resolvers(value: str) -> List[str]:
    """Expand and validate the resolver flag.

    Resolvers are read from a file or a comma list; stdin is left to the
    host and bruteforce inputs.

    Args:
        value (str): Resolver flag value.

    Returns:
        List[str]: Normalized resolvers with duplicates removed, in input order.

    Raises:
        ValidationError: If the value reads stdin, the file is unreadable or an entry is invalid.
    """
    if classify_input(value) is InputKind.STDIN:
        raise ValidationError("resolver(r) flag can not read from stdin")
    resolvers: List[str] = []
    try:
        entries = list(expand_input(value))
    except (OSError, UnicodeDecodeError) as exc:
        raise ValidationError(f"could not read resolver file {value}: {exc}") from exc
    for entry in entries:
        resolver = _parse_resolver(entry)
        if resolver not in resolvers:
            resolvers.append(resolver)
    return resolvers


__all__ = ["DEFAULT_DNS_PORT", "InputKind", "classify_input", "expand_input", "parse_resolvers"]
