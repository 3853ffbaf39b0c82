"""DNS response code filters built from user supplied tokens."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List

from .errors import RCodeParseError

LOGGER = logging.getLogger(__name__)

NOERROR = 0

# Values must stay aligned with existing scan outputs; badsig and badvers share 16.
RCODE_NAMES: Dict[str, int] = {
    "noerror": 0,
    "formerr": 1,
    "servfail": 2,
    "nxdomain": 3,
    "notimp": 4,
    "refused": 5,
    "yxdomain": 6,
    "yxrrset": 7,
    "nxrrset": 8,
    "notauth": 9,
    "notzone": 10,
    "badsig": 16,
    "badvers": 16,
    "badkey": 17,
    "badtime": 18,
    "badmode": 19,
    "badname": 20,
    "badalg": 21,
    "badtrunc": 22,
    "badcookie": 23,
}

_DECIMAL = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class RCodeSet:
    """Canonical set of response codes used to filter results.

    Attributes:
        codes (FrozenSet[int]): Non-empty set of numeric response codes.
        has_explicit_rcodes (bool): True when the user passed a non-empty rcode flag.
    """

    codes: FrozenSet[int]
    has_explicit_rcodes: bool = False

    def __contains__(self, code: object) -> bool:
        """Return whether a response code is part of the filter.

        Args:
            code (object): Response code to test.

        Returns:
            bool: True if the code is selected.
        """
        return code in self.codes

    def __iter__(self) -> Iterator[int]:
        """Iterate response codes in ascending order.

        Yields:
            int: Response code.
        """
        return iter(sorted(self.codes))

    def __len__(self) -> int:
        """Return the number of distinct response codes.

        Returns:
            int: Size of the set.
        """
        return len(self.codes)

    def names(self) -> List[str]:
        """Return display names for the selected codes.

        Returns:
            List[str]: Symbolic name per code, or the decimal value when unnamed.
        """
        return [rcode_name(code) for code in self]


def rcode_name(code: int) -> str:
    """Return the canonical symbolic name for a response code.

    Args:
        code (int): Numeric response code.

    Returns:
        str: First matching table name, or the decimal string when unnamed.
    """
    for name, value in RCODE_NAMES.items():
        if value == code:
            return name
    return str(code)


def _parse_token(token: str) -> int:
    """Resolve one rcode token to its numeric value.

    Args:
        token (str): Trimmed, lower-cased, non-empty token.

    Returns:
        int: Numeric response code.

    Raises:
        RCodeParseError: If the token is neither a known name nor a decimal integer.
    """
    if token in RCODE_NAMES:
        return RCODE_NAMES[token]
    if not _DECIMAL.fullmatch(token):
        raise RCodeParseError(token)
    try:
        return int(token, 10)
    except ValueError as exc:
        # Digit strings beyond the interpreter conversion limit.
        raise RCodeParseError(token) from exc


def resolve_rcodes(raw: str) -> RCodeSet:
    """Build the response code filter from a comma separated flag value.

    Args:
        raw (str): Raw flag value, e.g. ``"noerror,servfail,5"``.

    Returns:
        RCodeSet: Resolved codes; ``{0}`` when nothing was selected.

    Raises:
        RCodeParseError: If any token is invalid. No partial set is returned.
    """
    codes = set()
    for item in raw.split(","):
        token = item.strip().lower()
        if not token:
            continue
        codes.add(_parse_token(token))

    if not codes:
        codes.add(NOERROR)

    rcodes = RCodeSet(codes=frozenset(codes), has_explicit_rcodes=raw != "")
    LOGGER.debug(
        "Resolved rcodes %s (explicit=%s)",
        ",".join(rcodes.names()),
        rcodes.has_explicit_rcodes,
    )
    return rcodes


__all__ = ["NOERROR", "RCODE_NAMES", "RCodeSet", "rcode_name", "resolve_rcodes"]
