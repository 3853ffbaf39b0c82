"""Input mode rules for host list and bruteforce inputs."""

from __future__ import annotations

from typing import Optional

from .errors import ValidationError

STDIN_MARKER = "-"

ERR_DISPLAY_FLAGS = "resp and resp-only can't be used at the same time"
ERR_LIST_WITH_BRUTEFORCE = "list(l) flag can not be used with domain(d) or wordlist(w) flag"
ERR_WORDLIST_WITHOUT_DOMAIN = "missing domain(d) flag required with wordlist(w) input"
ERR_DOMAIN_WITHOUT_WORDLIST = "missing wordlist(w) flag required with domain(d) input"
ERR_MULTIPLE_STDIN = "stdin can be set for one flag only"


def argument_has_stdin(value: str) -> bool:
    """Return whether an input value reads from standard input.

    Args:
        value (str): Raw input flag value.

    Returns:
        bool: True if the value is the stdin marker.
    """
    return value == STDIN_MARKER


def check_input_modes(
    hosts: str,
    domains: str,
    wordlist: str,
    response: bool = False,
    response_only: bool = False,
) -> Optional[ValidationError]:
    """Check input flags and return the first violated rule.

    Args:
        hosts (str): Host list input.
        domains (str): Bruteforce domain input.
        wordlist (str): Bruteforce wordlist input.
        response (bool): Whether the DNS response is displayed.
        response_only (bool): Whether only the DNS response is displayed.

    Returns:
        Optional[ValidationError]: First violation, or None when the inputs are valid.
    """
    if response and response_only:
        return ValidationError(ERR_DISPLAY_FLAGS)

    hosts_present = hosts != ""
    domains_present = domains != ""
    wordlist_present = wordlist != ""

    if hosts_present and (wordlist_present or domains_present):
        return ValidationError(ERR_LIST_WITH_BRUTEFORCE)
    if wordlist_present and not domains_present:
        return ValidationError(ERR_WORDLIST_WITHOUT_DOMAIN)
    if domains_present and not wordlist_present:
        return ValidationError(ERR_DOMAIN_WITHOUT_WORDLIST)
    if argument_has_stdin(domains) and argument_has_stdin(wordlist):
        return ValidationError(ERR_MULTIPLE_STDIN)
    return None


def validate_input_modes(
    hosts: str,
    domains: str,
    wordlist: str,
    response: bool = False,
    response_only: bool = False,
) -> None:
    """Validate input flags.

    Args:
        hosts (str): Host list input.
        domains (str): Bruteforce domain input.
        wordlist (str): Bruteforce wordlist input.
        response (bool): Whether the DNS response is displayed.
        response_only (bool): Whether only the DNS response is displayed.

    Raises:
        ValidationError: If any rule is violated.
    """
    error = check_input_modes(hosts, domains, wordlist, response, response_only)
    if error is not None:
        raise error


__all__ = [
    "STDIN_MARKER",
    "argument_has_stdin",
    "check_input_modes",
    "validate_input_modes",
]
