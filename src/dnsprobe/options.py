"""Immutable scan options built from parsed command-line arguments."""

from __future__ import annotations

import argparse
import logging
import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

import dns.rdatatype

from .inputs import parse_resolvers
from .rcodes import RCodeSet, resolve_rcodes
from .resume import DEFAULT_RESUME_FILE, ResumeCheckpoint, ResumeStateManager
from .validation import validate_input_modes

LOGGER = logging.getLogger(__name__)

DEFAULT_THREADS = 100
DEFAULT_RATE_LIMIT = -1
DEFAULT_RETRIES = 2
DEFAULT_TRACE_MAX_RECURSION = 32767
DEFAULT_FLUSH_INTERVAL = 10
DEFAULT_WILDCARD_THRESHOLD = 5

# Above CRITICAL so nothing is emitted.
SILENT = logging.CRITICAL + 10

QUERY_FLAGS = (
    ("a", dns.rdatatype.A),
    ("aaaa", dns.rdatatype.AAAA),
    ("cname", dns.rdatatype.CNAME),
    ("ns", dns.rdatatype.NS),
    ("txt", dns.rdatatype.TXT),
    ("ptr", dns.rdatatype.PTR),
    ("mx", dns.rdatatype.MX),
    ("soa", dns.rdatatype.SOA),
)


def log_level_for(silent: bool, verbose: bool) -> int:
    """Return the logging level selected by the diagnostics flags.

    Silent takes precedence over verbose.

    Args:
        silent (bool): Whether only results should be shown.
        verbose (bool): Whether verbose output was requested.

    Returns:
        int: Logging level to apply.
    """
    if silent:
        return SILENT
    if verbose:
        return logging.DEBUG
    return logging.INFO


@dataclass(frozen=True)
class Options:
    """Validated scan options.

    Attributes:
        hosts (str): Host list input (file, comma list or stdin marker).
        domains (str): Bruteforce domain input.
        wordlist (str): Bruteforce wordlist input.
        a (bool): Query A records.
        aaaa (bool): Query AAAA records.
        cname (bool): Query CNAME records.
        ns (bool): Query NS records.
        txt (bool): Query TXT records.
        ptr (bool): Query PTR records.
        mx (bool): Query MX records.
        soa (bool): Query SOA records.
        response (bool): Display the DNS response.
        response_only (bool): Display only the DNS response.
        rcode (str): Raw rcode filter flag value.
        threads (int): Number of concurrent workers.
        rate_limit (int): Requests per second, -1 for unlimited.
        output_file (str): Output file path.
        json (bool): Write JSON lines output.
        silent (bool): Display only results.
        verbose (bool): Display verbose output.
        raw (bool): Display raw DNS responses.
        show_statistics (bool): Display scan statistics.
        version (bool): Version query requested.
        retries (int): Number of DNS retries.
        hosts_file (bool): Consult the system hosts file.
        trace (bool): Perform DNS tracing.
        trace_max_recursion (int): Maximum trace recursion depth.
        flush_interval (int): Output flush interval.
        resume (bool): Resume an existing scan.
        resolvers (str): Resolver list (file or comma list).
        resolver_list (Tuple[str, ...]): Validated resolvers as ``address:port``.
        wildcard_threshold (int): Wildcard filter threshold.
        wildcard_domain (str): Reference domain for wildcard filtering.
        rcodes (RCodeSet): Resolved rcode filter.
        resume_checkpoint (ResumeCheckpoint): Loaded or empty checkpoint.
        resume_path (Path): Checkpoint file location.
        log_level (int): Logging level the entry point applies.
    """

    hosts: str = ""
    domains: str = ""
    wordlist: str = ""
    a: bool = False
    aaaa: bool = False
    cname: bool = False
    ns: bool = False
    txt: bool = False
    ptr: bool = False
    mx: bool = False
    soa: bool = False
    response: bool = False
    response_only: bool = False
    rcode: str = ""
    threads: int = DEFAULT_THREADS
    rate_limit: int = DEFAULT_RATE_LIMIT
    output_file: str = ""
    json: bool = False
    silent: bool = False
    verbose: bool = False
    raw: bool = False
    show_statistics: bool = False
    version: bool = False
    retries: int = DEFAULT_RETRIES
    hosts_file: bool = False
    trace: bool = False
    trace_max_recursion: int = DEFAULT_TRACE_MAX_RECURSION
    flush_interval: int = DEFAULT_FLUSH_INTERVAL
    resume: bool = False
    resolvers: str = ""
    resolver_list: Tuple[str, ...] = ()
    wildcard_threshold: int = DEFAULT_WILDCARD_THRESHOLD
    wildcard_domain: str = ""
    rcodes: RCodeSet = field(default_factory=lambda: RCodeSet(frozenset({0})))
    resume_checkpoint: ResumeCheckpoint = field(default_factory=ResumeCheckpoint)
    resume_path: Path = Path(DEFAULT_RESUME_FILE)
    log_level: int = logging.INFO

    def query_types(self) -> List[dns.rdatatype.RdataType]:
        """Return the record types to query.

        Returns:
            List[dns.rdatatype.RdataType]: Selected types in flag order; A when none selected.
        """
        selected = [rdtype for name, rdtype in QUERY_FLAGS if getattr(self, name)]
        return selected or [dns.rdatatype.A]

    def resume_manager(self) -> ResumeStateManager:
        """Return a resume manager bound to these options.

        Returns:
            ResumeStateManager: Manager for the checkpoint file.
        """
        return ResumeStateManager(self.resume, self.resume_path)

    def should_load_resume(self) -> bool:
        """Return whether the checkpoint file should be loaded.

        Returns:
            bool: True if resume was requested and the file exists.
        """
        return self.resume_manager().should_load()

    def should_save_resume(self) -> bool:
        """Return whether scan progress should be saved.

        Returns:
            bool: Always True.
        """
        return self.resume_manager().should_save()


def build_options(
    args: argparse.Namespace,
    resume_path: Path | str = DEFAULT_RESUME_FILE,
) -> Options:
    """Build validated options from parsed arguments.

    Args:
        args (argparse.Namespace): Parsed CLI arguments.
        resume_path (Path | str): Checkpoint file location.

    Returns:
        Options: Frozen options. Input rules are not checked on a version query.

    Raises:
        RCodeParseError: If the rcode flag contains an invalid token.
        ResumeLoadError: If an existing checkpoint file is malformed.
        ValidationError: If input flags violate an exclusivity or dependency rule,
            or the resolver list is invalid.
    """
    log_level = log_level_for(args.silent, args.verbose)
    rcodes = resolve_rcodes(args.rcode)
    checkpoint = ResumeStateManager(args.resume, resume_path).load_or_default()

    options = Options(
        hosts=args.hosts,
        domains=args.domains,
        wordlist=args.wordlist,
        a=args.a,
        aaaa=args.aaaa,
        cname=args.cname,
        ns=args.ns,
        txt=args.txt,
        ptr=args.ptr,
        mx=args.mx,
        soa=args.soa,
        response=args.response,
        response_only=args.response_only,
        rcode=args.rcode,
        threads=args.threads,
        rate_limit=args.rate_limit,
        output_file=args.output_file,
        json=args.json,
        silent=args.silent,
        verbose=args.verbose,
        raw=args.raw,
        show_statistics=args.show_statistics,
        version=args.version,
        retries=args.retries,
        hosts_file=args.hosts_file,
        trace=args.trace,
        trace_max_recursion=args.trace_max_recursion,
        flush_interval=args.flush_interval,
        resume=args.resume,
        resolvers=args.resolvers,
        wildcard_threshold=args.wildcard_threshold,
        wildcard_domain=args.wildcard_domain,
        rcodes=rcodes,
        resume_checkpoint=checkpoint,
        resume_path=Path(resume_path),
        log_level=log_level,
    )
    if options.version:
        return options

    validate_input_modes(
        options.hosts,
        options.domains,
        options.wordlist,
        response=options.response,
        response_only=options.response_only,
    )
    resolver_list = tuple(parse_resolvers(options.resolvers))
    options = dataclasses.replace(options, resolver_list=resolver_list)
    LOGGER.debug(
        "Query types: %s",
        ",".join(dns.rdatatype.to_text(rdtype) for rdtype in options.query_types()),
    )
    return options


__all__ = ["Options", "QUERY_FLAGS", "SILENT", "build_options", "log_level_for"]
