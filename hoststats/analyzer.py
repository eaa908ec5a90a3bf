"""Host Stats - Auth log analysis engine"""

import re
from abc import ABC, abstractmethod
from functools import reduce
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from .exceptions import PatternCompileError
from .logging import get_logger
from .models import FailureRecord
from .patterns import DEFAULT_PATTERN, FAILURE_PATTERNS

logger = get_logger(__name__)


class LineMatcher(ABC):
    """Strategy deciding whether a log line records a failed login"""

    @abstractmethod
    def extract(self, line: str) -> Optional[str]:
        """Return the source address of a failed login, or None."""


class RegexLineMatcher(LineMatcher):
    """Matches lines with a regular expression exposing an ``address`` group"""

    def __init__(self, pattern: str):
        try:
            self.regex = re.compile(pattern)
        except re.error as e:
            raise PatternCompileError(f"Failed to compile regular expression {pattern!r}: {e}") from e
        if 'address' not in self.regex.groupindex:
            raise PatternCompileError(f"Pattern {pattern!r} has no 'address' group")

    @classmethod
    def named(cls, name: str = DEFAULT_PATTERN) -> 'RegexLineMatcher':
        try:
            return cls(FAILURE_PATTERNS[name])
        except KeyError:
            raise PatternCompileError(f"Unknown failure pattern: {name}") from None

    def extract(self, line: str) -> Optional[str]:
        match = self.regex.search(line)
        return match.group('address') if match else None


def read_auth_log(path) -> List[str]:
    """Read the whole log; OSError propagates to the caller."""
    with open(path, 'r', encoding='utf-8', errors='ignore') as f:
        return f.read().splitlines()


def extract_failures(lines: Iterable[str], matcher: LineMatcher) -> Iterator[str]:
    """Yield the source address of every failed-login line."""
    for line in lines:
        address = matcher.extract(line)
        if address is not None:
            yield address


def _tally(counts: Dict[str, int], address: str) -> Dict[str, int]:
    counts[address] = counts.get(address, 0) + 1
    return counts


def aggregate_failures(addresses: Iterable[str]) -> Dict[str, int]:
    """Count failures per source address.

    Addresses are compared as exact strings, so ``::ffff:1.2.3.4`` and
    ``1.2.3.4`` stay separate keys.
    """
    return reduce(_tally, addresses, {})


def rank_failures(counts: Mapping[str, int]) -> List[FailureRecord]:
    """Order records by attempt count, highest first.

    The relative order of addresses with the same count is unspecified.
    """
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [FailureRecord(address, count) for address, count in ranked]


class AuthLogAnalyzer:
    """Extracts, aggregates and ranks failed logins from an auth log"""

    def __init__(self, matcher: Optional[LineMatcher] = None, console=None):
        self.matcher = matcher or RegexLineMatcher.named(DEFAULT_PATTERN)
        self.console = console

    def analyze_lines(self, lines: Iterable[str]) -> List[FailureRecord]:
        counts = aggregate_failures(extract_failures(lines, self.matcher))
        logger.debug("Found %d distinct source addresses", len(counts))
        return rank_failures(counts)

    def analyze_file(self, filepath) -> List[FailureRecord]:
        path = Path(filepath)
        lines = read_auth_log(path)
        logger.debug("Read %d lines from %s", len(lines), path)

        if self.console is None:
            return self.analyze_lines(lines)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
        ) as progress:
            task = progress.add_task(f"Analyzing {path.name}...", total=len(lines))
            records = self.analyze_lines(self._advancing(lines, progress, task))
        return records

    @staticmethod
    def _advancing(lines, progress, task):
        for line in lines:
            yield line
            progress.update(task, advance=1)
