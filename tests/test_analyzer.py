"""Tests for failed login extraction, aggregation and ranking."""

import io

import pytest
from rich.console import Console

from hoststats.analyzer import (
    AuthLogAnalyzer,
    LineMatcher,
    RegexLineMatcher,
    aggregate_failures,
    extract_failures,
    rank_failures,
)
from hoststats.exceptions import PatternCompileError
from hoststats.models import FailureRecord


@pytest.fixture
def matcher():
    return RegexLineMatcher.named('password')


def test_extract_counts_only_matching_lines(matcher, auth_log_lines):
    addresses = list(extract_failures(auth_log_lines, matcher))
    assert addresses == ["10.0.0.5", "10.0.0.5", "10.0.0.5", "10.0.0.9"]


def test_extract_username_with_spaces_and_trailing_text(matcher):
    line = "sshd[1]: Failed password for invalid user j doe from 2001:db8::1 port 22 ssh2 extra"
    assert matcher.extract(line) == "2001:db8::1"


def test_extract_requires_port_token(matcher):
    assert matcher.extract("sshd[1]: Failed password for root from 10.0.0.7") is None
    assert matcher.extract("sshd[1]: Failed password for root from 10.0.0.7 portal") is None


def test_extract_is_lazy(matcher, auth_log_lines):
    events = extract_failures(iter(auth_log_lines), matcher)
    assert next(events) == "10.0.0.5"


def test_extract_empty_input(matcher):
    assert list(extract_failures([], matcher)) == []


def test_any_pattern_matches_other_methods():
    line = "sshd[1]: Failed publickey for git from 10.1.1.1 port 5000 ssh2"
    assert RegexLineMatcher.named('password').extract(line) is None
    assert RegexLineMatcher.named('any').extract(line) == "10.1.1.1"


def test_custom_line_matcher():
    class ColonMatcher(LineMatcher):
        def extract(self, line):
            return line.split(":", 1)[1] if line.startswith("FAIL:") else None

    analyzer = AuthLogAnalyzer(matcher=ColonMatcher())
    records = analyzer.analyze_lines(["FAIL:a", "ok", "FAIL:b", "FAIL:a"])
    assert records == [FailureRecord("a", 2), FailureRecord("b", 1)]


def test_bad_pattern_raises():
    with pytest.raises(PatternCompileError):
        RegexLineMatcher(r"Failed password (")


def test_pattern_without_address_group_raises():
    with pytest.raises(PatternCompileError):
        RegexLineMatcher(r"Failed password for (\S+)")


def test_unknown_pattern_name_raises():
    with pytest.raises(PatternCompileError):
        RegexLineMatcher.named('nope')


def test_aggregate_counts_every_address():
    events = ["a", "b", "a", "c", "a", "b"]
    counts = aggregate_failures(events)
    assert counts == {"a": 3, "b": 2, "c": 1}
    for address in set(events):
        assert counts[address] == events.count(address)


def test_aggregate_empty():
    assert aggregate_failures(iter([])) == {}


def test_aggregate_does_not_normalize_addresses():
    counts = aggregate_failures(["::ffff:1.2.3.4", "1.2.3.4"])
    assert counts == {"::ffff:1.2.3.4": 1, "1.2.3.4": 1}


def test_rank_is_permutation_in_descending_order():
    counts = {"a": 1, "b": 5, "c": 3, "d": 3, "e": 1, "f": 7}
    ranked = rank_failures(counts)

    assert {(r.source_address, r.attempt_count) for r in ranked} == set(counts.items())
    assert len(ranked) == len(counts)
    for earlier, later in zip(ranked, ranked[1:]):
        assert earlier.attempt_count >= later.attempt_count


def test_rank_ties_are_contiguous():
    ranked = rank_failures({"a": 2, "b": 1, "c": 2, "d": 1, "e": 2})
    counts = [r.attempt_count for r in ranked]
    assert counts == [2, 2, 2, 1, 1]
    assert {r.source_address for r in ranked[:3]} == {"a", "c", "e"}


def test_rank_empty():
    assert rank_failures({}) == []


def test_analyze_file(auth_log):
    records = AuthLogAnalyzer().analyze_file(auth_log)
    assert records == [FailureRecord("10.0.0.5", 3), FailureRecord("10.0.0.9", 1)]


def test_analyze_file_twice_gives_same_records(auth_log):
    analyzer = AuthLogAnalyzer()
    assert set(analyzer.analyze_file(auth_log)) == set(analyzer.analyze_file(auth_log))


def test_analyze_file_with_console(auth_log):
    console = Console(file=io.StringIO())
    records = AuthLogAnalyzer(console=console).analyze_file(auth_log)
    assert records[0] == FailureRecord("10.0.0.5", 3)


def test_analyze_empty_file(tmp_path):
    path = tmp_path / "auth.log"
    path.write_text("")
    assert AuthLogAnalyzer().analyze_file(path) == []


def test_analyze_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        AuthLogAnalyzer().analyze_file(tmp_path / "missing.log")
