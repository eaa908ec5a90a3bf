"""Host Stats package"""

from .patterns import VERSION, FAILURE_PATTERNS, DEFAULT_PATTERN
from .models import FailureRecord, DiskEntry, Diagnostic, ReportSnapshot
from .analyzer import AuthLogAnalyzer, LineMatcher, RegexLineMatcher
from .report import ReportAssembler
from .output import print_report

__all__ = ['VERSION', 'FAILURE_PATTERNS', 'DEFAULT_PATTERN', 'FailureRecord', 'DiskEntry',
           'Diagnostic', 'ReportSnapshot', 'AuthLogAnalyzer', 'LineMatcher',
           'RegexLineMatcher', 'ReportAssembler', 'print_report']
