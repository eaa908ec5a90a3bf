"""Host Stats - Report assembly"""

from datetime import timedelta
from typing import Callable, List, Optional

from .analyzer import AuthLogAnalyzer
from .collectors import fetch_external_ip, list_interfaces, query_disk_usage, read_uptime
from .exceptions import CollectorUnavailable, SourceUnavailable
from .logging import get_logger
from .models import Diagnostic, DiskEntry, FailureRecord, ReportSnapshot
from .patterns import DEFAULT_AUTH_LOG

logger = get_logger(__name__)


class ReportAssembler:
    """Runs every collector once and bundles the results.

    Collectors run one after another. A failing uptime, IP, interface or
    auth-log collector leaves its field empty and adds a diagnostic; a
    failing disk-usage collector aborts the run with
    CriticalCollectorFailure.
    """

    def __init__(
        self,
        auth_log=DEFAULT_AUTH_LOG,
        analyzer: Optional[AuthLogAnalyzer] = None,
        uptime: Optional[Callable[[], timedelta]] = None,
        external_ip: Optional[Callable[[], str]] = None,
        interfaces: Optional[Callable[[], List[str]]] = None,
        disk_usage: Optional[Callable[[], List[DiskEntry]]] = None,
    ):
        self.auth_log = auth_log
        self.analyzer = analyzer or AuthLogAnalyzer()
        self.uptime = uptime or read_uptime
        self.external_ip = external_ip or fetch_external_ip
        self.interfaces = interfaces or list_interfaces
        self.disk_usage = disk_usage or query_disk_usage

    def assemble(self) -> ReportSnapshot:
        diagnostics: List[Diagnostic] = []

        def soft(collect, empty):
            try:
                return collect()
            except (CollectorUnavailable, SourceUnavailable) as e:
                logger.warning("%s", e)
                diagnostics.append(Diagnostic(e.collector, str(e)))
                return empty

        uptime = soft(self.uptime, timedelta(0))
        external_ip = soft(self.external_ip, '')
        interfaces = soft(self.interfaces, [])
        failures = soft(self._failures, [])
        disks = self.disk_usage()

        return ReportSnapshot(
            uptime=uptime,
            external_ip=external_ip,
            interfaces=tuple(interfaces),
            failures=tuple(failures),
            disks=tuple(disks),
            diagnostics=tuple(diagnostics),
        )

    def _failures(self) -> List[FailureRecord]:
        try:
            return self.analyzer.analyze_file(self.auth_log)
        except OSError as e:
            raise SourceUnavailable(self.auth_log, e.strerror or e) from e
