"""Host Stats - Data models"""

from dataclasses import asdict, dataclass
from datetime import timedelta
from typing import Dict, Tuple


def format_duration(duration: timedelta) -> str:
    """Render a duration as "D days, H hours, M minutes and S seconds"."""
    total = int(duration.total_seconds())
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{days} days, {hours} hours, {minutes} minutes and {seconds} seconds"


@dataclass(frozen=True)
class FailureRecord:
    """Failed logins attributed to one source address"""
    source_address: str
    attempt_count: int

    def __str__(self) -> str:
        return f"{self.source_address} ({self.attempt_count})"


@dataclass(frozen=True)
class DiskEntry:
    """One mounted filesystem, as printed by df"""
    filesystem: str
    size: str
    used: str
    available: str
    use_percentage: str
    mount_point: str

    def __str__(self) -> str:
        return ", ".join((self.filesystem, self.size, self.used,
                          self.available, self.use_percentage, self.mount_point))


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal problem met while collecting a report field"""
    source: str
    message: str


@dataclass(frozen=True)
class ReportSnapshot:
    """Everything collected during one run.

    Fields whose collector failed softly hold their empty value (zero uptime,
    empty IP, no interfaces, no failures); the reason is listed in
    ``diagnostics``.
    """
    uptime: timedelta
    external_ip: str
    interfaces: Tuple[str, ...]
    failures: Tuple[FailureRecord, ...]
    disks: Tuple[DiskEntry, ...]
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def uptime_text(self) -> str:
        return format_duration(self.uptime)

    def to_dict(self) -> Dict:
        return {
            'uptime': self.uptime_text,
            'uptime_seconds': int(self.uptime.total_seconds()),
            'external_ip': self.external_ip,
            'interfaces': list(self.interfaces),
            'failures': [asdict(f) for f in self.failures],
            'disks': [asdict(d) for d in self.disks],
            'diagnostics': [asdict(d) for d in self.diagnostics],
        }
