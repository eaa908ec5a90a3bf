"""Host Stats - Host fact collectors"""

import socket
import subprocess
from datetime import timedelta
from pathlib import Path
from typing import List, Sequence

import psutil
import requests

from .exceptions import CollectorUnavailable, CriticalCollectorFailure
from .logging import get_logger
from .models import DiskEntry
from .patterns import DEFAULT_IP_LOOKUP_URL, DEFAULT_UPTIME_FILE, DISK_USAGE_COMMAND

logger = get_logger(__name__)

IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def read_uptime(path=DEFAULT_UPTIME_FILE) -> timedelta:
    """Uptime from the first field of /proc/uptime."""
    try:
        fields = Path(path).read_text().split()
        return timedelta(seconds=float(fields[0]))
    except (OSError, ValueError, IndexError) as e:
        raise CollectorUnavailable('uptime', f"Unable to read {path}: {e}") from e


def fetch_external_ip(url: str = DEFAULT_IP_LOOKUP_URL, timeout: float = 10) -> str:
    """WAN address of this box as reported by a jsonip-style service."""
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return str(response.json()['ip'])
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        raise CollectorUnavailable('external_ip', f"Lookup via {url} failed: {e}") from e


def list_interfaces() -> List[str]:
    """One line per network interface: its name and its IP addresses."""
    try:
        interfaces = psutil.net_if_addrs()
    except OSError as e:
        raise CollectorUnavailable('interfaces', e) from e

    return [
        f"{name}: {', '.join(addr.address for addr in addrs if addr.family in IP_FAMILIES)}"
        for name, addrs in interfaces.items()
    ]


def parse_disk_listing(text: str) -> List[DiskEntry]:
    """Turn `df` output into disk entries.

    The header line is skipped, as is every line that does not split into
    exactly six columns and every `none` pseudo-filesystem.
    """
    entries = []
    for line in text.splitlines()[1:]:
        fields = line.split()
        if len(fields) != 6 or fields[0] == 'none':
            continue
        entries.append(DiskEntry(*fields))
    return entries


def query_disk_usage(command: Sequence[str] = DISK_USAGE_COMMAND) -> List[DiskEntry]:
    try:
        result = subprocess.run(
            list(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise CriticalCollectorFailure('disk_usage', f"command not available: {' '.join(command)}") from e
    except subprocess.CalledProcessError as e:
        raise CriticalCollectorFailure(
            'disk_usage', f"{' '.join(command)} exited with {e.returncode}: {(e.stderr or '').strip()}"
        ) from e
    except OSError as e:
        raise CriticalCollectorFailure('disk_usage', e) from e

    entries = parse_disk_listing(result.stdout)
    logger.debug("Collected %d filesystems", len(entries))
    return entries
