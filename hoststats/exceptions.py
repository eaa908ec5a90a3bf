"""Host Stats - Errors"""


class HostStatsError(Exception):
    """Base class for every error raised by hoststats"""


class SourceUnavailable(HostStatsError):
    """The auth log could not be read"""

    collector = 'auth_log'

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = str(reason)
        super().__init__(f"Unable to read `{self.path}': {self.reason}")


class PatternCompileError(HostStatsError):
    """A failure pattern is not a usable regular expression"""


class CollectorUnavailable(HostStatsError):
    """A host fact could not be collected; the report goes on without it"""

    def __init__(self, collector: str, reason):
        self.collector = collector
        self.reason = str(reason)
        super().__init__(f"{collector}: {self.reason}")


class CriticalCollectorFailure(HostStatsError):
    """A host fact the report cannot do without could not be collected"""

    def __init__(self, collector: str, reason):
        self.collector = collector
        self.reason = str(reason)
        super().__init__(f"{collector}: {self.reason}")


class ConfigError(HostStatsError):
    """Configuration file could not be created, read or parsed"""


class DeliveryError(HostStatsError):
    """The report mail could not be sent"""
