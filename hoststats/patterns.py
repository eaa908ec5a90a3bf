"""Host Stats - Constants and patterns"""

VERSION = "1.0.0"

DEFAULT_AUTH_LOG = "/var/log/auth.log"
DEFAULT_IP_LOOKUP_URL = "http://jsonip.com"
DEFAULT_UPTIME_FILE = "/proc/uptime"
DISK_USAGE_COMMAND = ("df", "--si")

# Failed authentication patterns. Each must expose an `address` group.
FAILURE_PATTERNS = {
    # "sshd[123]: Failed password for invalid user admin from 10.0.0.5 port 22 ssh2"
    'password': r'Failed password for (?P<user>.*?) from (?P<address>\S+) port\b',
    # Same shape for any auth method (publickey, keyboard-interactive/pam, ...)
    'any': r'Failed (?P<method>\S+) for (?P<user>.*?) from (?P<address>\S+) port\b',
}

DEFAULT_PATTERN = 'password'
