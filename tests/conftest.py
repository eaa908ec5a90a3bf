"""Shared fixtures for the hoststats tests."""

import logging

import pytest

AUTH_LOG = """\
Feb 16 00:01:10 host sshd[111]: Failed password for root from 10.0.0.5 port 55222 ssh2
Feb 16 00:01:12 host sshd[111]: Accepted password for alice from 192.168.1.2 port 40000 ssh2
Feb 16 00:02:11 host sshd[111]: Failed password for invalid user admin from 10.0.0.5 port 55223 ssh2
Feb 16 00:02:30 host CRON[400]: pam_unix(cron:session): session opened for user root
Feb 16 00:03:50 host sshd[112]: Failed password for invalid user j doe from 10.0.0.5 port 4 ssh2
Feb 16 00:20:10 host sshd[222]: Failed password for root from 10.0.0.9 port 41414 ssh2
Feb 16 00:21:00 host sshd[223]: Failed password for root from 10.0.0.7
"""

DF_OUTPUT = """\
Filesystem      Size  Used Avail Use% Mounted on
/dev/sda1        50G   20G   30G  40% /
none              0     0     0    - /dev/shm
tmpfs           1.1G     0  1.1G   0% /run/user/1000
/dev/mapper/vg-home with spaces 100G 10G 90G 10% /home
"""


@pytest.fixture
def auth_log(tmp_path):
    path = tmp_path / "auth.log"
    path.write_text(AUTH_LOG)
    return path


@pytest.fixture
def auth_log_lines():
    return AUTH_LOG.splitlines()


@pytest.fixture
def df_output():
    return DF_OUTPUT


@pytest.fixture(autouse=True)
def reset_log_level():
    yield
    logging.getLogger("hoststats").setLevel(logging.INFO)
