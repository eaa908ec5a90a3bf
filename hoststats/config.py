"""Host Stats - Configuration file handling

Settings live in ``~/.config/stats/config.yaml``. The file stores the SMTP
password in plain text, so it is created readable by its owner only.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigError
from .logging import get_logger
from .patterns import DEFAULT_AUTH_LOG, DEFAULT_IP_LOOKUP_URL

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "stats" / "config.yaml"

DEFAULT_SETTINGS: Dict[str, Any] = {
    'username': 'username',
    'password': 'password',
    'mail_from': 'Server report <blah@example.com>',
    'mail_to': 'Name <email@example.com>',
    'mail_host': 'smtp.gmail.com:587',
    'mail_subject': 'Server report',
    'from_address': 'email@example.com',
    'to_address': 'email@example.com',
    'auth_log': DEFAULT_AUTH_LOG,
    'ip_lookup_url': DEFAULT_IP_LOOKUP_URL,
}


def save_config(settings: Dict[str, Any], path=DEFAULT_CONFIG_PATH) -> Path:
    path = Path(path)
    try:
        path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            yaml.safe_dump(settings, f, default_flow_style=False, sort_keys=False)
        os.chmod(path, 0o600)
    except OSError as e:
        raise ConfigError(f"Unable to write configuration file `{path}': {e}") from e
    return path


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load settings, writing a default file first if none exists.

    Keys missing from the file, or left empty, fall back to DEFAULT_SETTINGS;
    unknown keys are dropped.
    """
    path = Path(path) if path else DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.info("Creating default configuration file `%s'", path)
        save_config(DEFAULT_SETTINGS, path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Unable to read configuration file `{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid configuration file `{path}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file `{path}' must contain a mapping")

    settings = dict(DEFAULT_SETTINGS)
    settings.update({k: v for k, v in data.items() if k in DEFAULT_SETTINGS and v is not None})
    return settings
