"""Host Stats - Mail delivery"""

import smtplib
from dataclasses import dataclass
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any, Dict

from .exceptions import DeliveryError
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_SMTP_PORT = 587


@dataclass
class MailSettings:
    username: str
    password: str
    mail_from: str
    mail_to: str
    mail_host: str
    mail_subject: str
    from_address: str
    to_address: str

    @classmethod
    def from_config(cls, settings: Dict[str, Any]) -> 'MailSettings':
        return cls(**{name: str(settings[name]) for name in cls.__dataclass_fields__})

    @property
    def auth_host(self) -> str:
        """Host part of ``mail_host`` (``smtp.example.org:587`` -> ``smtp.example.org``)."""
        host, sep, _ = self.mail_host.rpartition(':')
        return host if sep else self.mail_host

    @property
    def port(self) -> int:
        _, sep, port = self.mail_host.rpartition(':')
        if sep and port.isdigit():
            return int(port)
        return DEFAULT_SMTP_PORT

    def __repr__(self) -> str:
        return (f"MailSettings(username={self.username!r}, password=<HIDDEN>, "
                f"mail_host={self.mail_host!r}, from={self.from_address!r}, to={self.to_address!r})")


def build_message(settings: MailSettings, html: str) -> MIMEMultipart:
    msg = MIMEMultipart('alternative')
    msg['From'] = settings.mail_from
    msg['To'] = settings.mail_to
    msg['Subject'] = settings.mail_subject
    msg.attach(MIMEText(html, 'html', 'utf-8'))
    return msg


def send_report(settings: MailSettings, html: str, timeout: float = 30) -> None:
    msg = build_message(settings, html)
    logger.debug("Sending report via %r", settings)
    try:
        with smtplib.SMTP(settings.auth_host, settings.port, timeout=timeout) as server:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls()
                server.ehlo()
            server.login(settings.username, settings.password)
            server.sendmail(settings.from_address, [settings.to_address], msg.as_string())
    except (smtplib.SMTPException, OSError) as e:
        raise DeliveryError(f"Error while sending mail: {e}") from e
    logger.info("Report sent to %s", settings.to_address)
