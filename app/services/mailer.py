import logging
import smtplib
from email.mime.text import MIMEText

from ..config import settings

logger = logging.getLogger(__name__)


def send_mail(subject: str, body: str, reply_to: str | None = None) -> bool:
    if not settings.MAIL_HOST:
        logger.info("MAIL_HOST not set, skipping mail %r", subject)
        return False
    recipient = settings.CONTACT_EMAIL or settings.MAIL_FROM
    msg = MIMEText(body, 'plain', 'utf-8')
    msg['Subject'] = subject
    msg['From'] = settings.MAIL_FROM
    msg['To'] = recipient
    if reply_to:
        msg['Reply-To'] = reply_to
    with smtplib.SMTP(settings.MAIL_HOST, settings.MAIL_PORT) as s:
        s.starttls()
        if settings.MAIL_USER:
            s.login(settings.MAIL_USER, settings.MAIL_PASS)
        s.sendmail(settings.MAIL_FROM, [recipient], msg.as_string())
    return True


def contact_message(name: str, email: str, phone: str, message: str) -> str:
    lines = [f"From: {name} <{email}>"]
    if phone:
        lines.append(f"Phone: {phone}")
    return "\n".join(lines) + "\n\n" + message
