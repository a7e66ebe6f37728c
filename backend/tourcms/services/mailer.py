"""Email sending for package enquiries."""
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape

from .. import config

logger = logging.getLogger(__name__)


class MailConfigError(Exception):
    pass


class MailDeliveryError(Exception):
    pass


def _row(label: str, value) -> str:
    shown = escape(str(value)) if value not in (None, "") else "Not specified"
    return f"<p><strong>{label}:</strong> {shown}</p>"


def enquiry_html(enquiry: dict) -> str:
    message = escape(enquiry.get("message") or "No message provided")
    return "\n".join([
        "<h2>New Package Enquiry</h2>",
        _row("Name", enquiry.get("name")),
        _row("Package Name", enquiry.get("package_name")),
        _row("Email", enquiry.get("email")),
        _row("Phone", enquiry.get("phone")),
        _row("Date", enquiry.get("date")),
        _row("Number of Persons", enquiry.get("persons")),
        _row("Package Type", enquiry.get("package_type")),
        f"<p><strong>Message:</strong><br/>{message}</p>",
    ])


def send_enquiry_email(enquiry: dict) -> None:
    """Send an enquiry to ADMIN_EMAIL."""
    if not (config.ADMIN_EMAIL and config.SMTP_HOST and config.SMTP_FROM_EMAIL):
        raise MailConfigError("ADMIN_EMAIL, SMTP_HOST and SMTP_FROM_EMAIL must be set")

    msg = MIMEMultipart()
    msg["From"] = config.SMTP_FROM_EMAIL
    msg["To"] = config.ADMIN_EMAIL
    msg["Reply-To"] = enquiry["email"]
    msg["Subject"] = f"New Enquiry for {enquiry.get('package_name') or 'Tour Package'}"
    msg.attach(MIMEText(enquiry_html(enquiry), "html"))

    try:
        with smtplib.SMTP(config.SMTP_HOST, config.SMTP_PORT, timeout=10) as server:
            if config.SMTP_USE_TLS:
                server.starttls()
            if config.SMTP_USER and config.SMTP_PASSWORD:
                server.login(config.SMTP_USER, config.SMTP_PASSWORD)
            server.send_message(msg)
    except smtplib.SMTPAuthenticationError as e:
        logger.error(f"SMTP authentication failed for {config.SMTP_USER}: {e}")
        raise MailDeliveryError("SMTP authentication failed")
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send enquiry email to {config.ADMIN_EMAIL}: {e}")
        raise MailDeliveryError(f"Failed to send email: {e}")
    logger.info(f"Enquiry from {enquiry['email']} sent to {config.ADMIN_EMAIL}")
