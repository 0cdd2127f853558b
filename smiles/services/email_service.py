"""E-mail delivery for poems written by the poet assistant."""

import logging
import smtplib
from collections import deque
from email.message import EmailMessage

from smiles.config import get_config
from smiles.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)

# Most recent messages kept for inspection
SENT_HISTORY_SIZE = 100


class EmailService:
    """Sends plain-text e-mails over SMTP.

    When SMTP is not configured the send is simulated: the message is
    logged and recorded but never leaves the process.
    """

    def __init__(self) -> None:
        """Initialize the e-mail service."""
        self.config = get_config()
        self.sent_messages: deque[EmailMessage] = deque(maxlen=SENT_HISTORY_SIZE)
        if not self.config.has_smtp_config():
            logger.warning("SMTP not configured - e-mails will be simulated")
        else:
            logger.info("E-mail service initialized")

    def is_configured(self) -> bool:
        """Check if SMTP is properly configured.

        Returns:
            True if an SMTP host and sender are set, False otherwise
        """
        return self.config.has_smtp_config()

    def build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.config.smtp_sender or "noreply@milesofsmiles.example"
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)
        return message

    def send_email(self, to: str, subject: str, body: str) -> EmailMessage:
        """Send an e-mail.

        Args:
            to: Recipient address
            subject: Subject line
            body: Plain-text body

        Returns:
            The message that was sent (or simulated)

        Raises:
            EmailDeliveryError: If the SMTP exchange fails
        """
        message = self.build_message(to, subject, body)

        if not self.is_configured():
            logger.info(f"[simulated] e-mail to {to}: {subject}")
            self.sent_messages.append(message)
            return message

        try:
            with smtplib.SMTP(self.config.smtp_host, self.config.smtp_port) as smtp:
                if self.config.smtp_use_tls:
                    smtp.starttls()
                if self.config.smtp_username and self.config.smtp_password:
                    smtp.login(self.config.smtp_username, self.config.smtp_password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.exception("Failed to send e-mail")
            raise EmailDeliveryError(f"Failed to send e-mail to {to}: {e}") from e

        logger.info(f"E-mail sent to {to}: {subject}")
        self.sent_messages.append(message)
        return message


# Global singleton instance
_email_service: EmailService | None = None


def get_email_service() -> EmailService:
    """Get the global EmailService instance."""
    global _email_service
    if _email_service is None:
        _email_service = EmailService()
    return _email_service
