# 📄 File: plantcare_social/shared/infrastructure/external_apis/mail_client.py
# 🧭 Purpose (Layman Explanation):
# Sends the short verification-code emails.
#
# 🧪 Purpose (Technical Summary):
# SendGrid v3 mail/send client for plain-text messages.
#
# 🔗 Dependencies:
# - APIClient (aiohttp)
#
# 🔄 Connected Modules / Calls From:
# - notification_communication mailer routes

"""
SendGrid v3 mail client used for one-time verification codes.
"""

import logging
from typing import Optional

from ...core.exceptions import UpstreamServiceError
from .api_client import APIClient

logger = logging.getLogger(__name__)


class SendGridClient(APIClient):

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        from_email: str,
        from_name: str,
        timeout: int = 15,
    ):
        super().__init__(base_url=base_url, api_key=api_key, api_name="sendgrid", timeout=timeout)
        self.from_email = from_email
        self.from_name = from_name

    async def send_email(self, to_email: str, subject: str, text: str) -> None:
        """
        Send a plain-text email.

        Raises:
            UpstreamServiceError: If the key is missing or SendGrid rejects the mail
        """
        if not self.api_key:
            logger.error("SENDGRID_API_KEY is not configured")
            raise UpstreamServiceError(
                message="Failed to send email. Please try again later.",
                service=self.api_name,
            )

        await self.post(
            "mail/send",
            data={
                "personalizations": [{"to": [{"email": to_email}]}],
                "from": {"email": self.from_email, "name": self.from_name},
                "subject": subject,
                "content": [{"type": "text/plain", "value": text}],
            },
        )
        logger.info(f"Email '{subject}' sent to {to_email}")
