# 📄 File: plantcare_social/modules/notification_communication/presentation/api/v1/mailer.py
# 🧭 Purpose (Layman Explanation):
# The web endpoint that emails someone their verification code.
#
# 🧪 Purpose (Technical Summary):
# POST /mailer/send-otp through the SendGrid client. An upstream failure becomes
# a 500 UpstreamFailure response.
#
# 🔗 Dependencies:
# - SendGridClient via app state
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router (mounted under /mailer)

import logging

from fastapi import APIRouter, Depends

from plantcare_social.shared.core.dependencies import get_mail_client
from plantcare_social.shared.core.exceptions import UpstreamServiceError
from plantcare_social.shared.infrastructure.external_apis.mail_client import SendGridClient

from ..schemas.chat_schemas import SendOtpRequest

logger = logging.getLogger(__name__)

mailer_router = APIRouter()


@mailer_router.post("/send-otp", summary="Send a verification code email")
async def send_otp(
    payload: SendOtpRequest,
    mail_client: SendGridClient = Depends(get_mail_client),
):
    try:
        await mail_client.send_email(
            to_email=payload.email,
            subject="Verification Code",
            text=payload.message,
        )
    except UpstreamServiceError as e:
        raise UpstreamServiceError(
            message="Failed to send email. Please try again later.",
            service="mail",
            details=e.details,
        ) from e

    return {"success": True, "message": "Email sent successfully"}
