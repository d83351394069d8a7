# 📄 File: plantcare_social/modules/notification_communication/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the message, alert and email endpoints.
#
# 🧪 Purpose (Technical Summary):
# Package for the chat, notifications and mailer routers.
#
# 🔗 Dependencies:
# - FastAPI APIRouter
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
