# 📄 File: plantcare_social/modules/notification_communication/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web side of messages, alerts and emails.
#
# 🧪 Purpose (Technical Summary):
# Presentation layer package for chat, notifications and mailer routes.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
