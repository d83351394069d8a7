# 📄 File: plantcare_social/modules/notification_communication/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for messages, alerts and emails.
#
# 🧪 Purpose (Technical Summary):
# API package for notification and communication features.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
