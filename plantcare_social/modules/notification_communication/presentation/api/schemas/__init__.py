# 📄 File: plantcare_social/modules/notification_communication/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of message requests.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas for chat endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/chat.py
# - presentation/api/v1/mailer.py
