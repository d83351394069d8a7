# 📄 File: plantcare_social/modules/notification_communication/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules of messages and alerts.
#
# 🧪 Purpose (Technical Summary):
# Domain layer for chats and notifications.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - notification_communication presentation and infrastructure layers
