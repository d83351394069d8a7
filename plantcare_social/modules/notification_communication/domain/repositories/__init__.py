# 📄 File: plantcare_social/modules/notification_communication/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promises of how messages and alerts are stored.
#
# 🧪 Purpose (Technical Summary):
# Repository interface package for chats and notifications.
#
# 🔗 Dependencies:
# - abc
#
# 🔄 Connected Modules / Calls From:
# - notification_communication infrastructure
