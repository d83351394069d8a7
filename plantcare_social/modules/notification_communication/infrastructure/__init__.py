# 📄 File: plantcare_social/modules/notification_communication/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where messages and alerts actually live in the database.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package for chats and notifications.
#
# 🔗 Dependencies:
# - SQLAlchemy
#
# 🔄 Connected Modules / Calls From:
# - notification_communication routes
# - NotificationFanout
