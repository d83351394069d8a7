# 📄 File: plantcare_social/modules/notification_communication/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables and storage code for messages and alerts.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for chats and notifications.
#
# 🔗 Dependencies:
# - SQLAlchemy asyncio
#
# 🔄 Connected Modules / Calls From:
# - migrations/env.py
# - routes
# - NotificationFanout
