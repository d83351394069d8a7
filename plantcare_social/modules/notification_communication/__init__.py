# 📄 File: plantcare_social/modules/notification_communication/__init__.py
# 🧭 Purpose (Layman Explanation):
# Direct messages, alerts and the emails the app sends.
#
# 🧪 Purpose (Technical Summary):
# Notification and communication bounded context, home of the fan-out engine.
#
# 🔗 Dependencies:
# - plantcare_social.shared (realtime, database, external_apis)
# - user_management
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
# - plantcare_social.main (NotificationFanout)
# - community_social routes
