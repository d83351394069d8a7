# 📄 File: plantcare_social/modules/notification_communication/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for sending messages and delivering alerts.
#
# 🧪 Purpose (Technical Summary):
# Domain services package: ConversationService and NotificationFanout.
#
# 🔗 Dependencies:
# - repositories
# - shared.realtime
#
# 🔄 Connected Modules / Calls From:
# - chat routes
# - community_social routes
# - plantcare_social.main
