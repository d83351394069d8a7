# 📄 File: plantcare_social/modules/notification_communication/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of chat messages and alerts.
#
# 🧪 Purpose (Technical Summary):
# Domain model package: ChatMessage, ConversationSummary and notification variants.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - repositories
# - services
# - routes
