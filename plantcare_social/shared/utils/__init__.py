# 📄 File: plantcare_social/shared/utils/__init__.py
# 🧭 Purpose (Layman Explanation):
# Small shared helpers such as logging setup.
#
# 🧪 Purpose (Technical Summary):
# Utility package: structured logging configuration and log context helpers.
#
# 🔗 Dependencies:
# - python-json-logger
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main
# - api.middleware.logging
# - api.realtime
