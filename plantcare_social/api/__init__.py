# 📄 File: plantcare_social/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# The outer doors of the app: the web routes, the live line and the request logger.
#
# 🧪 Purpose (Technical Summary):
# HTTP API aggregation, the /ws realtime endpoint and the HTTP middleware.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main
