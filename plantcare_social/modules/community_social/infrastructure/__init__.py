# 📄 File: plantcare_social/modules/community_social/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where posts actually live in the database.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package for community features.
#
# 🔗 Dependencies:
# - SQLAlchemy
#
# 🔄 Connected Modules / Calls From:
# - community_social presentation
