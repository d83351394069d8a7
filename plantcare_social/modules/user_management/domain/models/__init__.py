# 📄 File: plantcare_social/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shape of a user account.
#
# 🧪 Purpose (Technical Summary):
# Domain model package for users.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - user_management repositories and services
