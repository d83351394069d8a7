# 📄 File: plantcare_social/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promise of how user accounts are stored and found.
#
# 🧪 Purpose (Technical Summary):
# Repository interface package for users.
#
# 🔗 Dependencies:
# - abc
#
# 🔄 Connected Modules / Calls From:
# - user_management infrastructure (UserRepositoryImpl)
