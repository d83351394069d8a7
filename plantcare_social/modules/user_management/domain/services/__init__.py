# 📄 File: plantcare_social/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The account rules: registration, login and token checks.
#
# 🧪 Purpose (Technical Summary):
# Domain services package: AuthService and IdentityVerifier.
#
# 🔗 Dependencies:
# - plantcare_social.shared.core.security
#
# 🔄 Connected Modules / Calls From:
# - user_management presentation
# - api.realtime
