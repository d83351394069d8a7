# 📄 File: plantcare_social/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about accounts: signing up, logging in and proving who you are.
#
# 🧪 Purpose (Technical Summary):
# User management bounded context.
#
# 🔗 Dependencies:
# - plantcare_social.shared
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router
# - api.realtime
# - other modules (get_current_user)

"""
User Management Module

Accounts, login and the identity verifier that resolves bearer credentials
(HTTP header or live-channel register payload) to a user.
"""
