# 📄 File: plantcare_social/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the feature areas of the app: accounts, community, messaging and alerts,
# plant tracking and the AI helper.
#
# 🧪 Purpose (Technical Summary):
# Bounded-context packages, each split into domain, infrastructure and presentation layers.
#
# 🔗 Dependencies:
# - plantcare_social.shared (config, core, infrastructure, realtime)
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.api.v1.router (module routers)
