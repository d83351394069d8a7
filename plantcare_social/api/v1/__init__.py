# 📄 File: plantcare_social/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Bundles every version 1 web route into one router.
#
# 🧪 Purpose (Technical Summary):
# Exports api_v1_router, which mounts every module router at its client path.
#
# 🔗 Dependencies:
# - plantcare_social.api.v1.router
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main (include_router)

from .router import api_v1_router

__all__ = ["api_v1_router"]
