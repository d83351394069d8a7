# 📄 File: plantcare_social/shared/config/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where the app reads its settings from.
#
# 🧪 Purpose (Technical Summary):
# Exports Settings and the cached get_settings factory.
#
# 🔗 Dependencies:
# - pydantic-settings
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main
# - migrations/env.py
# - route dependencies

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
