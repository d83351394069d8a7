# 📄 File: plantcare_social/shared/__init__.py
# 🧭 Purpose (Layman Explanation):
# Building blocks every feature area shares: settings, errors, database, outside services,
# logging and the live notification plumbing.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package.
#
# 🔗 Dependencies:
# - pydantic-settings, SQLAlchemy, aiohttp, python-json-logger
#
# 🔄 Connected Modules / Calls From:
# - Every module under plantcare_social.modules
# - plantcare_social.main

"""Shared kernel: configuration, core utilities, infrastructure and realtime delivery."""
