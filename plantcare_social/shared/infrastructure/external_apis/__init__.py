# 📄 File: plantcare_social/shared/infrastructure/external_apis/__init__.py
# 🧭 Purpose (Layman Explanation):
# Clients for the outside services the app talks to: the AI model and the mail sender.
#
# 🧪 Purpose (Technical Summary):
# Exports the aiohttp APIClient base and its Groq and SendGrid subclasses.
#
# 🔗 Dependencies:
# - aiohttp
#
# 🔄 Connected Modules / Calls From:
# - plantcare_social.main (lifespan)
# - ai_smart_features
# - mailer routes

from .api_client import APIClient
from .groq_client import GroqClient
from .mail_client import SendGridClient

__all__ = ["APIClient", "GroqClient", "SendGridClient"]
