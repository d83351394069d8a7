# 📄 File: plantcare_social/shared/infrastructure/external_apis/groq_client.py
# 🧭 Purpose (Layman Explanation):
# Asks the AI model for plant-care answers.
#
# 🧪 Purpose (Technical Summary):
# Groq chat-completions client on top of APIClient. Returns the first choice's
# message content and raises UpstreamServiceError when there is none.
#
# 🔗 Dependencies:
# - APIClient (aiohttp)
#
# 🔄 Connected Modules / Calls From:
# - ai_smart_features PlantCareAssistant

"""
Groq chat-completions client (OpenAI-compatible API).
Used by the AI plant-care chat and plant recommendations.
"""

import logging
from typing import Dict, List, Optional

from ...core.exceptions import UpstreamServiceError
from .api_client import APIClient

logger = logging.getLogger(__name__)


class GroqClient(APIClient):
    """Thin completion client over the shared APIClient."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str,
        model: str,
        temperature: float = 0.7,
        timeout: int = 30,
    ):
        super().__init__(base_url=base_url, api_key=api_key, api_name="groq", timeout=timeout)
        self.model = model
        self.temperature = temperature

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def complete(self, messages: List[Dict[str, str]], max_tokens: int) -> str:
        """
        Run one chat completion and return the assistant text.

        Raises:
            UpstreamServiceError: If the key is missing or the call fails
            APITimeoutError: If the bounded wait elapses
        """
        if not self.is_configured:
            logger.error("GROQ_API_KEY is not configured")
            raise UpstreamServiceError(service=self.api_name, details={"reason": "not_configured"})

        response = await self.post(
            "chat/completions",
            data={
                "model": self.model,
                "messages": messages,
                "max_tokens": max_tokens,
                "temperature": self.temperature,
            },
        )

        try:
            return response["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            logger.error(f"Unexpected completion payload from {self.api_name}: {str(response)[:300]}")
            raise UpstreamServiceError(service=self.api_name)
