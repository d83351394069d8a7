# 📄 File: plantcare_social/modules/ai_smart_features/domain/services/plant_care_assistant.py
# 🧭 Purpose (Layman Explanation):
# The "ask a plant expert" brain: it turns a question, or a plant's tracking diary,
# into a prompt and asks the AI for friendly, practical advice.
#
# 🧪 Purpose (Technical Summary):
# Builds chat-completion prompts for free-form plant-care questions and for
# per-plant recommendations, and delegates the call to the Groq completion client.
# Upstream failures surface as UpstreamServiceError / APITimeoutError.
#
# 🔗 Dependencies:
# - shared.infrastructure.external_apis.groq_client.GroqClient
#
# 🔄 Connected Modules / Calls From:
# - ai_smart_features/presentation/api/v1/ai_chat.py
# - plant_management/presentation/api/v1/plants.py (recommendations)

import logging
from typing import Dict, List, Optional

from plantcare_social.shared.core.exceptions import ValidationError
from plantcare_social.shared.infrastructure.external_apis.groq_client import GroqClient

logger = logging.getLogger(__name__)

CHAT_SYSTEM_PROMPT = (
    "You are a helpful plant care expert. Provide clear, practical advice about plant care, "
    "watering, fertilizing, pest control, and general plant maintenance. Keep responses concise, "
    "actionable, and friendly. Focus on helping users with their specific plant care questions."
)

RECOMMENDATION_SYSTEM_PROMPT = (
    "You are a plant care expert. Analyze the provided plant tracking data and give specific, "
    "actionable recommendations. Focus on watering, sunlight, fertilization, and overall plant "
    "health. Be concise but helpful."
)

RECOMMENDATION_REQUEST = (
    "Based on this plant tracking data, provide personalized care recommendations:\n\n"
    "{summary}\n\n"
    "Please provide:\n"
    "1. Current assessment of the plant's health\n"
    "2. Specific recommendations for watering, sunlight, and fertilization\n"
    "3. Any concerns or improvements needed\n"
    "4. Tips for better plant care"
)


class PlantCareAssistant:
    """Prompt builder and caller for the AI plant-care features."""

    def __init__(self, ai_client: GroqClient, chat_max_tokens: int = 500, recommendation_max_tokens: int = 800):
        self.ai_client = ai_client
        self.chat_max_tokens = chat_max_tokens
        self.recommendation_max_tokens = recommendation_max_tokens

    @property
    def is_configured(self) -> bool:
        return self.ai_client.is_configured

    async def answer(self, message: Optional[str], context: Optional[str] = None) -> str:
        """
        Answer a plant-care question.

        Raises:
            ValidationError: Blank message
            UpstreamServiceError: AI call failed or timed out
        """
        question = (message or "").strip()
        if not question:
            raise ValidationError("Message is required", field="message")

        messages: List[Dict[str, str]] = [{"role": "system", "content": CHAT_SYSTEM_PROMPT}]
        if context and context.strip():
            messages.append({"role": "system", "content": f"Conversation context: {context.strip()}"})
        messages.append({"role": "user", "content": question})

        logger.info(f"AI chat request: {question[:50]}")
        answer = await self.ai_client.complete(messages, max_tokens=self.chat_max_tokens)
        return answer.strip()

    async def recommend(self, plant_summary: str) -> str:
        messages = [
            {"role": "system", "content": RECOMMENDATION_SYSTEM_PROMPT},
            {"role": "user", "content": RECOMMENDATION_REQUEST.format(summary=plant_summary)},
        ]
        answer = await self.ai_client.complete(messages, max_tokens=self.recommendation_max_tokens)
        return answer.strip()
