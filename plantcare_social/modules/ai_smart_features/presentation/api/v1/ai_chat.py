# 📄 File: plantcare_social/modules/ai_smart_features/presentation/api/v1/ai_chat.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints where people ask the AI helper about their plants.
#
# 🧪 Purpose (Technical Summary):
# GET /ai/test and the rate-limited POST /ai/chat. Failures keep the chat widget's
# {success, error, response} shape with an apologetic response.
#
# 🔗 Dependencies:
# - PlantCareAssistant
# - GroqClient via app state
# - slowapi limiter
#
# 🔄 Connected Modules / Calls From:
# - api.v1.router (mounted under /ai)
# - plants routes (get_plant_care_assistant)

"""
AI plant-care chat endpoints.

These keep the chat widget's response shape: every answer, including failures,
carries a human-readable `response` the client can show as-is.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from plantcare_social.shared.config.settings import get_settings
from plantcare_social.shared.core.dependencies import get_ai_client
from plantcare_social.shared.core.exceptions import UpstreamServiceError, ValidationError
from plantcare_social.shared.core.rate_limiter import limiter
from plantcare_social.shared.infrastructure.external_apis.groq_client import GroqClient

from ....domain.services.plant_care_assistant import PlantCareAssistant
from ..schemas.ai_schemas import AIChatRequest

logger = logging.getLogger(__name__)

ai_router = APIRouter()


def get_plant_care_assistant(ai_client: GroqClient = Depends(get_ai_client)) -> PlantCareAssistant:
    settings = get_settings()
    return PlantCareAssistant(
        ai_client,
        chat_max_tokens=settings.AI_CHAT_MAX_TOKENS,
        recommendation_max_tokens=settings.AI_RECOMMENDATION_MAX_TOKENS,
    )


@ai_router.get("/test", summary="Check AI key configuration")
async def ai_test(ai_client: GroqClient = Depends(get_ai_client)):
    configured = ai_client.is_configured
    return {
        "hasApiKey": configured,
        "apiKeyLength": len(ai_client.api_key) if configured else 0,
        "message": "API key is configured" if configured else "API key is NOT configured. Please set GROQ_API_KEY.",
    }


@ai_router.post("/chat", summary="Ask the plant-care assistant")
@limiter.limit(lambda: get_settings().AI_CHAT_RATE_LIMIT)
async def ai_chat(
    request: Request,
    payload: AIChatRequest,
    assistant: PlantCareAssistant = Depends(get_plant_care_assistant),
):
    try:
        answer = await assistant.answer(payload.message, payload.context)
    except ValidationError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "error": e.message,
                "response": "Please provide a question about plant care.",
            },
        )
    except UpstreamServiceError as e:
        logger.error(f"AI chat failed: {e.message} {e.details}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": "Failed to get AI response",
                "response": "I apologize, but I'm having trouble answering right now. Please try again in a moment.",
            },
        )

    return {"success": True, "response": answer, "source": "groq"}
