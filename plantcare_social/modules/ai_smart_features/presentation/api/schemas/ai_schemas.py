# 📄 File: plantcare_social/modules/ai_smart_features/presentation/api/schemas/ai_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what a question to the AI helper contains.
#
# 🧪 Purpose (Technical Summary):
# AIChatRequest: message plus optional context.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - presentation/api/v1/ai_chat.py

from typing import Optional

from pydantic import BaseModel, Field


class AIChatRequest(BaseModel):
    # blank messages are answered with a 400 by the route, not a schema error
    message: Optional[str] = Field(None, max_length=4000)
    context: Optional[str] = Field(None, max_length=4000)
