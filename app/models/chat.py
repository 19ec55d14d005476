"""
Pydantic models for the chat assistant
"""
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


class ChatRequest(BaseModel):
    """Free-text question sent by the chat widget"""
    message: str = Field("", description="User's message")
    language: str = Field("en", description="Language code of the reply")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"message": "Which fertilizer should I use for wheat?", "language": "en"}
        }
    )


class ChatResponse(BaseModel):
    """Canned reply selected by the response rules"""
    reply: str
    suggestions: List[str] = Field(default_factory=list)
    matched_rule_id: Optional[str] = Field(None, description="Rule that produced the reply, if any")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
