"""
API routes for the chat assistant
"""
import logging
from fastapi import APIRouter, Depends, HTTPException

from ..models.chat import ChatRequest, ChatResponse
from ..registry import get_chat_service
from ..services.chat_service import ChatService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
async def chat(request: ChatRequest, service: ChatService = Depends(get_chat_service)):
    """
    Answer a farming question with a canned reply and suggestions
    """
    try:
        if not request.message.strip():
            raise HTTPException(status_code=400, detail="Message is required")

        return service.respond(request.message, request.language)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Chat API error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
