"""
Chat service answering farmer questions from keyword rules
"""
import logging

from ..matcher import match, match_rule
from ..models.chat import ChatResponse
from ..normalizer import normalize
from ..rule_store import RuleStore
from ..utils.validators import validate_language

logger = logging.getLogger(__name__)


class ChatService:
    """Selects a canned reply and follow-up suggestions for a message"""

    def __init__(self, response_store: RuleStore, suggestion_store: RuleStore):
        self.response_store = response_store
        self.suggestion_store = suggestion_store

    def respond(self, message: str, language: str = "en") -> ChatResponse:
        """
        Answer a chat message

        Args:
            message: Raw user text
            language: Requested reply language

        Returns:
            ChatResponse; unrecognized messages get the fallback reply
        """
        language = validate_language(language)
        normalized = normalize(message, language)

        result = match_rule(normalized, self.response_store, language)
        suggestions = match(normalized, self.suggestion_store, language)

        if not result.matched:
            logger.info(f"No chat rule matched; returning fallback reply ({language})")

        return ChatResponse(
            reply=result.payload,
            suggestions=list(suggestions),
            matched_rule_id=result.rule_id
        )
