from typing import Optional

from app.config import settings
from app.data import CHAT_RULES, SCHEMES, SUGGESTION_RULES
from app.rule_store import RuleStore, SchemeStore
from app.services.chat_service import ChatService
from app.services.scheme_service import SchemeService


class RuleRegistry:
    chat_store: Optional[RuleStore] = None
    suggestion_store: Optional[RuleStore] = None
    scheme_store: Optional[SchemeStore] = None


registry = RuleRegistry()


def load_rule_stores():
    """Load every rule store; must complete before requests are served"""
    languages = settings.get_supported_languages_list()

    if settings.chat_rules_file:
        chat_store = RuleStore.load_file(settings.chat_rules_file, languages)
    else:
        chat_store = RuleStore.load(CHAT_RULES, languages)

    if settings.suggestion_rules_file:
        suggestion_store = RuleStore.load_file(settings.suggestion_rules_file, languages)
    else:
        suggestion_store = RuleStore.load(SUGGESTION_RULES, languages)

    if settings.scheme_rules_file:
        scheme_store = SchemeStore.load_file(settings.scheme_rules_file)
    else:
        scheme_store = SchemeStore.load(SCHEMES)

    # Publish only once every store validated
    registry.chat_store = chat_store
    registry.suggestion_store = suggestion_store
    registry.scheme_store = scheme_store


def clear_rule_stores():
    registry.chat_store = None
    registry.suggestion_store = None
    registry.scheme_store = None


def _require(store, name: str):
    if store is None:
        raise RuntimeError(f"{name} store is not loaded; call load_rule_stores() at startup")
    return store


def get_chat_store() -> RuleStore:
    return _require(registry.chat_store, "chat")


def get_suggestion_store() -> RuleStore:
    return _require(registry.suggestion_store, "suggestion")


def get_scheme_store() -> SchemeStore:
    return _require(registry.scheme_store, "scheme")


def get_chat_service() -> ChatService:
    return ChatService(get_chat_store(), get_suggestion_store())


def get_scheme_service() -> SchemeService:
    return SchemeService(get_scheme_store())
