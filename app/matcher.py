"""
First-match keyword matcher for free-text input
"""
import logging
from typing import Optional, Union

from app.models.rule import MatchResult, Payload
from app.normalizer import NormalizedInput, normalize
from app.rule_store import RuleStore

logger = logging.getLogger(__name__)


def match_rule(message: Union[NormalizedInput, str], store: RuleStore,
               language: Optional[str] = None) -> MatchResult:
    """
    Select the first rule whose keywords occur in the message

    A rule matches when any of its keywords, in any language, is a substring
    of the normalized text, so "fertilizers" matches the keyword "fertilizer".
    Rules are tried in the store's priority order. When nothing matches the
    store's fallback payload is returned.

    Args:
        message: Normalized message (raw strings are normalized first)
        store: Rule store to evaluate
        language: Language of the payload; defaults to the message's language

    Returns:
        MatchResult carrying the localized payload
    """
    if not isinstance(message, NormalizedInput):
        message = normalize(message, language or store.default_language)
    language = language or message.language

    if message.text:
        for rule in store.iterate():
            for keyword in rule.all_keywords():
                if keyword in message.text:
                    logger.debug(f"[{store.name}] matched rule '{rule.id}' on '{keyword}'")
                    return MatchResult(
                        rule=rule,
                        matched=True,
                        payload=rule.localized(language, store.default_language)
                    )

    return MatchResult(rule=None, matched=False, payload=store.fallback(language))


def match(message: Union[NormalizedInput, str], store: RuleStore, language: Optional[str] = None) -> Payload:
    """Localized payload of the first matching rule, or the fallback payload"""
    return match_rule(message, store, language).payload
