"""
Immutable rule stores loaded once at startup
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError

from app.models.rule import Payload, ResponseRule, RuleStoreConfig
from app.models.scheme import SchemeBonus, SchemeRule, SchemeStoreConfig
from app.rules_evaluator import RulesEvaluator

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a rule source is malformed; fatal at startup"""


def _read_json(path: Union[str, Path]) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read rule file {path}: {e}") from e


def _missing_languages(variants: Mapping[str, Any], languages: Sequence[str]) -> List[str]:
    return [lang for lang in languages if not variants.get(lang)]


class RuleStore:
    """Ordered, read-only collection of keyword response rules"""

    def __init__(self, name: str, rules: Sequence[ResponseRule], fallback: Dict[str, Payload],
                 default_language: str):
        self.name = name
        self.default_language = default_language
        self._fallback = dict(fallback)
        # Highest priority first; sorted() is stable so ties keep declaration order
        self._rules: Tuple[ResponseRule, ...] = tuple(
            sorted(rules, key=lambda rule: rule.priority, reverse=True)
        )

    @classmethod
    def load(cls, source: Union[Mapping[str, Any], RuleStoreConfig],
             supported_languages: Optional[Sequence[str]] = None) -> "RuleStore":
        """
        Build a rule store from static configuration

        Args:
            source: Mapping (or RuleStoreConfig) with rules and fallback payloads
            supported_languages: Languages every payload must cover

        Returns:
            Validated RuleStore

        Raises:
            ConfigurationError: On duplicate ids, empty keyword sets or
                missing localizations
        """
        try:
            config = source if isinstance(source, RuleStoreConfig) else RuleStoreConfig.model_validate(source)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid rule configuration: {e}") from e

        languages = list(supported_languages or [config.default_language])
        seen = set()
        rules = []

        for rule in config.rules:
            if rule.id in seen:
                raise ConfigurationError(f"[{config.name}] duplicate rule id: {rule.id}")
            seen.add(rule.id)

            keywords = {
                lang: [' '.join(k.lower().split()) for k in tokens if k and k.strip()]
                for lang, tokens in rule.keywords.items()
            }
            if not any(keywords.values()):
                raise ConfigurationError(f"[{config.name}] rule '{rule.id}' has no keywords")

            missing = _missing_languages(rule.responses, languages)
            if missing and not rule.responses.get(config.default_language):
                raise ConfigurationError(
                    f"[{config.name}] rule '{rule.id}' missing localization for {missing} "
                    f"and no '{config.default_language}' default"
                )

            rules.append(rule.model_copy(update={"keywords": keywords}))

        missing = _missing_languages(config.fallback, languages)
        if missing and not config.fallback.get(config.default_language):
            raise ConfigurationError(
                f"[{config.name}] fallback missing localization for {missing} "
                f"and no '{config.default_language}' default"
            )

        logger.info(f"Loaded {len(rules)} rules into '{config.name}' store")
        return cls(config.name, rules, config.fallback, config.default_language)

    @classmethod
    def load_file(cls, path: Union[str, Path],
                  supported_languages: Optional[Sequence[str]] = None) -> "RuleStore":
        """Build a rule store from a JSON file with the same structure as load()"""
        return cls.load(_read_json(path), supported_languages)

    def iterate(self) -> Tuple[ResponseRule, ...]:
        """Rules in evaluation order; identical across calls"""
        return self._rules

    def fallback(self, language: str) -> Payload:
        """Fallback payload localized to language"""
        for lang in (language, self.default_language):
            if self._fallback.get(lang):
                return self._fallback[lang]
        return next(iter(self._fallback.values()))

    def get(self, rule_id: str) -> Optional[ResponseRule]:
        for rule in self._rules:
            if rule.id == rule_id:
                return rule
        return None

    def __iter__(self) -> Iterator[ResponseRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


class SchemeStore:
    """Ordered, read-only collection of scheme rules and scoring bonuses"""

    def __init__(self, config: SchemeStoreConfig):
        self._schemes: Tuple[SchemeRule, ...] = tuple(config.schemes)
        self.bonuses: Tuple[SchemeBonus, ...] = tuple(config.bonuses)
        self.application_complexity: Dict[str, str] = dict(config.application_complexity)
        self.recommendations: Dict[str, str] = dict(config.recommendations)

    @classmethod
    def load(cls, source: Union[Mapping[str, Any], SchemeStoreConfig]) -> "SchemeStore":
        """
        Build a scheme store from static configuration

        Raises:
            ConfigurationError: On malformed conditions or duplicate scheme ids
        """
        if isinstance(source, SchemeStoreConfig):
            config = source
        else:
            valid, message = RulesEvaluator.validate_schemes_json(source)
            if not valid:
                raise ConfigurationError(f"Invalid scheme configuration: {message}")
            try:
                config = SchemeStoreConfig.model_validate(source)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid scheme configuration: {e}") from e

        seen = set()
        for scheme in config.schemes:
            if scheme.id in seen:
                raise ConfigurationError(f"duplicate scheme id: {scheme.id}")
            seen.add(scheme.id)

        logger.info(f"Loaded {len(config.schemes)} schemes and {len(config.bonuses)} scoring bonuses")
        return cls(config)

    @classmethod
    def load_file(cls, path: Union[str, Path]) -> "SchemeStore":
        return cls.load(_read_json(path))

    def iterate(self) -> Tuple[SchemeRule, ...]:
        """Schemes in declaration order; identical across calls"""
        return self._schemes

    def get(self, scheme_id: str) -> Optional[SchemeRule]:
        for scheme in self._schemes:
            if scheme.id == scheme_id:
                return scheme
        return None

    def __iter__(self) -> Iterator[SchemeRule]:
        return iter(self._schemes)

    def __len__(self) -> int:
        return len(self._schemes)
