"""
Pydantic models for keyword response rules
"""
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

# A payload is either a single localized text (chat replies)
# or a list of localized texts (suggestion chips).
Payload = Union[str, List[str]]


class ResponseRule(BaseModel):
    """Keyword rule mapping free-text triggers to a localized payload"""
    id: str = Field(..., min_length=1, description="Unique rule identifier")
    keywords: Dict[str, List[str]] = Field(..., description="Trigger keywords per language")
    responses: Dict[str, Payload] = Field(..., description="Localized payload per language")
    priority: int = Field(0, description="Higher priority rules are evaluated first")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "fertilizer",
                "keywords": {"en": ["fertilizer"], "hi": ["उर्वरक", "खाद"]},
                "responses": {
                    "en": "For most crops, use organic compost along with NPK fertilizers.",
                    "hi": "अधिकांश फसलों के लिए एनपीके उर्वरकों के साथ जैविक कंपोस्ट का उपयोग करें।"
                },
                "priority": 0
            }
        }
    )

    def all_keywords(self) -> List[str]:
        """Keywords across every language, in declaration order"""
        return [keyword for tokens in self.keywords.values() for keyword in tokens]

    def localized(self, language: str, default_language: str) -> Payload:
        for lang in (language, default_language):
            if self.responses.get(lang):
                return self.responses[lang]
        return next(iter(self.responses.values()))


class RuleStoreConfig(BaseModel):
    """Static configuration a rule store is built from"""
    name: str = Field("rules", description="Store name used in logs")
    default_language: str = Field("en", description="Language used when a variant is missing")
    rules: List[ResponseRule] = Field(default_factory=list)
    fallback: Dict[str, Payload] = Field(..., description="Payload returned when nothing matches")


class MatchResult(BaseModel):
    """Outcome of matching one input against a rule store"""
    rule: Optional[ResponseRule] = None
    matched: bool = False
    payload: Payload

    model_config = ConfigDict(frozen=True)

    @property
    def rule_id(self) -> Optional[str]:
        return self.rule.id if self.rule else None
