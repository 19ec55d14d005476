"""
Pydantic models for government schemes and their eligibility rules
"""
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

# Profile attributes are enumerated strings, so only equality and
# membership operators are meaningful.
SUPPORTED_OPERATORS = ['==', '!=', 'truthy', 'falsy', 'in', 'not_in', 'contains']


class SchemeCondition(BaseModel):
    """Predicate over a single farmer profile attribute"""
    attribute: str = Field(..., description="Profile field name to check")
    op: str = Field(..., description="Comparison operator")
    value: Any = Field(None, description="Expected value")
    reason_if_fail: Optional[str] = Field(None, description="Explanation if condition fails")

    @field_validator('op')
    @classmethod
    def validate_operator(cls, v):
        if v not in SUPPORTED_OPERATORS:
            raise ValueError(f'Operator must be one of: {SUPPORTED_OPERATORS}')
        return v


class SchemeBonus(SchemeCondition):
    """Score bonus granted when a profile attribute meets a scheme's target group"""
    target: Optional[str] = Field(None, description="Scheme target group the bonus applies to")
    points: int = Field(..., description="Points added to the match score")


class SchemeRule(BaseModel):
    """A government scheme together with its qualification predicate"""
    id: str = Field(..., min_length=1, description="Unique identifier for the scheme")
    title: Dict[str, str] = Field(..., description="Localized scheme title")
    description: Dict[str, str] = Field(default_factory=dict)
    benefits: Dict[str, str] = Field(default_factory=dict)
    eligibility: Dict[str, List[str]] = Field(default_factory=dict, description="Localized eligibility notes")
    category: Literal['financial', 'insurance', 'infrastructure', 'education', 'sustainable', 'technology']
    status: Literal['active', 'upcoming', 'closed'] = 'active'
    application_deadline: str = ""
    application_link: str = ""
    ministry: str = ""
    amount: Optional[str] = None
    documents: List[str] = Field(default_factory=list)
    priority: Literal['high', 'medium', 'low'] = 'medium'
    target_farmers: List[str] = Field(default_factory=list)
    conditions: List[SchemeCondition] = Field(
        default_factory=list,
        description="All conditions must hold; an empty list qualifies everyone"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "pm-kisan",
                "title": {"en": "PM Kisan Samman Nidhi", "hi": "पीएम किसान सम्मान निधि"},
                "category": "financial",
                "priority": "high",
                "target_farmers": ["small", "marginal"],
                "conditions": [
                    {
                        "attribute": "land_holding_category",
                        "op": "in",
                        "value": ["less-than-1-hectare", "1-2-hectares"],
                        "reason_if_fail": "Land holding must be up to 2 hectares"
                    }
                ]
            }
        }
    )

    def localize(self, language: str, default_language: str = "en") -> Dict[str, Any]:
        """Flatten localized fields into a single-language view"""
        data = self.model_dump(exclude={"conditions"})
        for field in ("title", "description", "benefits"):
            values = getattr(self, field)
            data[field] = values.get(language, values.get(default_language, ""))
        data["eligibility"] = self.eligibility.get(language, self.eligibility.get(default_language, []))
        return data


class SchemeStoreConfig(BaseModel):
    """Static configuration a scheme store is built from"""
    schemes: List[SchemeRule] = Field(default_factory=list)
    bonuses: List[SchemeBonus] = Field(default_factory=list)
    application_complexity: Dict[str, str] = Field(default_factory=dict)
    recommendations: Dict[str, str] = Field(default_factory=dict)


class ScoredScheme(BaseModel):
    """A qualifying scheme and its match score"""
    scheme: SchemeRule
    score: int = Field(..., ge=0, le=100, description="Match score (0-100)")
    reasons: List[str] = Field(default_factory=list)
