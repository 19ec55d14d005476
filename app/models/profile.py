"""
Pydantic models for farmer profiles and eligibility requests
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pydantic import AliasChoices, BaseModel, Field, field_validator, ConfigDict

from ..utils.validators import normalize_choice, split_multi_value


def get_current_utc_time():
    """Get current UTC time for default values"""
    return datetime.now(timezone.utc)


# Enumerated answers of the eligibility questionnaire, keyed by canonical
# value, with the English and Hindi labels shown on the form.
LAND_HOLDING_OPTIONS = {
    "no-land": ["No land", "कोई भूमि नहीं"],
    "less-than-1-hectare": ["Less than 1 hectare", "1 हेक्टेयर से कम"],
    "1-2-hectares": ["1-2 hectares", "1-2 हेक्टेयर"],
    "2-5-hectares": ["2-5 hectares", "2-5 हेक्टेयर"],
    "more-than-5-hectares": ["More than 5 hectares", "5 हेक्टेयर से अधिक"],
}

FARMING_TYPE_OPTIONS = {
    "organic": ["Organic farming", "जैविक खेती"],
    "conventional": ["Conventional farming", "पारंपरिक खेती"],
    "mixed": ["Mixed farming", "मिश्रित खेती"],
    "other": ["Other", "अन्य"],
}

CROP_OPTIONS = {
    "rice": ["Rice", "चावल"],
    "wheat": ["Wheat", "गेहूं"],
    "pulses": ["Pulses", "दालें"],
    "oilseeds": ["Oilseeds", "तिलहन"],
    "horticulture": ["Horticulture", "बागवानी"],
    "other": ["Other", "अन्य"],
}

IRRIGATION_OPTIONS = {
    "canal": ["Canal irrigation", "नहर सिंचाई"],
    "well-tubewell": ["Well/Tubewell", "कुआं/ट्यूबवेल"],
    "rain-fed": ["Rain-fed", "बारिश पर निर्भर"],
    "drip": ["Drip irrigation", "ड्रिप सिंचाई"],
}


class FarmerProfile(BaseModel):
    """Farmer profile collected by the eligibility questionnaire"""
    land_holding_category: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("land_holding_category", "landHoldingCategory", "landHolding"),
        description="Land holding bracket"
    )
    farming_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("farming_type", "farmingType"), description="Farming practice"
    )
    crops_grown: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("crops_grown", "cropsGrown"), description="Crops grown"
    )
    irrigation_source: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("irrigation_source", "irrigationSource"),
        description="Primary irrigation source"
    )
    state: Optional[str] = Field(None, description="State of residence")

    @field_validator('land_holding_category', mode='before')
    @classmethod
    def validate_land_holding(cls, v):
        return normalize_choice(v, LAND_HOLDING_OPTIONS)

    @field_validator('farming_type', mode='before')
    @classmethod
    def validate_farming_type(cls, v):
        return normalize_choice(v, FARMING_TYPE_OPTIONS)

    @field_validator('crops_grown', mode='before')
    @classmethod
    def validate_crops(cls, v):
        return [normalize_choice(crop, CROP_OPTIONS) for crop in split_multi_value(v)]

    @field_validator('irrigation_source', mode='before')
    @classmethod
    def validate_irrigation(cls, v):
        return normalize_choice(v, IRRIGATION_OPTIONS)

    @field_validator('state')
    @classmethod
    def validate_state(cls, v):
        if v:
            return v.strip()
        return None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "land_holding_category": "less-than-1-hectare",
                "farming_type": "organic",
                "crops_grown": ["rice", "pulses"],
                "irrigation_source": "rain-fed",
                "state": "Uttar Pradesh"
            }
        }
    )


class EligibilityRequest(BaseModel):
    """Request to rank schemes for a farmer profile"""
    profile: FarmerProfile = Field(..., description="Farmer's profile information")
    language: str = Field("en", description="Response language")


class EligibilityResponse(BaseModel):
    """Ranked schemes a farmer qualifies for"""
    success: bool = True
    eligible_schemes: List[Dict[str, Any]] = Field(default_factory=list, description="Localized schemes with match_score")
    total: int = 0
    checked_at: datetime = Field(default_factory=get_current_utc_time)
