"""
Scheme service for browsing, ranking and comparing government schemes
"""
import logging
import uuid
from typing import Any, Dict, List, Optional, Sequence

from ..config import settings
from ..models.profile import EligibilityResponse, FarmerProfile
from ..rule_store import SchemeStore
from ..utils.validators import filter_value, validate_language
from .eligibility_service import EligibilityService

logger = logging.getLogger(__name__)

# Estimated value of one scheme in a comparison, in INR
ESTIMATED_BENEFIT_PER_SCHEME = 5000

APPLICATION_NEXT_STEPS = [
    "Verification of documents will take 7-10 working days",
    "You will receive updates on your registered mobile number",
    "Track application status using the application ID"
]


class SchemeService:
    """Service wrapping the scheme store and the eligibility scorer"""

    def __init__(self, store: SchemeStore, eligibility_service: Optional[EligibilityService] = None):
        self.store = store
        self.eligibility_service = eligibility_service or EligibilityService(bonuses=store.bonuses)

    def list_schemes(
        self,
        category: Optional[str] = None,
        state: Optional[str] = None,
        search: Optional[str] = None,
        language: str = "en"
    ) -> List[Dict[str, Any]]:
        """
        List schemes localized to language

        Args:
            category: Scheme category, "all" for every category
            state: State filter; all schemes are central, so only active
                schemes are returned when a state is given
            search: Case-insensitive text matched against title,
                description and ministry
            language: Response language
        """
        language = validate_language(language)
        category = filter_value(category)
        state = filter_value(state)
        search = filter_value(search)

        schemes = list(self.store.iterate())

        if category:
            schemes = [s for s in schemes if s.category == category]

        if state:
            schemes = [s for s in schemes if s.status == 'active']

        if search:
            term = search.lower()
            schemes = [
                s for s in schemes
                if any(term in text.lower() for text in (*s.title.values(), *s.description.values(), s.ministry))
            ]

        return [s.localize(language, settings.default_language) for s in schemes]

    def check_eligibility(self, profile: FarmerProfile, language: str = "en") -> EligibilityResponse:
        """Rank qualifying schemes for a profile, localized to language"""
        language = validate_language(language)
        ranked = self.eligibility_service.score_all(profile, self.store.iterate())

        eligible_schemes = []
        for result in ranked:
            data = result.scheme.localize(language, settings.default_language)
            data["match_score"] = result.score
            eligible_schemes.append(data)

        return EligibilityResponse(eligible_schemes=eligible_schemes, total=len(eligible_schemes))

    def compare(self, scheme_ids: Sequence[str], language: str = "en") -> Dict[str, Any]:
        """
        Compare selected schemes side by side

        Unknown scheme ids are ignored.
        """
        language = validate_language(language)
        wanted = set(scheme_ids)
        schemes = [s for s in self.store.iterate() if s.id in wanted]

        return {
            "schemes": [s.localize(language, settings.default_language) for s in schemes],
            "recommendations": [
                self.store.recommendations[s.id] for s in schemes if s.id in self.store.recommendations
            ],
            "total_benefits": len(schemes) * ESTIMATED_BENEFIT_PER_SCHEME,
            "application_complexity": {
                s.id: self.store.application_complexity.get(s.id, "Unknown") for s in schemes
            }
        }

    def apply(self, scheme_id: str) -> Optional[Dict[str, Any]]:
        """
        Record an application for a scheme

        Applications are not persisted; the returned id is for display only.

        Returns:
            Application receipt, or None for an unknown scheme
        """
        scheme = self.store.get(scheme_id)
        if not scheme:
            return None

        application_id = uuid.uuid4().hex[:12]
        logger.info(f"Application {application_id} submitted for scheme {scheme_id}")
        return {
            "application_id": application_id,
            "scheme_id": scheme_id,
            "message": "Application submitted successfully",
            "next_steps": list(APPLICATION_NEXT_STEPS)
        }
