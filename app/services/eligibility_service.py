"""
Eligibility service for ranking schemes against a farmer profile
"""
import logging
from typing import List, Optional, Sequence

from ..config import settings
from ..models.profile import FarmerProfile
from ..models.scheme import SchemeBonus, SchemeRule, ScoredScheme
from ..rules_evaluator import RulesEvaluator

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


class EligibilityService:
    """Scores and ranks candidate schemes for a farmer profile"""

    def __init__(
        self,
        bonuses: Sequence[SchemeBonus] = (),
        base_score: Optional[int] = None,
        high_priority_bonus: Optional[int] = None
    ):
        self.bonuses = tuple(bonuses)
        self.base_score = settings.scoring_base_score if base_score is None else base_score
        self.high_priority_bonus = (
            settings.scoring_high_priority_bonus if high_priority_bonus is None else high_priority_bonus
        )

    def score_all(self, profile: FarmerProfile, candidates: Sequence[SchemeRule]) -> List[ScoredScheme]:
        """
        Rank every qualifying candidate by match score

        Args:
            profile: Farmer's profile; missing attributes fail their conditions
            candidates: Schemes in declaration order

        Returns:
            Qualifying schemes, highest score first; equal scores keep
            candidate order
        """
        results = []

        for scheme in candidates:
            qualified, failed_conditions, passed_conditions = RulesEvaluator.evaluate_all(
                profile, scheme.conditions
            )
            if not qualified:
                logger.debug(f"Scheme {scheme.id} excluded: {'; '.join(failed_conditions)}")
                continue

            results.append(ScoredScheme(
                scheme=scheme,
                score=self.calculate_score(profile, scheme),
                reasons=passed_conditions
            ))

        # list.sort is stable, so ties retain candidate order
        results.sort(key=lambda result: result.score, reverse=True)

        logger.info(f"Eligibility check completed: {len(results)}/{len(candidates)} schemes qualified")
        return results

    def calculate_score(self, profile: FarmerProfile, scheme: SchemeRule) -> int:
        """
        Calculate match score (0-100)

        Starts from the base score, adds every bonus whose target group the
        scheme serves and whose condition the profile meets, then the
        high-priority bonus. The total is clamped to [0, 100].
        """
        score = self.base_score

        for bonus in self.bonuses:
            if bonus.target and bonus.target not in scheme.target_farmers:
                continue
            passed, _ = RulesEvaluator.evaluate_condition(profile, bonus)
            if passed:
                score += bonus.points

        if scheme.priority == 'high':
            score += self.high_priority_bonus

        return max(MIN_SCORE, min(score, MAX_SCORE))
