import logging
from typing import Any, Dict, List, Tuple
from app.models.profile import FarmerProfile
from app.models.scheme import SUPPORTED_OPERATORS, SchemeCondition

logger = logging.getLogger(__name__)


class RulesEvaluator:
    """Evaluates farmer profiles against scheme conditions"""

    SUPPORTED_OPERATORS = set(SUPPORTED_OPERATORS)

    @staticmethod
    def _get_profile_value(profile: FarmerProfile, attribute: str) -> Any:
        """Get value from farmer profile, treating empty values as missing"""
        value = getattr(profile, attribute, None)
        if value == [] or value == "":
            return None
        return value

    @staticmethod
    def _as_list(expected_value: Any) -> List[Any]:
        if isinstance(expected_value, (list, tuple, set)):
            return list(expected_value)
        if isinstance(expected_value, str):
            # Handle comma-delimited strings
            return [v.strip() for v in expected_value.split(",")]
        return [expected_value]

    @staticmethod
    def evaluate_condition(profile: FarmerProfile, condition: SchemeCondition) -> Tuple[bool, str]:
        """
        Evaluate a single condition against a farmer profile
        Returns: (passed, reason_message)
        """
        attribute = condition.attribute
        op = condition.op
        expected_value = condition.value

        if op not in RulesEvaluator.SUPPORTED_OPERATORS:
            return False, f"Unsupported operator: {op}"

        profile_value = RulesEvaluator._get_profile_value(profile, attribute)

        # truthy/falsy test presence; every other predicate fails on a missing attribute
        if op in ("truthy", "falsy"):
            passed = (profile_value is not None) == (op == "truthy")
            if passed:
                return True, f"{attribute} {op}"
            return False, condition.reason_if_fail or f"{attribute} {op} failed"

        if profile_value is None:
            return False, f"missing: {attribute}"

        try:
            if op == "==":
                passed = profile_value == expected_value
            elif op == "!=":
                passed = profile_value != expected_value
            elif op == "in":
                passed = profile_value in RulesEvaluator._as_list(expected_value)
            elif op == "not_in":
                passed = profile_value not in RulesEvaluator._as_list(expected_value)
            elif op == "contains":
                # Multi-valued attributes such as crops_grown
                values = profile_value if isinstance(profile_value, list) else [profile_value]
                passed = any(v in values for v in RulesEvaluator._as_list(expected_value))
            else:
                return False, f"Unhandled operator: {op}"

            if passed:
                return True, f"{attribute} {op} {expected_value}"
            reason = condition.reason_if_fail or f"{attribute} {op} {expected_value} failed"
            return False, reason

        except TypeError as e:
            logger.error(f"Error evaluating condition {attribute} {op} {expected_value}: {e}")
            return False, f"evaluation error: {attribute}"

    @staticmethod
    def evaluate_all(profile: FarmerProfile, conditions: List[SchemeCondition]) -> Tuple[bool, List[str], List[str]]:
        """
        Evaluate a profile against a list of conditions that must all hold
        Returns: (qualified, failed_conditions, passed_conditions)
        """
        failed_conditions = []
        passed_conditions = []

        for condition in conditions:
            passed, reason = RulesEvaluator.evaluate_condition(profile, condition)
            if passed:
                passed_conditions.append(reason)
            else:
                failed_conditions.append(reason)

        return len(failed_conditions) == 0, failed_conditions, passed_conditions

    @staticmethod
    def validate_condition(condition: Dict[str, Any], location: str) -> Tuple[bool, str]:
        """Validate one raw condition dictionary"""
        if not isinstance(condition, dict):
            return False, f"{location} must be a dictionary"
        if "attribute" not in condition:
            return False, f"{location} missing 'attribute'"
        if "op" not in condition:
            return False, f"{location} missing 'op'"

        op = condition["op"]
        if op not in RulesEvaluator.SUPPORTED_OPERATORS:
            return False, f"Unsupported operator '{op}' in {location}"

        if op not in ("truthy", "falsy") and "value" not in condition:
            return False, f"{location} missing 'value'"

        return True, "Valid condition"

    @staticmethod
    def validate_schemes_json(schemes_data: dict) -> Tuple[bool, str]:
        """Validate scheme store JSON structure"""
        if not isinstance(schemes_data, dict):
            return False, "scheme configuration must be a dictionary"

        schemes = schemes_data.get("schemes", [])
        if not isinstance(schemes, list):
            return False, "schemes must be a list"

        for i, scheme in enumerate(schemes):
            if not isinstance(scheme, dict):
                return False, f"schemes[{i}] must be a dictionary"
            for key in ("id", "title", "category"):
                if key not in scheme:
                    return False, f"schemes[{i}] missing required key: {key}"

            conditions = scheme.get("conditions", [])
            if not isinstance(conditions, list):
                return False, f"schemes[{i}].conditions must be a list"
            for j, condition in enumerate(conditions):
                valid, message = RulesEvaluator.validate_condition(condition, f"schemes[{i}].conditions[{j}]")
                if not valid:
                    return False, message

        bonuses = schemes_data.get("bonuses", [])
        if not isinstance(bonuses, list):
            return False, "bonuses must be a list"
        for i, bonus in enumerate(bonuses):
            valid, message = RulesEvaluator.validate_condition(bonus, f"bonuses[{i}]")
            if not valid:
                return False, message
            if "points" not in bonus:
                return False, f"bonuses[{i}] missing 'points'"

        return True, "Valid schemes JSON"
