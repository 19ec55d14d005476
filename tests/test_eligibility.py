import pytest
from pydantic import ValidationError

from app.models.profile import FarmerProfile
from app.models.scheme import SchemeBonus, SchemeCondition, SchemeRule
from app.rule_store import ConfigurationError, SchemeStore
from app.services.eligibility_service import EligibilityService


def make_scheme(scheme_id, **overrides):
    data = {"id": scheme_id, "title": {"en": scheme_id}, "category": "financial"}
    data.update(overrides)
    return SchemeRule(**data)


def make_service(bonuses=(), base_score=50, high_priority_bonus=10):
    return EligibilityService(
        bonuses=[SchemeBonus(**bonus) for bonus in bonuses],
        base_score=base_score,
        high_priority_bonus=high_priority_bonus
    )


def test_small_farmer_bonus(small_farmer_scheme, land_bonuses):
    service = make_service(land_bonuses)
    profile = FarmerProfile(land_holding_category="less-than-1-hectare")

    results = service.score_all(profile, [SchemeRule(**small_farmer_scheme)])

    assert len(results) == 1
    assert results[0].score == 80


def test_marginal_farmer_bonus(small_farmer_scheme, land_bonuses):
    service = make_service(land_bonuses)
    profile = FarmerProfile(land_holding_category="1-2-hectares")

    assert service.score_all(profile, [SchemeRule(**small_farmer_scheme)])[0].score == 75


def test_no_land_is_excluded(small_farmer_scheme, land_bonuses):
    service = make_service(land_bonuses)
    profile = FarmerProfile(land_holding_category="no-land")

    assert service.score_all(profile, [SchemeRule(**small_farmer_scheme)]) == []


def test_score_is_clamped_to_100(land_bonuses):
    service = make_service(land_bonuses, base_score=90)
    scheme = make_scheme("rich", priority="high", target_farmers=["small"])
    profile = FarmerProfile(land_holding_category="less-than-1-hectare")

    assert service.score_all(profile, [scheme])[0].score == 100


def test_score_is_clamped_to_0():
    service = make_service(
        [{"attribute": "farming_type", "op": "==", "value": "conventional", "points": -80}]
    )
    profile = FarmerProfile(farming_type="conventional")

    assert service.score_all(profile, [make_scheme("penalized")])[0].score == 0


def test_equal_scores_keep_candidate_order():
    service = make_service()
    candidates = [make_scheme("first"), make_scheme("second"), make_scheme("third")]

    results = service.score_all(FarmerProfile(), candidates)

    assert [r.scheme.id for r in results] == ["first", "second", "third"]
    assert {r.score for r in results} == {50}


def test_ranked_by_score_descending():
    service = make_service()
    candidates = [make_scheme("low", priority="low"), make_scheme("tie"), make_scheme("top", priority="high")]

    results = service.score_all(FarmerProfile(), candidates)

    assert [r.scheme.id for r in results] == ["top", "low", "tie"]


def test_empty_candidates():
    assert make_service().score_all(FarmerProfile(land_holding_category="no-land"), []) == []


def test_missing_attribute_fails_condition_but_not_call(small_farmer_scheme):
    service = make_service()
    universal = make_scheme("universal")

    results = service.score_all(FarmerProfile(), [SchemeRule(**small_farmer_scheme), universal])

    assert [r.scheme.id for r in results] == ["universal"]


def test_bonus_requires_scheme_target(land_bonuses):
    service = make_service(land_bonuses)
    scheme = make_scheme("everyone", target_farmers=["all"])

    results = service.score_all(FarmerProfile(land_holding_category="less-than-1-hectare"), [scheme])

    assert results[0].score == 50


def test_crop_condition_uses_contains():
    service = make_service()
    scheme = make_scheme(
        "pulses-mission",
        conditions=[{"attribute": "crops_grown", "op": "contains", "value": ["pulses", "oilseeds"]}]
    )

    assert service.score_all(FarmerProfile(crops_grown=["rice", "pulses"]), [scheme])
    assert service.score_all(FarmerProfile(crops_grown=["rice"]), [scheme]) == []
    assert service.score_all(FarmerProfile(), [scheme]) == []


def test_bundled_schemes_for_small_farmer(scheme_store):
    service = EligibilityService(bonuses=scheme_store.bonuses, base_score=50, high_priority_bonus=10)
    profile = FarmerProfile(land_holding_category="less-than-1-hectare")

    results = service.score_all(profile, scheme_store.iterate())

    assert [(r.scheme.id, r.score) for r in results] == [
        ("pm-kisan", 90),
        ("pm-fby", 60),
        ("soil-health", 50),
        ("pm-kusum", 50),
    ]


def test_bundled_schemes_for_large_farmer(scheme_store):
    service = EligibilityService(bonuses=scheme_store.bonuses, base_score=50, high_priority_bonus=10)
    profile = FarmerProfile(land_holding_category="more-than-5-hectares")

    results = service.score_all(profile, scheme_store.iterate())

    assert [r.scheme.id for r in results] == ["pm-fby", "soil-health", "pm-kusum"]


def test_bundled_schemes_for_landless_farmer(scheme_store):
    service = EligibilityService(bonuses=scheme_store.bonuses)

    assert service.score_all(FarmerProfile(land_holding_category="no-land"), scheme_store.iterate()) == []


@pytest.mark.parametrize("op", [">", ">=", "<", "<=", "between"])
def test_ordering_operators_are_rejected(small_farmer_scheme, op):
    small_farmer_scheme["conditions"] = [
        {"attribute": "land_holding_category", "op": op, "value": "1-2-hectares"}
    ]

    with pytest.raises(ConfigurationError, match="Unsupported operator"):
        SchemeStore.load({"schemes": [small_farmer_scheme]})
    with pytest.raises(ValidationError):
        SchemeCondition(attribute="land_holding_category", op=op, value="1-2-hectares")


def test_not_in_condition():
    service = make_service()
    scheme = make_scheme(
        "large-holdings",
        conditions=[{
            "attribute": "land_holding_category",
            "op": "not_in",
            "value": ["no-land", "less-than-1-hectare", "1-2-hectares"]
        }]
    )

    assert service.score_all(FarmerProfile(land_holding_category="2-5-hectares"), [scheme])
    assert service.score_all(FarmerProfile(land_holding_category="1-2-hectares"), [scheme]) == []
    assert service.score_all(FarmerProfile(), [scheme]) == []


def test_falsy_condition_passes_on_missing_attribute():
    service = make_service()
    scheme = make_scheme(
        "rain-fed-support",
        conditions=[{"attribute": "irrigation_source", "op": "falsy"}]
    )

    assert service.score_all(FarmerProfile(), [scheme])
    assert service.score_all(FarmerProfile(irrigation_source="canal"), [scheme]) == []


def test_truthy_condition_requires_attribute():
    service = make_service()
    scheme = make_scheme("crop-growers", conditions=[{"attribute": "crops_grown", "op": "truthy"}])

    assert service.score_all(FarmerProfile(crops_grown=["wheat"]), [scheme])
    assert service.score_all(FarmerProfile(), [scheme]) == []
