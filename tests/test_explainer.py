from explainer import Explainer, FALLBACK_REASON
from models import FeatureSet, Verdict


def make_verdict(probability=0.5, is_spam=False, **features):
    return Verdict(
        isSpam=is_spam,
        spamProbability=probability,
        confidence=0.5,
        features=FeatureSet(**features),
    )


def test_fallback_when_nothing_matches():
    assert Explainer().explain(make_verdict(), "see you at lunch") == [FALLBACK_REASON]


def test_priority_order_and_limit():
    verdict = make_verdict(0.95, True, spamScore=3.0, safeScore=0.1, hasAllCaps=True,
                           hasExclamation=True, hasDollarSign=True)
    assert Explainer().explain(verdict, "WIN $$$ now!") == [
        "multiple high-risk indicators",
        "high spam keyword density",
    ]


def test_lower_rules_fill_remaining_slots():
    verdict = make_verdict(0.7, True, hasExclamation=True, hasDollarSign=True,
                           structuralPatternMatchCount=3, safeScore=1.0)
    assert Explainer().explain(verdict, "pay $5 now!") == [
        "money symbols with exclamation marks",
        "multiple structural spam patterns",
    ]


def test_contact_information():
    verdict = make_verdict(hasEmail=True, hasPhone=True, safeScore=1.0)
    assert Explainer().explain(verdict, "x") == ["contains contact information"]


def test_text_rules_are_case_insensitive():
    verdict = make_verdict(safeScore=1.0)
    assert Explainer().explain(verdict, "GUARANTEED results") == ["guarantee statements"]
    assert Explainer().explain(verdict, "Free Money") == ["financial incentive keywords"]
    assert Explainer().explain(verdict, "100% FREE MONEY") == [
        "guarantee statements",
        "financial incentive keywords",
    ]


def test_trust_indicators_only_for_ham():
    ham = make_verdict(0.3, False, trustScore=0.3, safeScore=1.0)
    spam = make_verdict(0.7, True, trustScore=0.3, safeScore=1.0)
    assert Explainer().explain(ham, "dear team") == ["trust indicators present"]
    assert Explainer().explain(spam, "dear team") == [FALLBACK_REASON]


def test_density_rule_uses_strict_comparison():
    # 0 > 0 * 2 is false
    assert Explainer().explain(make_verdict(), "hello") == [FALLBACK_REASON]
    assert Explainer().explain(make_verdict(spamScore=0.1), "hello") == ["high spam keyword density"]
