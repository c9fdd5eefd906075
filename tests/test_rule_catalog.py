import dataclasses

import pytest

from policylens.models.check import CheckCategory, CheckPriority
from policylens.rules.catalog import (
    CATALOG_VERSION,
    HEURISTIC_CHECKS,
    HIGH_PRIORITY_RULE_IDS,
    KEYWORD_RULES,
    check_ids,
    get_heuristic,
    get_rule,
)
from policylens.rules.citations import CITATIONS


def test_catalog_has_twelve_keyword_rules_in_fixed_order():
    assert [rule.id for rule in KEYWORD_RULES] == [
        "data-controller",
        "dpo-contact",
        "processing-purpose",
        "legal-basis",
        "data-types",
        "data-recipients",
        "data-transfers",
        "retention-period",
        "user-rights",
        "right-to-complain",
        "automated-decisions",
        "data-source",
    ]


def test_heuristic_checks_follow_keyword_rules():
    ids = check_ids()
    assert len(ids) == 17
    assert len(set(ids)) == 17
    assert ids[-5:] == (
        "policy-length",
        "cookie-policy",
        "policy-date",
        "contact-info",
        "child-privacy",
    )


def test_only_three_rules_are_high_priority():
    high = {rule.id for rule in KEYWORD_RULES if rule.priority == CheckPriority.HIGH}
    assert high == set(HIGH_PRIORITY_RULE_IDS) == {
        "data-controller",
        "processing-purpose",
        "user-rights",
    }
    for rule in KEYWORD_RULES:
        if rule.id not in high:
            assert rule.priority == CheckPriority.MEDIUM


def test_heuristic_priorities():
    priorities = {h.id: h.priority for h in HEURISTIC_CHECKS}
    assert priorities == {
        "policy-length": CheckPriority.MEDIUM,
        "cookie-policy": CheckPriority.HIGH,
        "policy-date": CheckPriority.MEDIUM,
        "contact-info": CheckPriority.HIGH,
        "child-privacy": CheckPriority.MEDIUM,
    }


def test_every_rule_has_three_to_six_lowercase_keywords():
    for rule in KEYWORD_RULES:
        assert 3 <= len(rule.keywords) <= 6
        assert all(k == k.lower() for k in rule.keywords)
        assert rule.keyword_set == frozenset(rule.keywords)


def test_rule_lookup_accepts_bare_and_check_ids():
    assert get_rule("legal-basis") is get_rule("policy-legal-basis")
    assert get_rule("legal-basis").check_id == "policy-legal-basis"

    with pytest.raises(KeyError):
        get_rule("policy-unknown")


def test_heuristic_lookup_rejects_unknown_ids():
    assert get_heuristic("cookie-policy").category == CheckCategory.COOKIES
    with pytest.raises(KeyError):
        get_heuristic("https-enabled")


def test_every_check_carries_a_citation():
    for check_id in check_ids():
        assert check_id in CITATIONS
        assert CITATIONS[check_id].reference_url.startswith("https://")


def test_catalog_is_read_only():
    rule = KEYWORD_RULES[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.title = "changed"

    with pytest.raises(TypeError):
        CITATIONS["policy-data-controller"] = None


def test_catalog_version_is_set():
    assert CATALOG_VERSION.startswith("GDPR")
