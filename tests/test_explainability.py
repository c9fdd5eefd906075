from fixtures.sample_policies import SCENARIO_A_POLICY
from policylens.explainability.view import (
    CATEGORY_ORDER,
    CATEGORY_TITLES,
    failing_checks,
    group_checks_by_category,
)
from policylens.models.check import CheckCategory, CheckStatus
from policylens.orchestrator.evaluator import evaluate


def test_groups_use_explicit_category_tags():
    checks = evaluate(SCENARIO_A_POLICY)
    groups = group_checks_by_category(checks)

    assert list(groups) == list(CATEGORY_ORDER)
    assert [c.id for c in groups[CheckCategory.COOKIES]] == ["cookie-policy"]
    assert [c.id for c in groups[CheckCategory.OTHER]] == ["contact-info", "child-privacy"]
    assert groups[CheckCategory.TRACKERS] == []
    assert sum(len(g) for g in groups.values()) == len(checks)


def test_groups_preserve_evaluation_order():
    checks = evaluate(SCENARIO_A_POLICY)
    policy_ids = [c.id for c in group_checks_by_category(checks)[CheckCategory.POLICY]]
    assert policy_ids == [c.id for c in checks if c.category == CheckCategory.POLICY]


def test_category_titles():
    assert CATEGORY_TITLES[CheckCategory.POLICY] == "Privacy Policy"
    assert set(CATEGORY_TITLES) == set(CATEGORY_ORDER)


def test_failing_checks_excludes_passes():
    checks = evaluate(SCENARIO_A_POLICY)
    remaining = failing_checks(checks)
    assert "contact-info" not in [c.id for c in remaining]
    assert all(c.status != CheckStatus.PASS for c in remaining)
