import pytest

from fixtures.sample_policies import COMPLETE_POLICY, NO_LEGAL_BASIS_POLICY, SCENARIO_A_POLICY
from policylens.models.check import Check, CheckPriority, CheckStatus
from policylens.orchestrator.evaluator import evaluate
from policylens.risk.estimator import build_violation, estimate_risk
from policylens.risk.fines import FINE_EXPOSURE


def make_check(check_id, status, citation=None):
    return Check(
        id=check_id,
        title="Test",
        status=status,
        priority=CheckPriority.HIGH,
        description="Test check",
        fix="Fix it",
        citation=citation,
    )


def test_missing_legal_basis_contributes_full_fine():
    risk = estimate_risk(evaluate(NO_LEGAL_BASIS_POLICY))

    assert len(risk.violations) == 1
    violation = risk.violations[0]
    assert violation.check_id == "policy-legal-basis"
    assert violation.min_fine == 310
    assert violation.max_fine == 1200
    assert violation.citation_label == "GDPR Article 6(1)"
    assert risk.min_exposure == 310
    assert risk.max_exposure == 1200
    assert risk.average_exposure == 755


def test_compliant_policy_has_no_exposure():
    risk = estimate_risk(evaluate(COMPLETE_POLICY))

    assert risk.violations == ()
    assert risk.min_exposure == 0
    assert risk.max_exposure == 0
    assert risk.average_exposure == 0
    assert risk.has_exposure is False


def test_scenario_a_exposure_totals():
    risk = estimate_risk(evaluate(SCENARIO_A_POLICY))

    assert [v.check_id for v in risk.violations] == [
        "policy-data-controller",
        "policy-processing-purpose",
        "policy-legal-basis",
        "policy-data-recipients",
        "policy-data-transfers",
        "policy-retention-period",
        "policy-user-rights",
        "policy-automated-decisions",
        "cookie-policy",
        "child-privacy",
    ]
    assert risk.min_exposure == 788
    assert risk.max_exposure == 3182
    assert risk.average_exposure == 1985


def test_warn_scales_each_bound_and_rounds_half_up():
    cookie = build_violation(make_check("cookie-policy", CheckStatus.WARN), FINE_EXPOSURE["cookie-policy"])
    # 35 * 0.3 = 10.5 -> 11, 150 * 0.3 = 45
    assert (cookie.min_fine, cookie.max_fine) == (11, 45)

    child = build_violation(make_check("child-privacy", CheckStatus.WARN), FINE_EXPOSURE["child-privacy"])
    # 345 * 0.3 = 103.5 -> 104, 405 * 0.3 = 121.5 -> 122
    assert (child.min_fine, child.max_fine) == (104, 122)


def test_pass_never_produces_a_violation():
    checks = [make_check(check_id, CheckStatus.PASS) for check_id in FINE_EXPOSURE]
    assert estimate_risk(checks).violations == ()

    with pytest.raises(ValueError):
        build_violation(checks[0], FINE_EXPOSURE[checks[0].id])


def test_checks_outside_fine_table_are_ignored():
    checks = [
        make_check("contact-info", CheckStatus.FAIL),
        make_check("policy-date", CheckStatus.FAIL),
        make_check("policy-dpo-contact", CheckStatus.FAIL),
    ]
    risk = estimate_risk(checks)
    assert risk.violations == ()
    assert risk.has_exposure is False


def test_violations_only_come_from_table_entries_that_did_not_pass():
    checks = evaluate(SCENARIO_A_POLICY)
    statuses = {c.id: c.status for c in checks}

    for violation in estimate_risk(checks).violations:
        assert violation.check_id in FINE_EXPOSURE
        assert statuses[violation.check_id] in (CheckStatus.FAIL, CheckStatus.WARN)


def test_missing_citation_uses_generic_label():
    risk = estimate_risk([make_check("policy-data-transfers", CheckStatus.FAIL)])
    assert risk.violations[0].citation_label == "GDPR (EU) 2016/679"
    assert risk.violations[0].name == "Unlawful International Transfers"


def test_average_exposure_rounds_half_up():
    risk = estimate_risk([make_check("policy-data-controller", CheckStatus.FAIL)])
    # (1 + 50) / 2 = 25.5
    assert risk.average_exposure == 26


def test_estimate_risk_is_idempotent():
    checks = evaluate(SCENARIO_A_POLICY)
    assert estimate_risk(checks) == estimate_risk(checks)
    assert estimate_risk(checks).to_dict() == estimate_risk(evaluate(SCENARIO_A_POLICY)).to_dict()
