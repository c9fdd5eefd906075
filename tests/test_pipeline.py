from datetime import datetime, timezone

import pytest

from fixtures.sample_policies import COMPLETE_POLICY, NO_LEGAL_BASIS_POLICY, SCENARIO_A_POLICY
from policylens.adapters.text_input import PolicyInputError
from policylens.audit.hash_utils import compute_report_hash
from policylens.orchestrator.pipeline import analyze_policy
from policylens.rules.catalog import CATALOG_VERSION, check_ids

FIXED_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_complete_policy_report():
    report = analyze_policy(COMPLETE_POLICY, "priority")

    assert report.report_type == "policy"
    assert report.score == 100
    assert report.score_band == "good"
    assert report.financial_risk.violations == ()
    assert tuple(c.id for c in report.checks) == check_ids()
    assert report.catalog_version == CATALOG_VERSION


def test_risk_policy_is_selectable():
    report = analyze_policy(NO_LEGAL_BASIS_POLICY, "risk")
    assert report.weighting_policy == "risk"
    assert report.score == 89
    assert report.financial_risk.min_exposure == 310


def test_empty_input_never_reaches_the_engine():
    for payload in ("", "   \n", None):
        with pytest.raises(PolicyInputError):
            analyze_policy(payload)


def test_unknown_policy_fails_loudly():
    with pytest.raises(ValueError, match="Unknown weighting policy"):
        analyze_policy(SCENARIO_A_POLICY, "linear")


def test_default_policy_comes_from_environment(monkeypatch):
    monkeypatch.setenv("POLICYLENS_WEIGHTING_POLICY", "risk")
    assert analyze_policy(SCENARIO_A_POLICY).weighting_policy == "risk"

    monkeypatch.setenv("POLICYLENS_WEIGHTING_POLICY", "bogus")
    with pytest.raises(ValueError):
        analyze_policy(SCENARIO_A_POLICY)


def test_default_policy_is_priority(monkeypatch):
    monkeypatch.delenv("POLICYLENS_WEIGHTING_POLICY", raising=False)
    report = analyze_policy(SCENARIO_A_POLICY)
    assert report.weighting_policy == "priority"
    assert report.score == 19
    assert report.score_band == "poor"


def test_pipeline_is_idempotent():
    first = analyze_policy(SCENARIO_A_POLICY, now=FIXED_TIME)
    second = analyze_policy(SCENARIO_A_POLICY, now=FIXED_TIME)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_report_hash_ignores_timestamp():
    first = analyze_policy(SCENARIO_A_POLICY).to_dict()
    second = analyze_policy(SCENARIO_A_POLICY, now=FIXED_TIME).to_dict()

    assert first["timestamp"] != second["timestamp"]
    assert compute_report_hash(first) == compute_report_hash(second)


def test_report_hash_changes_with_content():
    a = analyze_policy(SCENARIO_A_POLICY, now=FIXED_TIME).to_dict()
    b = analyze_policy(COMPLETE_POLICY, now=FIXED_TIME).to_dict()
    assert compute_report_hash(a) != compute_report_hash(b)


def test_unregistered_engine_version_is_rejected(monkeypatch):
    monkeypatch.setenv("ENGINE_VERSION", "PolicyLens-9.9.9")
    with pytest.raises(ValueError, match="Unregistered engine version"):
        analyze_policy(SCENARIO_A_POLICY)
