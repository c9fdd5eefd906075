import logging
import os
from datetime import datetime, timezone
from typing import Any, Optional, Union

from policylens.adapters.text_input import normalize_policy_text
from policylens.audit.version_registry import current_engine_version
from policylens.models.report import PolicyReport
from policylens.orchestrator.evaluator import evaluate
from policylens.risk.estimator import estimate_risk
from policylens.rules.catalog import CATALOG_VERSION
from policylens.scoring.scorer import calculate_score, resolve_policy
from policylens.scoring.thresholds import classify_score
from policylens.scoring.weights import WeightingPolicy

logger = logging.getLogger("policylens.pipeline")

DEFAULT_WEIGHTING_POLICY = WeightingPolicy.PRIORITY


def configured_weighting_policy() -> WeightingPolicy:
    """POLICYLENS_WEIGHTING_POLICY selects the default; unknown values fail loudly."""
    return resolve_policy(
        os.getenv("POLICYLENS_WEIGHTING_POLICY", DEFAULT_WEIGHTING_POLICY.value)
    )


def analyze_policy(
    payload: Any,
    policy: Optional[Union[WeightingPolicy, str]] = None,
    *,
    now: Optional[datetime] = None,
) -> PolicyReport:
    """
    Run the full pipeline: ingress -> evaluate -> score -> estimate risk.

    Raises PolicyInputError when there is no text to analyze.
    """
    text = normalize_policy_text(payload)
    weighting = resolve_policy(policy) if policy is not None else configured_weighting_policy()

    checks = evaluate(text)
    score = calculate_score(checks, weighting)
    financial_risk = estimate_risk(checks)

    logger.info(
        "Policy analyzed: policy=%s score=%d checks=%d violations=%d exposure=%d-%dM",
        weighting.value,
        score,
        len(checks),
        len(financial_risk.violations),
        financial_risk.min_exposure,
        financial_risk.max_exposure,
    )

    return PolicyReport(
        timestamp=now or datetime.now(timezone.utc),
        weighting_policy=weighting.value,
        score=score,
        score_band=classify_score(score).value,
        checks=tuple(checks),
        financial_risk=financial_risk,
        engine_version=current_engine_version(),
        catalog_version=CATALOG_VERSION,
    )
