import logging
from typing import List, Sequence

from policylens.models.check import Check, CheckStatus
from policylens.models.financial_risk import FinancialRisk, Violation
from policylens.risk.fines import FINE_EXPOSURE, WARN_EXPOSURE_FACTOR, FineExposure
from policylens.rules.citations import GDPR_FALLBACK_LABEL
from policylens.scoring.utils import round_half_up

logger = logging.getLogger("policylens.risk")


def build_violation(check: Check, exposure: FineExposure) -> Violation:
    """
    Convert a non-passing check into a Violation.
    Warn scales each bound independently; fail keeps them unchanged.
    """
    status = CheckStatus(check.status)

    if status == CheckStatus.FAIL:
        min_fine = exposure.min_fine
        max_fine = exposure.max_fine
    elif status == CheckStatus.WARN:
        min_fine = round_half_up(exposure.min_fine * WARN_EXPOSURE_FACTOR)
        max_fine = round_half_up(exposure.max_fine * WARN_EXPOSURE_FACTOR)
    else:
        raise ValueError(f"Passing check cannot produce a violation: {check.id}")

    citation_label = (
        check.citation.article_label
        if check.citation is not None
        else GDPR_FALLBACK_LABEL
    )

    return Violation(
        check_id=check.id,
        name=exposure.name,
        min_fine=min_fine,
        max_fine=max_fine,
        citation_label=citation_label,
    )


def estimate_risk(checks: Sequence[Check]) -> FinancialRisk:
    """
    Estimate fine exposure for unmet requirements.

    Only checks listed in the fine exposure table contribute, and only
    when their status is fail or warn.
    """
    violations: List[Violation] = []
    min_exposure = 0
    max_exposure = 0

    for check in checks:
        exposure = FINE_EXPOSURE.get(check.id)
        if exposure is None:
            continue
        if CheckStatus(check.status) == CheckStatus.PASS:
            continue

        violation = build_violation(check, exposure)
        violations.append(violation)
        min_exposure += violation.min_fine
        max_exposure += violation.max_fine

    average_exposure = round_half_up((min_exposure + max_exposure) / 2)

    logger.debug(
        "Estimated exposure %d-%dM across %d violations",
        min_exposure,
        max_exposure,
        len(violations),
    )

    return FinancialRisk(
        violations=tuple(violations),
        min_exposure=min_exposure,
        max_exposure=max_exposure,
        average_exposure=average_exposure,
    )
