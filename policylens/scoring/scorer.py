from decimal import Decimal
from typing import Callable, Dict, Sequence, Union

from policylens.models.check import Check, CheckPriority, CheckStatus
from policylens.scoring.utils import round_half_up
from policylens.scoring.weights import (
    DEFAULT_RISK_WEIGHT,
    PRIORITY_WEIGHTS,
    RISK_WEIGHTS,
    STATUS_MULTIPLIERS,
    WeightingPolicy,
)


def status_multiplier(status: Union[CheckStatus, str]) -> Decimal:
    """
    Share of the weight a check earns. Unknown statuses are a contract
    violation and must never be scored as fail.
    """
    try:
        return STATUS_MULTIPLIERS[CheckStatus(status)]
    except ValueError:
        raise ValueError(f"Unknown check status: {status!r}") from None


def priority_weight(check: Check) -> int:
    try:
        return PRIORITY_WEIGHTS[CheckPriority(check.priority)]
    except ValueError:
        raise ValueError(f"Unknown check priority: {check.priority!r}") from None


def risk_weight(check: Check) -> int:
    return RISK_WEIGHTS.get(check.id, DEFAULT_RISK_WEIGHT)


_WEIGHT_FUNCTIONS: Dict[WeightingPolicy, Callable[[Check], int]] = {
    WeightingPolicy.PRIORITY: priority_weight,
    WeightingPolicy.RISK: risk_weight,
}


def resolve_policy(policy: Union[WeightingPolicy, str]) -> WeightingPolicy:
    try:
        return WeightingPolicy(policy)
    except ValueError:
        raise ValueError(f"Unknown weighting policy: {policy!r}") from None


def _weighted_score(checks: Sequence[Check], weight_of: Callable[[Check], int]) -> int:
    if len(checks) == 0:
        return 0

    total_weight = 0
    earned_points = Decimal(0)

    for check in checks:
        weight = weight_of(check)
        total_weight += weight
        earned_points += weight * status_multiplier(check.status)

    return round_half_up(earned_points * 100 / total_weight)


def priority_weighted_score(checks: Sequence[Check]) -> int:
    """Weights: high 3, medium 2, low 1."""
    return _weighted_score(checks, priority_weight)


def risk_weighted_score(checks: Sequence[Check]) -> int:
    """Weights from historical fine severity per check id; unlisted ids weigh 1."""
    return _weighted_score(checks, risk_weight)


def calculate_score(
    checks: Sequence[Check],
    policy: Union[WeightingPolicy, str] = WeightingPolicy.PRIORITY,
) -> int:
    """
    Aggregate checks into a 0-100 compliance score.

    score = round(100 * earned / total), where pass earns the full weight,
    warn half of it and fail nothing. An empty list scores 0.
    """
    weight_of = _WEIGHT_FUNCTIONS[resolve_policy(policy)]
    return _weighted_score(checks, weight_of)
