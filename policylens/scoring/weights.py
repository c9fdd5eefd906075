# policylens/scoring/weights.py

from decimal import Decimal
from enum import Enum
from types import MappingProxyType

from policylens.models.check import CheckPriority, CheckStatus

"""
Centralized weight tables for both scoring policies.

This file must NOT import from any other scoring modules.
Other modules import the tables from here.
"""


class WeightingPolicy(str, Enum):
    PRIORITY = "priority"
    RISK = "risk"


# Share of a check's weight earned for each status
STATUS_MULTIPLIERS = MappingProxyType({
    CheckStatus.PASS: Decimal("1.0"),
    CheckStatus.WARN: Decimal("0.5"),
    CheckStatus.FAIL: Decimal("0.0"),
})

PRIORITY_WEIGHTS = MappingProxyType({
    CheckPriority.HIGH: 3,
    CheckPriority.MEDIUM: 2,
    CheckPriority.LOW: 1,
})

# Relative historical fine severity per check id, 1 (lowest) to 10
RISK_WEIGHTS = MappingProxyType({
    "policy-legal-basis": 10,
    "policy-data-transfers": 10,
    "child-privacy": 9,
    "cookie-policy": 8,
    "policy-processing-purpose": 7,
    "policy-user-rights": 7,
    "policy-data-recipients": 6,
    "policy-retention-period": 5,
    "policy-automated-decisions": 5,
    "policy-data-controller": 4,
    "policy-data-types": 4,
    "policy-right-to-complain": 3,
    "contact-info": 3,
    "policy-dpo-contact": 2,
    "policy-data-source": 2,
    "policy-date": 1,
    "policy-length": 1,
})

DEFAULT_RISK_WEIGHT = 1
