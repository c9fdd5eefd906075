from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from policylens.models.check import Check
from policylens.models.financial_risk import FinancialRisk


@dataclass(frozen=True)
class PolicyReport:
    """
    Complete result of one privacy policy analysis.
    Read-only envelope handed to renderers and exporters.
    """
    timestamp: datetime
    weighting_policy: str
    score: int
    score_band: str
    checks: Tuple[Check, ...]
    financial_risk: FinancialRisk
    engine_version: str
    catalog_version: str
    report_type: str = "policy"

    def to_dict(self) -> dict:
        return {
            "report_type": self.report_type,
            "timestamp": self.timestamp.isoformat(),
            "weighting_policy": self.weighting_policy,
            "score": self.score,
            "score_band": self.score_band,
            "checks": [c.to_dict() for c in self.checks],
            "financial_risk": self.financial_risk.to_dict(),
            "engine_version": self.engine_version,
            "catalog_version": self.catalog_version,
        }
