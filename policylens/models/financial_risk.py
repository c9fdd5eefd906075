from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Violation:
    """
    Estimated fine range attributed to one unmet requirement.
    Amounts are whole EUR millions.
    """
    check_id: str
    name: str
    min_fine: int
    max_fine: int
    citation_label: str

    def to_dict(self) -> dict:
        return {
            "check_id": self.check_id,
            "name": self.name,
            "min_fine": self.min_fine,
            "max_fine": self.max_fine,
            "citation_label": self.citation_label,
        }


@dataclass(frozen=True)
class FinancialRisk:
    violations: Tuple[Violation, ...]
    min_exposure: int
    max_exposure: int
    average_exposure: int

    @property
    def has_exposure(self) -> bool:
        # Empty violations is the only "no risk" signal; never None
        return len(self.violations) > 0

    def to_dict(self) -> dict:
        return {
            "violations": [v.to_dict() for v in self.violations],
            "min_exposure": self.min_exposure,
            "max_exposure": self.max_exposure,
            "average_exposure": self.average_exposure,
        }
