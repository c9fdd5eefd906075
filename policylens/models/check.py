from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class CheckStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"


class CheckPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CheckCategory(str, Enum):
    """
    Report grouping tag. Assigned by the catalog, never derived from the id.
    """
    COOKIES = "cookies"
    TRACKERS = "trackers"
    CONSENT = "consent"
    SECURITY = "security"
    POLICY = "policy"
    OTHER = "other"


@dataclass(frozen=True)
class Citation:
    article_label: str
    reference_url: str
    explanation: str

    def to_dict(self) -> dict:
        return {
            "article_label": self.article_label,
            "reference_url": self.reference_url,
            "explanation": self.explanation,
        }


@dataclass(frozen=True)
class Check:
    """
    One verdict against one disclosure requirement.
    Built fresh for every evaluation and owned by the caller.
    """
    id: str
    title: str
    status: CheckStatus
    priority: CheckPriority
    description: str
    fix: Optional[str]
    category: CheckCategory = CheckCategory.OTHER
    details: Tuple[str, ...] = ()
    citation: Optional[Citation] = None

    def to_dict(self) -> dict:
        payload = {
            "id": self.id,
            "title": self.title,
            "status": self.status.value,
            "priority": self.priority.value,
            "category": self.category.value,
            "description": self.description,
            "fix": self.fix,
        }
        if self.details:
            payload["details"] = list(self.details)
        # Absent citation is omitted, not serialized as null
        if self.citation is not None:
            payload["citation"] = self.citation.to_dict()
        return payload
