from typing import Dict, List, Sequence

from policylens.models.check import Check, CheckCategory, CheckStatus

# Display order of report sections
CATEGORY_ORDER = (
    CheckCategory.COOKIES,
    CheckCategory.TRACKERS,
    CheckCategory.CONSENT,
    CheckCategory.SECURITY,
    CheckCategory.POLICY,
    CheckCategory.OTHER,
)

CATEGORY_TITLES = {
    CheckCategory.COOKIES: "Cookies",
    CheckCategory.TRACKERS: "Trackers",
    CheckCategory.CONSENT: "Consent",
    CheckCategory.SECURITY: "Security",
    CheckCategory.POLICY: "Privacy Policy",
    CheckCategory.OTHER: "Other",
}


def group_checks_by_category(checks: Sequence[Check]) -> Dict[CheckCategory, List[Check]]:
    """
    Group checks by their explicit category tag.

    Every category is present (possibly empty) in CATEGORY_ORDER, and
    checks keep their evaluation order within a group.
    """
    groups: Dict[CheckCategory, List[Check]] = {category: [] for category in CATEGORY_ORDER}

    for check in checks:
        groups[CheckCategory(check.category)].append(check)

    return groups


def failing_checks(checks: Sequence[Check]) -> List[Check]:
    """Checks that still need action, in evaluation order."""
    return [c for c in checks if c.status != CheckStatus.PASS]
