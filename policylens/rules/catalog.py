# policylens/rules/catalog.py

"""
Static catalog of GDPR privacy policy disclosure requirements.

Built once at import, read-only afterwards. Order is part of the output
contract: checks are emitted in exactly the order listed here.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Optional, Tuple

from policylens.models.check import CheckCategory, CheckPriority, Citation
from policylens.rules.citations import CITATIONS

CATALOG_VERSION = "GDPR-ART13-14-2024.1"

KEYWORD_CHECK_PREFIX = "policy-"

HIGH_PRIORITY_RULE_IDS = frozenset({
    "data-controller",
    "processing-purpose",
    "user-rights",
})

MIN_KEYWORDS_PER_RULE = 3
MAX_KEYWORDS_PER_RULE = 6


@dataclass(frozen=True)
class Rule:
    """Keyword-triggered disclosure requirement."""

    id: str
    keywords: Tuple[str, ...]
    title: str
    description: str
    category: CheckCategory = CheckCategory.POLICY

    @property
    def check_id(self) -> str:
        return f"{KEYWORD_CHECK_PREFIX}{self.id}"

    @property
    def is_high_priority(self) -> bool:
        return self.id in HIGH_PRIORITY_RULE_IDS

    @property
    def priority(self) -> CheckPriority:
        return CheckPriority.HIGH if self.is_high_priority else CheckPriority.MEDIUM

    @property
    def citation(self) -> Optional[Citation]:
        return CITATIONS.get(self.check_id)

    @property
    def keyword_set(self) -> FrozenSet[str]:
        return frozenset(self.keywords)

    def matches(self, lowered_text: str) -> bool:
        """Caller lowercases once; keywords are stored lowercase."""
        return any(keyword in lowered_text for keyword in self.keywords)


@dataclass(frozen=True)
class HeuristicCheck:
    """
    Parameters for a non-keyword check. Detection lives in
    policylens.rules.heuristics; this record only carries the wording.
    """

    id: str
    title: str
    priority: CheckPriority
    category: CheckCategory
    pass_description: str
    miss_description: str
    fix: str
    phrases: Tuple[str, ...] = ()
    thresholds: Tuple[int, ...] = field(default=())

    @property
    def citation(self) -> Optional[Citation]:
        return CITATIONS.get(self.id)


KEYWORD_RULES: Tuple[Rule, ...] = (
    Rule(
        id="data-controller",
        keywords=("data controller", "controller", "company name", "organization"),
        title="Data Controller Identity",
        description="Identity and contact details of data controller",
    ),
    Rule(
        id="dpo-contact",
        keywords=("data protection officer", "dpo", "privacy officer"),
        title="Data Protection Officer",
        description="Contact details of DPO (if applicable)",
    ),
    Rule(
        id="processing-purpose",
        keywords=("purpose", "why we collect", "use of data", "processing"),
        title="Processing Purpose",
        description="Purposes of data processing",
    ),
    Rule(
        id="legal-basis",
        keywords=("legal basis", "lawful basis", "legitimate interest", "consent"),
        title="Legal Basis",
        description="Legal basis for processing",
    ),
    Rule(
        id="data-types",
        keywords=("personal data", "information collected", "data we collect", "categories of data"),
        title="Data Types Collected",
        description="Types of personal data collected",
    ),
    Rule(
        id="data-recipients",
        keywords=("third part", "share", "disclose", "recipient"),
        title="Data Recipients",
        description="Recipients or categories of recipients",
    ),
    Rule(
        id="data-transfers",
        keywords=("international transfer", "third country", "outside eu", "cross-border"),
        title="International Transfers",
        description="Information about international data transfers",
    ),
    Rule(
        id="retention-period",
        keywords=("retention", "how long", "storage period", "keep your data"),
        title="Retention Period",
        description="Data retention periods",
    ),
    Rule(
        id="user-rights",
        keywords=("your rights", "right to access", "right to erasure", "right to object", "data subject rights"),
        title="User Rights",
        description="Information about data subject rights",
    ),
    Rule(
        id="right-to-complain",
        keywords=("supervisory authority", "complaint", "regulator", "data protection authority"),
        title="Right to Complain",
        description="Right to lodge complaint with supervisory authority",
    ),
    Rule(
        id="automated-decisions",
        keywords=("automated decision", "profiling", "algorithmic"),
        title="Automated Decision-Making",
        description="Information about automated decision-making and profiling",
    ),
    Rule(
        id="data-source",
        keywords=("source", "where we obtained", "collected from"),
        title="Data Source",
        description="Source of personal data (if not collected from user)",
    ),
)


# Word count above COMPLETE passes, above SHORT warns, otherwise fails
LENGTH_COMPLETE_WORDS = 500
LENGTH_SHORT_WORDS = 200

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

HEURISTIC_CHECKS: Tuple[HeuristicCheck, ...] = (
    HeuristicCheck(
        id="policy-length",
        title="Policy Completeness",
        priority=CheckPriority.MEDIUM,
        category=CheckCategory.POLICY,
        pass_description="Privacy policy is {word_count} words",
        miss_description="Privacy policy is {word_count} words",
        fix="Privacy policy seems short. Ensure all GDPR requirements are thoroughly addressed.",
        thresholds=(LENGTH_COMPLETE_WORDS, LENGTH_SHORT_WORDS),
    ),
    HeuristicCheck(
        id="cookie-policy",
        title="Cookie Policy",
        priority=CheckPriority.HIGH,
        category=CheckCategory.COOKIES,
        pass_description="Cookie information found",
        miss_description="No cookie information found",
        fix="Include detailed information about cookie usage, types of cookies, and user choices.",
        phrases=("cookie", "cookies"),
    ),
    HeuristicCheck(
        id="policy-date",
        title="Last Updated Date",
        priority=CheckPriority.MEDIUM,
        category=CheckCategory.POLICY,
        pass_description="Policy includes date information",
        miss_description="No date found in policy",
        fix='Include "Last Updated" date in your privacy policy and keep it current.',
        phrases=MONTH_NAMES,
    ),
    HeuristicCheck(
        id="contact-info",
        title="Contact Information",
        priority=CheckPriority.HIGH,
        category=CheckCategory.OTHER,
        pass_description="Contact information found",
        miss_description="No contact information found",
        fix="Provide clear contact information for privacy-related inquiries.",
        phrases=("email", "contact", "phone", "address", "@"),
    ),
    HeuristicCheck(
        id="child-privacy",
        title="Child Privacy Protection",
        priority=CheckPriority.MEDIUM,
        category=CheckCategory.OTHER,
        pass_description="Child privacy provisions found",
        miss_description="No child privacy provisions found",
        fix="If your service may be used by children, include specific provisions for child privacy protection.",
        phrases=("child", "under 16", "under 13", "minor"),
    ),
)

_RULES_BY_ID = MappingProxyType({rule.id: rule for rule in KEYWORD_RULES})
_HEURISTICS_BY_ID = MappingProxyType({h.id: h for h in HEURISTIC_CHECKS})


def get_rule(rule_id: str) -> Rule:
    """Look up a keyword rule by its bare id ("legal-basis") or check id ("policy-legal-basis")."""
    if rule_id.startswith(KEYWORD_CHECK_PREFIX) and rule_id[len(KEYWORD_CHECK_PREFIX):] in _RULES_BY_ID:
        rule_id = rule_id[len(KEYWORD_CHECK_PREFIX):]
    if rule_id not in _RULES_BY_ID:
        raise KeyError(f"Unknown rule: {rule_id}")
    return _RULES_BY_ID[rule_id]


def get_heuristic(check_id: str) -> HeuristicCheck:
    if check_id not in _HEURISTICS_BY_ID:
        raise KeyError(f"Unknown heuristic check: {check_id}")
    return _HEURISTICS_BY_ID[check_id]


def check_ids() -> Tuple[str, ...]:
    """Every check id the evaluator emits, in output order."""
    return tuple(rule.check_id for rule in KEYWORD_RULES) + tuple(h.id for h in HEURISTIC_CHECKS)


# --- Validation (Prevent Drift) ---
def _validate_catalog():
    ids = check_ids()
    if len(ids) != len(set(ids)):
        raise ValueError("CRITICAL: Duplicate check ids in rule catalog")

    for rule in KEYWORD_RULES:
        if not MIN_KEYWORDS_PER_RULE <= len(rule.keywords) <= MAX_KEYWORDS_PER_RULE:
            raise ValueError(
                f"CRITICAL: Rule {rule.id} has {len(rule.keywords)} keywords, "
                f"expected {MIN_KEYWORDS_PER_RULE}-{MAX_KEYWORDS_PER_RULE}"
            )
        if any(keyword != keyword.lower() for keyword in rule.keywords):
            raise ValueError(f"CRITICAL: Rule {rule.id} keywords must be lowercase")

    unknown_priority = HIGH_PRIORITY_RULE_IDS - set(_RULES_BY_ID)
    if unknown_priority:
        raise ValueError(f"CRITICAL: High priority ids not in catalog: {sorted(unknown_priority)}")


_validate_catalog()
