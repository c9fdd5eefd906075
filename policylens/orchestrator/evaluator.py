import logging
from typing import List

from policylens.models.check import Check, CheckStatus
from policylens.rules.catalog import HEURISTIC_CHECKS, KEYWORD_RULES, HeuristicCheck, Rule
from policylens.rules import heuristics

logger = logging.getLogger("policylens.evaluator")


def _keyword_check(rule: Rule, lowered_text: str) -> Check:
    found = rule.matches(lowered_text)

    return Check(
        id=rule.check_id,
        title=rule.title,
        status=CheckStatus.PASS if found else CheckStatus.FAIL,
        priority=rule.priority,
        category=rule.category,
        description=(
            f"✓ {rule.description} mentioned"
            if found
            else f"✗ {rule.description} not found"
        ),
        fix=None if found else f"Add clear information about {rule.description.lower()} to your privacy policy.",
        citation=rule.citation,
    )


def _heuristic_check(
    heuristic: HeuristicCheck,
    status: CheckStatus,
    description: str,
    fix,
) -> Check:
    return Check(
        id=heuristic.id,
        title=heuristic.title,
        status=status,
        priority=heuristic.priority,
        category=heuristic.category,
        description=description,
        fix=fix,
        citation=heuristic.citation,
    )


def _length_check(heuristic: HeuristicCheck, text: str) -> Check:
    word_count = heuristics.count_words(text)
    status = heuristics.length_status(word_count)
    complete_words = heuristic.thresholds[0]

    return _heuristic_check(
        heuristic,
        status,
        heuristic.pass_description.format(word_count=word_count),
        heuristic.fix if word_count < complete_words else None,
    )


def _cookie_check(heuristic: HeuristicCheck, lowered_text: str) -> Check:
    found = heuristics.mentions_cookies(lowered_text)
    # Missing cookie info is a softer signal: warn, never fail
    return _heuristic_check(
        heuristic,
        CheckStatus.PASS if found else CheckStatus.WARN,
        heuristic.pass_description if found else heuristic.miss_description,
        None if found else heuristic.fix,
    )


def _date_check(heuristic: HeuristicCheck, text: str) -> Check:
    found = heuristics.has_date(text)
    return _heuristic_check(
        heuristic,
        CheckStatus.PASS if found else CheckStatus.FAIL,
        heuristic.pass_description if found else heuristic.miss_description,
        heuristic.fix,
    )


def _contact_check(heuristic: HeuristicCheck, text: str) -> Check:
    found = heuristics.has_contact(text)
    return _heuristic_check(
        heuristic,
        CheckStatus.PASS if found else CheckStatus.FAIL,
        heuristic.pass_description if found else heuristic.miss_description,
        heuristic.fix,
    )


def _child_privacy_check(heuristic: HeuristicCheck, lowered_text: str) -> Check:
    found = heuristics.mentions_children(lowered_text)
    return _heuristic_check(
        heuristic,
        CheckStatus.PASS if found else CheckStatus.WARN,
        heuristic.pass_description if found else heuristic.miss_description,
        heuristic.fix,
    )


def evaluate(text: str) -> List[Check]:
    """
    Evaluate privacy policy text against the full catalog.

    Returns keyword rule checks followed by heuristic checks, in catalog
    order. Total over every str, including the empty string.
    """
    if not isinstance(text, str):
        raise TypeError(f"Policy text must be str, got {type(text).__name__}")

    lowered = text.lower()

    checks: List[Check] = [_keyword_check(rule, lowered) for rule in KEYWORD_RULES]

    for heuristic in HEURISTIC_CHECKS:
        if heuristic.id == "policy-length":
            checks.append(_length_check(heuristic, text))
        elif heuristic.id == "cookie-policy":
            checks.append(_cookie_check(heuristic, lowered))
        elif heuristic.id == "policy-date":
            checks.append(_date_check(heuristic, text))
        elif heuristic.id == "contact-info":
            checks.append(_contact_check(heuristic, text))
        elif heuristic.id == "child-privacy":
            checks.append(_child_privacy_check(heuristic, lowered))
        else:
            raise ValueError(f"No detector registered for heuristic check: {heuristic.id}")

    logger.debug(
        "Evaluated %d checks (%d failing)",
        len(checks),
        sum(1 for c in checks if c.status == CheckStatus.FAIL),
    )
    return checks
