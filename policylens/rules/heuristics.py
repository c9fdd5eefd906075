import re

from policylens.models.check import CheckStatus
from policylens.rules.catalog import (
    LENGTH_COMPLETE_WORDS,
    LENGTH_SHORT_WORDS,
    MONTH_NAMES,
    get_heuristic,
)

_WHITESPACE = re.compile(r"\s+")

# 4-digit run, D/M/YY or D/M/YYYY, or a month name
DATE_PATTERN: re.Pattern = re.compile(
    r"\d{4}|\d{1,2}/\d{1,2}/\d{2,4}|" + "|".join(MONTH_NAMES),
    re.IGNORECASE,
)

CONTACT_PATTERN: re.Pattern = re.compile(
    "|".join(re.escape(p) for p in get_heuristic("contact-info").phrases),
    re.IGNORECASE,
)


def count_words(text: str) -> int:
    """
    Naive whitespace split. The empty string is a single empty token,
    so it counts as one word.
    """
    return len(_WHITESPACE.split(text))


def length_status(word_count: int) -> CheckStatus:
    if word_count > LENGTH_COMPLETE_WORDS:
        return CheckStatus.PASS
    if word_count > LENGTH_SHORT_WORDS:
        return CheckStatus.WARN
    return CheckStatus.FAIL


def _mentions_any(lowered_text: str, check_id: str) -> bool:
    return any(phrase in lowered_text for phrase in get_heuristic(check_id).phrases)


def mentions_cookies(lowered_text: str) -> bool:
    return _mentions_any(lowered_text, "cookie-policy")


def mentions_children(lowered_text: str) -> bool:
    return _mentions_any(lowered_text, "child-privacy")


def has_date(text: str) -> bool:
    return DATE_PATTERN.search(text) is not None


def has_contact(text: str) -> bool:
    return CONTACT_PATTERN.search(text) is not None
