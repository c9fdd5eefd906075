# Score bands for report colouring.
# Externalized here so they can be tuned without changing scoring logic.

from enum import Enum

GOOD_SCORE_MIN = 80
MEDIUM_SCORE_MIN = 60

# Interpretation:
# 80 - 100 -> GOOD
# 60 - 79  -> MEDIUM
# 0  - 59  -> POOR


class ScoreBand(str, Enum):
    GOOD = "good"
    MEDIUM = "medium"
    POOR = "poor"


def classify_score(score: int) -> ScoreBand:
    if not 0 <= score <= 100:
        raise ValueError(f"Score out of range: {score}")

    if score >= GOOD_SCORE_MIN:
        return ScoreBand.GOOD
    if score >= MEDIUM_SCORE_MIN:
        return ScoreBand.MEDIUM
    return ScoreBand.POOR
