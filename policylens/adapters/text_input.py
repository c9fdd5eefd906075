from typing import Any

NO_INPUT_MESSAGE = "No input provided"


class PolicyInputError(ValueError):
    """
    Raised at the ingress boundary when there is no policy text to analyze.
    Never reaches the evaluator, so empty input is never scored.
    """

    def __init__(self, message: str = NO_INPUT_MESSAGE):
        super().__init__(message)


def normalize_policy_text(payload: Any) -> str:
    """
    Normalizes a raw payload into policy text for evaluation.

    This is the single ingress point: direct entry, uploads and API bodies
    all pass through here before the engine sees them.
    """
    if payload is None:
        raise PolicyInputError()

    if isinstance(payload, bytes):
        payload = payload.decode("utf-8", errors="replace")

    if not isinstance(payload, str):
        raise PolicyInputError(
            f"{NO_INPUT_MESSAGE}: expected text, got {type(payload).__name__}"
        )

    text = payload.strip()
    if not text:
        raise PolicyInputError()

    return text
