import json
import hashlib
from typing import Dict, Any

# Fields that change between otherwise identical runs
EXCLUDED_HASH_FIELDS = {
    "timestamp",
    "report_hash",
}


def compute_report_hash(report_payload: Dict[str, Any]) -> str:
    """
    Deterministically compute a SHA-256 hash over a serialized report,
    excluding volatile and self-referential fields.
    """
    canonical_payload = {
        k: report_payload[k]
        for k in sorted(report_payload.keys())
        if k not in EXCLUDED_HASH_FIELDS
    }

    serialized = json.dumps(
        canonical_payload,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()
