from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True)
class FineExposure:
    name: str
    min_fine: int   # EUR millions
    max_fine: int   # EUR millions


# Ranges follow published GDPR enforcement actions for the same failure
# (e.g. legal basis: LinkedIn 2024 EUR 310M, Meta 2023 EUR 1.2B).
FINE_EXPOSURE = MappingProxyType({
    "policy-data-controller": FineExposure("Missing Controller Identity", 1, 50),
    "policy-processing-purpose": FineExposure("Undisclosed Processing Purposes", 35, 225),
    "policy-legal-basis": FineExposure("Missing Legal Basis for Processing", 310, 1200),
    "policy-data-recipients": FineExposure("Undisclosed Data Sharing", 8, 60),
    "policy-data-transfers": FineExposure("Unlawful International Transfers", 290, 1200),
    "policy-retention-period": FineExposure("Missing Retention Periods", 14, 35),
    "policy-user-rights": FineExposure("Missing Data Subject Rights Information", 10, 225),
    "policy-automated-decisions": FineExposure("Undisclosed Automated Decision-Making", 5, 20),
    "cookie-policy": FineExposure("Missing Cookie Disclosure", 35, 150),
    "child-privacy": FineExposure("Missing Child Privacy Protections", 345, 405),
})

# A warning is a partial disclosure; it carries this share of each bound
WARN_EXPOSURE_FACTOR = Decimal("0.3")
