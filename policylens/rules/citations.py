# policylens/rules/citations.py

from types import MappingProxyType

from policylens.models.check import Citation

"""
Regulatory pointers attached to checks.

Keyed by the check id that carries them. Keyword rules point at the GDPR
Article 13/14 transparency obligations; heuristic checks get a synthesized
pointer to the closest article.
"""

GDPR_FALLBACK_LABEL = "GDPR (EU) 2016/679"

_GDPR_INFO = "https://gdpr-info.eu"


def _article(number: int) -> str:
    return f"{_GDPR_INFO}/art-{number}-gdpr/"


CITATIONS = MappingProxyType({
    "policy-data-controller": Citation(
        article_label="GDPR Article 13(1)(a)",
        reference_url=_article(13),
        explanation="The identity and contact details of the controller must be provided to the data subject.",
    ),
    "policy-dpo-contact": Citation(
        article_label="GDPR Article 13(1)(b)",
        reference_url=_article(13),
        explanation="Where a data protection officer is appointed, their contact details must be provided.",
    ),
    "policy-processing-purpose": Citation(
        article_label="GDPR Article 13(1)(c)",
        reference_url=_article(13),
        explanation="The purposes for which personal data are processed must be stated.",
    ),
    "policy-legal-basis": Citation(
        article_label="GDPR Article 6(1)",
        reference_url=_article(6),
        explanation="Processing is lawful only if at least one legal basis applies, and that basis must be disclosed.",
    ),
    "policy-data-types": Citation(
        article_label="GDPR Article 14(1)(d)",
        reference_url=_article(14),
        explanation="The categories of personal data concerned must be described.",
    ),
    "policy-data-recipients": Citation(
        article_label="GDPR Article 13(1)(e)",
        reference_url=_article(13),
        explanation="The recipients or categories of recipients of the personal data must be named.",
    ),
    "policy-data-transfers": Citation(
        article_label="GDPR Article 13(1)(f)",
        reference_url=_article(13),
        explanation="Transfers to a third country and the safeguards relied upon must be disclosed.",
    ),
    "policy-retention-period": Citation(
        article_label="GDPR Article 13(2)(a)",
        reference_url=_article(13),
        explanation="The storage period, or the criteria used to determine it, must be stated.",
    ),
    "policy-user-rights": Citation(
        article_label="GDPR Article 13(2)(b)",
        reference_url=_article(13),
        explanation="Data subjects must be told of their rights of access, rectification, erasure, restriction, objection and portability.",
    ),
    "policy-right-to-complain": Citation(
        article_label="GDPR Article 13(2)(d)",
        reference_url=_article(13),
        explanation="Data subjects must be told of their right to lodge a complaint with a supervisory authority.",
    ),
    "policy-automated-decisions": Citation(
        article_label="GDPR Article 13(2)(f)",
        reference_url=_article(13),
        explanation="The existence of automated decision-making, including profiling, and its logic must be disclosed.",
    ),
    "policy-data-source": Citation(
        article_label="GDPR Article 14(2)(f)",
        reference_url=_article(14),
        explanation="Where data was not obtained from the data subject, its source must be disclosed.",
    ),
    "policy-length": Citation(
        article_label="GDPR Article 12(1)",
        reference_url=_article(12),
        explanation="Information must be provided in a concise, transparent, intelligible and easily accessible form.",
    ),
    "cookie-policy": Citation(
        article_label="ePrivacy Directive Article 5(3)",
        reference_url=f"{_GDPR_INFO}/issues/cookies/",
        explanation="Storing or reading cookies on a user's device requires clear and comprehensive information and consent.",
    ),
    "policy-date": Citation(
        article_label="GDPR Article 12(1)",
        reference_url=_article(12),
        explanation="Transparency requires that users can tell whether the information provided is current.",
    ),
    "contact-info": Citation(
        article_label="GDPR Article 13(1)(a)",
        reference_url=_article(13),
        explanation="Data subjects must be able to reach the controller with privacy requests.",
    ),
    "child-privacy": Citation(
        article_label="GDPR Article 8",
        reference_url=_article(8),
        explanation="Consent for information society services offered to children requires parental authorisation below the age of 16.",
    ),
})
