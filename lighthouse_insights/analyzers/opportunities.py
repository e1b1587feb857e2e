"""
Opportunity ranker — audits with quantified time or byte savings.

Time and bytes have no common unit. They are folded into one ranking score
with bytes scaled down by BYTES_PER_MS_EQUIVALENT. Changing the constant
reorders the ranking.
"""

from ..models import OptimizationOpportunity, Priority, RawReport
from ._values import as_number
from .classifier import classify


BYTES_PER_MS_EQUIVALENT = 1000

# Headline performance opportunities, reported with high priority
HIGH_PRIORITY_AUDITS = frozenset({
    "render-blocking-resources",
    "unused-javascript",
    "unminified-javascript",
    "unused-css-rules",
    "modern-image-formats",
    "uses-optimized-images",
    "offscreen-images",
    "uses-responsive-images",
    "efficient-animated-content",
    "duplicated-javascript",
    "legacy-javascript",
})


def savings_weight(savings_ms: float, savings_bytes: float) -> float:
    return savings_ms + savings_bytes / BYTES_PER_MS_EQUIVALENT


def _priority(audit_id: str) -> Priority:
    return "high" if audit_id in HIGH_PRIORITY_AUDITS else "medium"


def rank_opportunities(report: RawReport) -> list[OptimizationOpportunity] | None:
    """All audits with positive savings, largest combined saving first.

    Ties keep report order. None when the report has no audits.
    """
    if report.audits is None:
        return None

    opportunities = []
    for audit_id, audit in report.audits.items():
        details = audit.details or {}
        savings_ms = as_number(details.get("overallSavingsMs"))
        savings_bytes = as_number(details.get("overallSavingsBytes"))
        if savings_ms <= 0 and savings_bytes <= 0:
            continue
        opportunities.append(OptimizationOpportunity(
            audit_id=audit_id,
            title=audit.title,
            score=audit.score,
            savings_ms=savings_ms,
            savings_bytes=savings_bytes,
            display_value=audit.display_value,
            description=audit.description,
            category=classify(audit_id),
            priority=_priority(audit_id),
        ))

    # stable sort: ties keep discovery order
    return sorted(opportunities, key=lambda o: -savings_weight(o.savings_ms, o.savings_bytes))
