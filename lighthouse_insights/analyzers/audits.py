"""Flat audit listing, per-category filtering and failing-audit selection."""

from ..models import AuditRecord, CategoryTag, RawReport
from .classifier import classify


# Performance audits pass at 0.9; every other category needs a perfect score
PASS_THRESHOLDS = {"performance": 0.9}
DEFAULT_PASS_THRESHOLD = 1.0


def _record(audit_id: str, audit) -> AuditRecord:
    return AuditRecord(
        id=audit_id,
        title=audit.title,
        description=audit.description,
        score=audit.score,
        numeric_value=audit.numeric_value,
        display_value=audit.display_value,
        category=classify(audit_id),
        details=audit.details,
    )


def flatten_audits(report: RawReport) -> dict[str, AuditRecord]:
    if not report.audits:
        return {}
    return {audit_id: _record(audit_id, audit) for audit_id, audit in report.audits.items()}


def audits_by_category(report: RawReport, category: CategoryTag) -> list[AuditRecord]:
    """Audits classified into `category`, in report order."""
    return [record for record in flatten_audits(report).values() if record.category == category]


def failing_audits(report: RawReport, category: CategoryTag) -> list[AuditRecord]:
    """Audits of `category` scoring below its pass threshold.

    A null score marks an informative or not-applicable audit, and those are
    left out. Tools that compare `null < threshold` with null coerced to 0
    would list them as failing.
    """
    threshold = PASS_THRESHOLDS.get(category, DEFAULT_PASS_THRESHOLD)
    return [
        record for record in audits_by_category(report, category)
        if record.score is not None and record.score < threshold
    ]
