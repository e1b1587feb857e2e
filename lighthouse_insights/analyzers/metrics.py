"""Core Web Vitals extractor — LCP, FCP, CLS and TBT with a pass/warn/fail status."""

from ..models import Metric, MetricStatus, RawReport
from ._values import as_number, number_or_none


# key -> (audit id, label, unit); dict order is the output order
CORE_METRICS = {
    "LCP": ("largest-contentful-paint", "Largest Contentful Paint (LCP)", "ms"),
    "FCP": ("first-contentful-paint", "First Contentful Paint (FCP)", "ms"),
    "CLS": ("cumulative-layout-shift", "Cumulative Layout Shift (CLS)", "score"),
    "TBT": ("total-blocking-time", "Total Blocking Time (TBT)", "ms"),
}


def metric_status(score) -> MetricStatus:
    """1 is good, 0 is poor, anything strictly between needs improvement."""
    score = number_or_none(score)
    if score is None:
        return "unknown"
    if score == 1:
        return "good"
    if score == 0:
        return "poor"
    if 0 < score < 1:
        return "needs-improvement"
    return "unknown"


def extract_core_metrics(report: RawReport) -> dict[str, Metric] | None:
    """Return the four core metrics, or None when the report has no audits.

    A missing audit yields value 0, score 0 and status `unknown`, so a partial
    report still produces the full set.
    """
    if report.audits is None:
        return None

    metrics = {}
    for key, (audit_id, label, unit) in CORE_METRICS.items():
        audit = report.audits.get(audit_id)
        raw_score = audit.score if audit else None
        metrics[key] = Metric(
            name=label,
            audit_id=audit_id,
            value=as_number(audit.numeric_value if audit else None),
            unit=unit,
            score=as_number(raw_score),
            status=metric_status(raw_score),
        )
    return metrics
