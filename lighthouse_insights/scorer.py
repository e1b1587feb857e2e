"""
Category scores — Lighthouse 0..1 category scores as 0..100 with a rating.

Rating bands:
  excellent >= 90, good >= 75, needs-work >= 50, poor below.
"""

import math
from urllib.parse import urlparse

from .analyzers.audits import failing_audits
from .models import CategoryScore, Rating, RawReport, ReportMetadata


RATING_BANDS: list[tuple[int, Rating]] = [
    (90, "excellent"),
    (75, "good"),
    (50, "needs-work"),
]


def percent(score: float | None) -> int | None:
    """Scale a 0..1 score to 0..100, rounding halves up (0.885 -> 89)."""
    if score is None:
        return None
    scaled = score * 100
    if not math.isfinite(scaled):
        return None
    return math.floor(scaled + 0.5)


def score_rating(score: int | None) -> Rating | None:
    if score is None:
        return None
    for floor, rating in RATING_BANDS:
        if score >= floor:
            return rating
    return "poor"


def category_scores(report: RawReport) -> dict[str, CategoryScore]:
    """One entry per category present in the report, in report order."""
    if not report.categories:
        return {}

    scores = {}
    for key, category in report.categories.items():
        score = percent(category.score)
        scores[key] = CategoryScore(
            title=category.title,
            score=score,
            raw_score=category.score,
            description=category.description,
            rating=score_rating(score),
            failing_audits=[record.id for record in failing_audits(report, key)],
        )
    return scores


def build_metadata(report: RawReport) -> ReportMetadata:
    url = report.final_displayed_url
    domain = None
    if url:
        domain = urlparse(url).netloc.removeprefix("www.") or None

    return ReportMetadata(
        url=url,
        domain=domain,
        fetch_time=report.fetch_time,
        lighthouse_version=report.lighthouse_version,
    )
