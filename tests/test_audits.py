from __future__ import annotations

from conftest import make_report
from lighthouse_insights.analyzers.audits import audits_by_category, failing_audits, flatten_audits


def test_flatten_audits_is_complete(sample_audits):
    records = flatten_audits(make_report(sample_audits))

    assert list(records) == list(sample_audits)
    lcp = records["largest-contentful-paint"]
    assert lcp.id == "largest-contentful-paint"
    assert lcp.numeric_value == 2500
    assert lcp.category == "performance"
    assert records["network-requests"].details["items"][1]["statusCode"] == 404


def test_flatten_audits_without_table():
    assert flatten_audits(make_report()) == {}


def test_audits_by_category(sample_audits):
    report = make_report(sample_audits)
    assert [r.id for r in audits_by_category(report, "accessibility")] == ["color-contrast", "document-title"]
    assert audits_by_category(report, "pwa") == []


def test_failing_audits_thresholds(sample_audits):
    report = make_report(sample_audits)

    # 0.9 passes for performance, null scores never fail
    assert [r.id for r in failing_audits(report, "performance")] == [
        "largest-contentful-paint",
        "cumulative-layout-shift",
        "unused-javascript",
    ]
    assert [r.id for r in failing_audits(report, "accessibility")] == ["color-contrast"]
