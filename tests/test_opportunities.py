from __future__ import annotations

from conftest import make_report
from lighthouse_insights.analyzers.opportunities import (
    BYTES_PER_MS_EQUIVALENT,
    rank_opportunities,
    savings_weight,
)


def _opportunity(ms, bytes_, title=None):
    return {"title": title, "score": 0.5,
            "details": {"overallSavingsMs": ms, "overallSavingsBytes": bytes_}}


def test_savings_weight_scales_bytes():
    assert BYTES_PER_MS_EQUIVALENT == 1000
    assert savings_weight(100, 0) == 100
    assert savings_weight(0, 200_000) == 200
    assert savings_weight(50, 50_000) == 100


def test_no_audit_table_returns_none():
    assert rank_opportunities(make_report()) is None


def test_ranking_is_descending_and_stable_on_ties():
    report = make_report({
        "time-only": _opportunity(100, 0),
        "bytes-only": _opportunity(0, 200_000),
        "mixed": _opportunity(50, 50_000),
    })
    ranked = rank_opportunities(report)

    assert [o.audit_id for o in ranked] == ["bytes-only", "time-only", "mixed"]


def test_only_positive_savings_qualify():
    report = make_report({
        "zero": _opportunity(0, 0),
        "negative": _opportunity(-10, -5),
        "missing-details": {"title": "x", "score": 1},
        "not-a-number": _opportunity("lots", None),
        "bytes": _opportunity(None, 2048),
    })
    ranked = rank_opportunities(report)

    assert [o.audit_id for o in ranked] == ["bytes"]
    assert ranked[0].savings_ms == 0
    assert ranked[0].savings_bytes == 2048


def test_priority_and_category(sample_audits):
    ranked = rank_opportunities(make_report(sample_audits))
    by_id = {o.audit_id: o for o in ranked}

    assert by_id["unused-javascript"].priority == "high"
    assert by_id["unused-javascript"].category == "performance"
    assert by_id["unused-javascript"].display_value == "Est savings of 120 KiB"
    assert by_id["uses-text-compression"].priority == "medium"
    # 900 (bytes only) outranks 300 + 120
    assert [o.audit_id for o in ranked] == ["uses-text-compression", "unused-javascript"]


def test_unknown_audit_is_other_medium():
    ranked = rank_opportunities(make_report({"plugin-thing": _opportunity(10, 0)}))
    assert ranked[0].category == "other"
    assert ranked[0].priority == "medium"
