from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import pytest

from lighthouse_insights.loader import parse_report
from lighthouse_insights.models import RawReport


def report_data(audits: Optional[dict] = None, categories: Optional[dict] = None, **extra) -> dict:
    data = {
        "finalDisplayedUrl": "https://www.example.com/",
        "fetchTime": "2025-12-24T04:03:36.000Z",
        "lighthouseVersion": "12.3.0",
        **extra,
    }
    if audits is not None:
        data["audits"] = audits
    if categories is not None:
        data["categories"] = categories
    return data


def make_report(audits: Optional[dict] = None, categories: Optional[dict] = None, **extra) -> RawReport:
    return parse_report(report_data(audits, categories, **extra))


def write_report_files(
    directory: Path,
    data: dict,
    *,
    devtools_lines: Optional[list[str]] = None,
    trace: Optional[object] = None,
    name: str = "report.json",
) -> Path:
    path = directory / name
    path.write_text(json.dumps(data), encoding="utf-8")
    stem = path.stem
    if devtools_lines is not None:
        (directory / f"{stem}-0.devtoolslog.json").write_text("\n".join(devtools_lines), encoding="utf-8")
    if trace is not None:
        text = trace if isinstance(trace, str) else json.dumps(trace)
        (directory / f"{stem}-0.trace.json").write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def sample_audits() -> dict:
    return {
        "largest-contentful-paint": {"title": "Largest Contentful Paint", "score": 0.75, "numericValue": 2500},
        "first-contentful-paint": {"title": "First Contentful Paint", "score": 1, "numericValue": 900},
        "cumulative-layout-shift": {"title": "Cumulative Layout Shift", "score": 0, "numericValue": 0.4},
        "total-blocking-time": {"title": "Total Blocking Time", "score": None, "numericValue": 120},
        "unused-javascript": {
            "title": "Reduce unused JavaScript",
            "score": 0.5,
            "displayValue": "Est savings of 120 KiB",
            "details": {"type": "opportunity", "overallSavingsMs": 300, "overallSavingsBytes": 120000},
        },
        "uses-text-compression": {
            "title": "Enable text compression",
            "score": 0.9,
            "details": {"type": "opportunity", "overallSavingsMs": 0, "overallSavingsBytes": 900000},
        },
        "color-contrast": {"title": "Contrast", "score": 0},
        "document-title": {"title": "Document has a title", "score": 1},
        "network-requests": {
            "title": "Network Requests",
            "score": None,
            "details": {"items": [
                {"url": "https://www.example.com/", "statusCode": 200, "resourceType": "Document"},
                {"url": "https://www.example.com/missing.js", "statusCode": 404,
                 "resourceType": "Script", "transferSize": 512},
            ]},
        },
    }


@pytest.fixture
def sample_categories() -> dict:
    return {
        "performance": {"title": "Performance", "score": 0.885},
        "accessibility": {"title": "Accessibility", "score": 0.5},
        "seo": {"title": "SEO", "score": None},
    }
