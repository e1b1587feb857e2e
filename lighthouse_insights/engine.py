"""
Main analysis engine — orchestrates load, extract, classify, rank, aggregate.
"""

import logging
import time
from pathlib import Path

from .analyzers import audits, errors, long_tasks, metrics, opportunities
from .loader import load_inputs
from .models import AnalysisResult, DevToolsEvent, RawReport
from .scorer import build_metadata, category_scores

logger = logging.getLogger(__name__)


def build_result(
    report: RawReport,
    devtools_log: list[DevToolsEvent] | None = None,
    trace: list[dict] | None = None,
) -> AnalysisResult:
    """
    Compose every analyzer over already-loaded inputs.

    Args:
        report: The parsed Lighthouse report
        devtools_log: DevTools events, or None when no log was loaded
        trace: Trace events, or None when no trace was loaded

    Returns:
        The immutable AnalysisResult; sections that need a missing input are None
    """
    return AnalysisResult(
        metadata=build_metadata(report),
        scores=category_scores(report),
        core_web_vitals=metrics.extract_core_metrics(report),
        critical_errors=errors.collect_audit_errors(report),
        optimization_opportunities=opportunities.rank_opportunities(report),
        all_audits=audits.flatten_audits(report),
        devtools_errors=errors.collect_devtools_errors(devtools_log),
        long_tasks=long_tasks.summarize_long_tasks(trace),
    )


def run_analysis(report_path: str | Path, on_progress=None) -> AnalysisResult:
    """
    Load a report with its companion files and analyze it.

    Args:
        report_path: Path to the Lighthouse JSON report
        on_progress: Optional callback(step: str, progress: int)

    Raises:
        LoadError: the report is missing or not a Lighthouse report
    """
    start = time.time()

    if on_progress:
        on_progress("Loading report...", 10)

    report, devtools_log, trace = load_inputs(report_path)
    logger.info(
        "Loaded %s (%d audits, devtools log: %s, trace: %s)",
        report_path,
        len(report.audits or {}),
        "yes" if devtools_log is not None else "no",
        "yes" if trace is not None else "no",
    )

    if on_progress:
        on_progress("Analyzing audits...", 50)

    result = build_result(report, devtools_log, trace)

    if on_progress:
        on_progress("Complete", 100)

    duration_ms = int((time.time() - start) * 1000)
    logger.info(
        "Analyzed %s in %dms: %d opportunities, %d audit errors",
        report_path,
        duration_ms,
        len(result.optimization_opportunities or []),
        result.critical_errors.total if result.critical_errors else 0,
    )
    return result
