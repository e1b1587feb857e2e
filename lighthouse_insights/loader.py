"""
Load a Lighthouse report plus its companion files (DevTools log, trace).

Companions sit next to the report: `report.json` has `report-0.devtoolslog.json`
and `report-0.trace.json`. Only the report is mandatory; a missing or broken
companion loads as None and the analysis degrades instead of failing.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from .models import DevToolsEvent, RawReport

logger = logging.getLogger(__name__)

DEVTOOLS_LOG_SUFFIX = "-0.devtoolslog.json"
TRACE_SUFFIX = "-0.trace.json"


class LoadError(Exception):
    """The primary report cannot be read or parsed. No analysis is possible."""

    def __init__(self, path: str | Path | None, reason: str):
        self.path = str(path) if path is not None else None
        self.reason = reason
        where = f" {self.path}" if self.path else ""
        super().__init__(f"Cannot load report{where}: {reason}")


class ReportNotFound(LoadError):
    pass


def companion_path(report_path: str | Path, suffix: str) -> Path:
    path = Path(report_path)
    stem = path.stem if path.suffix == ".json" else path.name
    return path.with_name(stem + suffix)


def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8-sig")


# --- Report ------------------------------------------------------------------

def parse_report(data: Any, path: str | Path | None = None) -> RawReport:
    if not isinstance(data, dict):
        raise LoadError(path, f"expected a JSON object, got {type(data).__name__}")
    try:
        return RawReport.model_validate(data)
    except ValidationError as e:
        raise LoadError(path, f"unexpected report shape ({e.error_count()} errors)") from e


def load_report(path: str | Path) -> RawReport:
    path = Path(path)
    if not path.is_file():
        raise ReportNotFound(path, "file not found")
    try:
        data = json.loads(_read_text(path))
    except OSError as e:
        raise LoadError(path, str(e)) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise LoadError(path, f"invalid JSON: {e}") from e
    return parse_report(data, path)


# --- DevTools log ------------------------------------------------------------

def parse_devtools_log(records: Iterable[Any]) -> list[DevToolsEvent]:
    """Validate log records (JSON strings or mappings); bad records are dropped one by one."""
    events = []
    dropped = 0
    for record in records:
        if isinstance(record, str):
            record = record.strip()
            if not record:
                continue
            try:
                record = json.loads(record)
            except json.JSONDecodeError:
                dropped += 1
                continue
        try:
            events.append(DevToolsEvent.model_validate(record))
        except ValidationError:
            dropped += 1
    if dropped:
        logger.debug("Dropped %d malformed DevTools log records", dropped)
    return events


def load_devtools_log(path: str | Path) -> list[DevToolsEvent] | None:
    """Newline-delimited records, or one JSON array of records. None if unavailable."""
    path = Path(path)
    if not path.is_file():
        logger.info("No DevTools log at %s", path)
        return None
    try:
        text = _read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read DevTools log %s: %s", path, e)
        return None

    if text.lstrip().startswith("["):
        try:
            records = json.loads(text)
        except json.JSONDecodeError:
            pass
        else:
            if isinstance(records, list):
                return parse_devtools_log(records)

    return parse_devtools_log(text.splitlines())


# --- Trace -------------------------------------------------------------------

def parse_trace(data: Any) -> list[dict] | None:
    """The trace event list from `{"traceEvents": [...]}` or a bare array."""
    events = data.get("traceEvents") if isinstance(data, dict) else data
    if not isinstance(events, list):
        return None
    return [event for event in events if isinstance(event, dict)]


def load_trace(path: str | Path) -> list[dict] | None:
    path = Path(path)
    if not path.is_file():
        logger.info("No trace at %s", path)
        return None
    try:
        data = json.loads(_read_text(path))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Cannot load trace %s: %s", path, e)
        return None

    events = parse_trace(data)
    if events is None:
        logger.warning("Trace %s has no traceEvents list", path)
    return events


def load_inputs(report_path: str | Path) -> tuple[RawReport, list[DevToolsEvent] | None, list[dict] | None]:
    """Load the report (LoadError on failure) and whatever companions exist."""
    report = load_report(report_path)
    devtools_log = load_devtools_log(companion_path(report_path, DEVTOOLS_LOG_SUFFIX))
    trace = load_trace(companion_path(report_path, TRACE_SUFFIX))
    return report, devtools_log, trace
