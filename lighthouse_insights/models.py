"""
Data model — raw Lighthouse input and the derived analysis result.

Raw models mirror the report JSON (camelCase on the wire, snake_case here).
Every model is frozen: inputs are loaded once and never mutated, derived
values are rebuilt on each call.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel


CategoryTag = Literal["performance", "accessibility", "best-practices", "seo", "pwa", "other"]
MetricStatus = Literal["good", "needs-improvement", "poor", "unknown"]
Priority = Literal["high", "medium"]
Rating = Literal["excellent", "good", "needs-work", "poor"]


class _Model(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# --- Raw input ---------------------------------------------------------------

def _is_text(value) -> bool:
    return isinstance(value, str)


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        float(value)
    except OverflowError:
        return False
    return True


def _is_mapping(value) -> bool:
    return isinstance(value, dict)


def _blank_mistyped(data: Any, checks: dict) -> Any:
    """Replace wrong-typed optional fields with None instead of rejecting the entry."""
    if not isinstance(data, dict):
        return data
    cleaned = dict(data)
    for key, accepts in checks.items():
        value = cleaned.get(key)
        if value is not None and not accepts(value):
            cleaned[key] = None
    return cleaned


class AuditEntry(_Model):
    title: str | None = None
    description: str | None = None
    score: float | None = None
    numeric_value: float | None = None
    display_value: str | None = None
    details: dict[str, Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def blank_mistyped_fields(cls, data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data
        if not isinstance(data, dict):
            return {}
        return _blank_mistyped(data, {
            "title": _is_text,
            "description": _is_text,
            "score": _is_number,
            "numericValue": _is_number,
            "displayValue": _is_text,
            "details": _is_mapping,
        })


class CategoryEntry(_Model):
    title: str | None = None
    score: float | None = None
    description: str | None = None

    @model_validator(mode="before")
    @classmethod
    def blank_mistyped_fields(cls, data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data
        if not isinstance(data, dict):
            return {}
        return _blank_mistyped(data, {
            "title": _is_text,
            "score": _is_number,
            "description": _is_text,
        })


class RawReport(_Model):
    """A parsed Lighthouse report. `audits is None` means the report has no audit table.

    Only a non-mapping `audits` or `categories` table is rejected; odd entries
    and odd optional fields load as empty values.
    """

    audits: dict[str, AuditEntry] | None = None
    categories: dict[str, CategoryEntry] | None = None
    final_displayed_url: str | None = None
    fetch_time: str | None = None
    lighthouse_version: str | None = None

    @model_validator(mode="before")
    @classmethod
    def blank_mistyped_fields(cls, data: Any) -> Any:
        return _blank_mistyped(data, {
            "finalDisplayedUrl": _is_text,
            "fetchTime": _is_text,
            "lighthouseVersion": _is_text,
        })


class DevToolsEvent(_Model):
    method: str
    params: dict[str, Any] = Field(default_factory=dict)


# --- Derived -----------------------------------------------------------------

class Metric(_Model):
    name: str
    audit_id: str
    value: float
    unit: Literal["ms", "score"]
    score: float
    status: MetricStatus


class ConsoleError(_Model):
    description: str | None = None
    source: str | None = None
    url: str | None = None
    line: int | None = None
    column: int | None = None


class NetworkError(_Model):
    url: str | None = None
    status: int
    resource_type: str | None = None
    transfer_size: float | None = None


class InspectorIssue(_Model):
    code: str | None = None
    title: str | None = None
    description: str | None = None
    severity: str | None = None


class ErrorBundle(_Model):
    console: list[ConsoleError] = Field(default_factory=list)
    network: list[NetworkError] = Field(default_factory=list)
    inspector: list[InspectorIssue] = Field(default_factory=list)

    @computed_field
    @property
    def total(self) -> int:
        return len(self.console) + len(self.network) + len(self.inspector)


class DevToolsConsoleError(_Model):
    message: str
    timestamp: float | None = None
    stack_trace: dict[str, Any] | None = None


class DevToolsException(_Model):
    exception: dict[str, Any] | None = None
    timestamp: float | None = None


class NetworkFailure(_Model):
    url: str | None = None
    error_text: str | None = None
    timestamp: float | None = None


class DevToolsErrors(_Model):
    console: list[DevToolsConsoleError] = Field(default_factory=list)
    exceptions: list[DevToolsException] = Field(default_factory=list)
    network_fails: list[NetworkFailure] = Field(default_factory=list)


class OptimizationOpportunity(_Model):
    audit_id: str
    title: str | None = None
    score: float | None = None
    savings_ms: float = 0
    savings_bytes: float = 0
    display_value: str | None = None
    description: str | None = None
    category: CategoryTag
    priority: Priority


class LongTask(_Model):
    duration_ms: float
    start_time_ms: float
    thread: int | None = None


class LongTaskSummary(_Model):
    count: int
    total_duration_ms: float
    longest_ms: float
    top_tasks: list[LongTask] = Field(default_factory=list)


class AuditRecord(_Model):
    id: str
    title: str | None = None
    description: str | None = None
    score: float | None = None
    numeric_value: float | None = None
    display_value: str | None = None
    category: CategoryTag
    details: dict[str, Any] | None = None


class CategoryScore(_Model):
    title: str | None = None
    score: int | None = None
    raw_score: float | None = None
    description: str | None = None
    rating: Rating | None = None
    failing_audits: list[str] = Field(default_factory=list)


class ReportMetadata(_Model):
    url: str | None = None
    domain: str | None = None
    fetch_time: str | None = None
    lighthouse_version: str | None = None


class AnalysisResult(_Model):
    """Everything presentation layers need; they never read the raw report."""

    metadata: ReportMetadata
    scores: dict[str, CategoryScore] = Field(default_factory=dict)
    core_web_vitals: dict[str, Metric] | None = None
    critical_errors: ErrorBundle | None = None
    optimization_opportunities: list[OptimizationOpportunity] | None = None
    all_audits: dict[str, AuditRecord] = Field(default_factory=dict)
    devtools_errors: DevToolsErrors | None = None
    long_tasks: LongTaskSummary | None = None
