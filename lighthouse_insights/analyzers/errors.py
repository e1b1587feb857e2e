"""
Error aggregator — console, network and inspector errors.

Two observation points are kept apart:
  - the static audits (`errors-in-console`, `network-requests`,
    `inspector-issues`) build the ErrorBundle;
  - the live DevTools event log builds DevToolsErrors.
"""

from ..models import (
    ConsoleError,
    DevToolsConsoleError,
    DevToolsErrors,
    DevToolsEvent,
    DevToolsException,
    ErrorBundle,
    InspectorIssue,
    NetworkError,
    NetworkFailure,
    RawReport,
)
from ._values import int_or_none, item_list, mapping_or_none, number_or_none, text_or_none


CONSOLE_ERRORS_AUDIT = "errors-in-console"
NETWORK_REQUESTS_AUDIT = "network-requests"
INSPECTOR_ISSUES_AUDIT = "inspector-issues"

HTTP_ERROR_STATUS = 400


def _audit_items(report: RawReport, audit_id: str) -> list[dict]:
    audit = report.audits.get(audit_id)
    return item_list(audit.details) if audit else []


def collect_audit_errors(report: RawReport) -> ErrorBundle | None:
    """Build the audit-derived error bundle; None when the report has no audits."""
    if report.audits is None:
        return None

    console = [
        ConsoleError(
            description=text_or_none(item.get("description")),
            source=text_or_none(item.get("source")),
            url=text_or_none(item.get("url")),
            line=int_or_none(item.get("lineNumber")),
            column=int_or_none(item.get("columnNumber")),
        )
        for item in _audit_items(report, CONSOLE_ERRORS_AUDIT)
    ]

    network = []
    for item in _audit_items(report, NETWORK_REQUESTS_AUDIT):
        status = int_or_none(item.get("statusCode"))
        if status is None or status < HTTP_ERROR_STATUS:
            continue
        network.append(NetworkError(
            url=text_or_none(item.get("url")),
            status=status,
            resource_type=text_or_none(item.get("resourceType")),
            transfer_size=number_or_none(item.get("transferSize")),
        ))

    inspector = [
        InspectorIssue(
            code=text_or_none(item.get("code")),
            title=text_or_none(item.get("title")),
            description=text_or_none(item.get("description")),
            severity=text_or_none(item.get("severity")),
        )
        for item in _audit_items(report, INSPECTOR_ISSUES_AUDIT)
    ]

    return ErrorBundle(console=console, network=network, inspector=inspector)


def _console_message(params: dict) -> str:
    args = params.get("args")
    if isinstance(args, list) and args and isinstance(args[0], dict):
        value = args[0].get("value")
        if value:
            return text_or_none(value)
    return "Unknown error"


def collect_devtools_errors(events: list[DevToolsEvent] | None) -> DevToolsErrors | None:
    """Scan the DevTools log; None when no log was loaded."""
    if events is None:
        return None

    console, exceptions, network_fails = [], [], []
    for event in events:
        params = event.params
        if event.method == "Runtime.consoleAPICalled":
            if params.get("type") == "error":
                console.append(DevToolsConsoleError(
                    message=_console_message(params),
                    timestamp=number_or_none(params.get("timestamp")),
                    stack_trace=mapping_or_none(params.get("stackTrace")),
                ))
        elif event.method == "Runtime.exceptionThrown":
            exceptions.append(DevToolsException(
                exception=mapping_or_none(params.get("exceptionDetails")),
                timestamp=number_or_none(params.get("timestamp")),
            ))
        elif event.method == "Network.loadingFailed":
            request = mapping_or_none(params.get("request")) or {}
            network_fails.append(NetworkFailure(
                url=text_or_none(request.get("url")),
                error_text=text_or_none(params.get("errorText")),
                timestamp=number_or_none(params.get("timestamp")),
            ))

    return DevToolsErrors(console=console, exceptions=exceptions, network_fails=network_fails)
