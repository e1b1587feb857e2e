"""
Lighthouse Insights — FastAPI surface over the analysis engine

Endpoints:
  POST /analyze                   — Analyze an uploaded report (+ optional log/trace)
  GET  /reports/{name}            — Analyze a report stored in REPORTS_DIR
  GET  /reports/{name}/audits     — List a stored report's audits for one category
  GET  /health                    — Health check
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Header
from pydantic import BaseModel

from .analyzers.audits import audits_by_category
from .engine import build_result, run_analysis
from .loader import LoadError, ReportNotFound, load_report, parse_devtools_log, parse_report, parse_trace
from .logger_config import setup_logger
from .models import AnalysisResult, AuditRecord, CategoryTag

load_dotenv()

API_SECRET = os.environ.get("API_SECRET_KEY", "")
REPORTS_DIR = os.environ.get("REPORTS_DIR", "reports")

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logger()
    if not Path(REPORTS_DIR).is_dir():
        logger.warning("REPORTS_DIR %s does not exist. Stored-report endpoints will return 404.", REPORTS_DIR)
    yield


app = FastAPI(
    title="Lighthouse Insights",
    version="1.0.0",
    lifespan=lifespan,
)


class AnalyzeRequest(BaseModel):
    report: Any
    devtoolsLog: list[Any] | None = None
    trace: Any = None


def _check_api_key(x_api_key: str) -> None:
    if API_SECRET and x_api_key != API_SECRET:
        raise HTTPException(status_code=401, detail="Invalid API key")


def _stored_report_path(name: str) -> Path:
    base = Path(REPORTS_DIR).resolve()
    path = (base / name).resolve()
    if not path.is_relative_to(base) or path == base:
        raise HTTPException(status_code=400, detail="Report name must stay inside REPORTS_DIR")
    return path


@app.get("/health")
async def health():
    return {"status": "ok", "engine": "lighthouse-insights"}


@app.post("/analyze", response_model=AnalysisResult)
def analyze(req: AnalyzeRequest, x_api_key: str = Header(default="")):
    _check_api_key(x_api_key)

    try:
        report = parse_report(req.report)
    except LoadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    devtools_log = parse_devtools_log(req.devtoolsLog) if req.devtoolsLog is not None else None
    trace = parse_trace(req.trace) if req.trace is not None else None
    return build_result(report, devtools_log, trace)


@app.get("/reports/{name}", response_model=AnalysisResult)
def analyze_stored(name: str, x_api_key: str = Header(default="")):
    _check_api_key(x_api_key)
    path = _stored_report_path(name)

    try:
        return run_analysis(path)
    except ReportNotFound:
        raise HTTPException(status_code=404, detail=f"Report not found: {name}")
    except LoadError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Analysis of %s failed", path)
        raise HTTPException(status_code=500, detail=f"Analysis failed: {str(e)}")


@app.get("/reports/{name}/audits", response_model=list[AuditRecord])
def stored_audits(name: str, category: CategoryTag, x_api_key: str = Header(default="")):
    _check_api_key(x_api_key)
    path = _stored_report_path(name)

    try:
        report = load_report(path)
    except ReportNotFound:
        raise HTTPException(status_code=404, detail=f"Report not found: {name}")
    except LoadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return audits_by_category(report, category)


if __name__ == "__main__":
    import uvicorn
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("lighthouse_insights.main:app", host="0.0.0.0", port=port, reload=True)
