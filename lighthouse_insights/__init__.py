"""Lighthouse report analysis: core metrics, errors, opportunities and long tasks."""

from .engine import build_result, run_analysis
from .loader import LoadError, load_inputs, load_report

__all__ = ["build_result", "run_analysis", "LoadError", "load_inputs", "load_report"]
