"""
Utility functions for lazymatch

Logging setup, performance measurement for matcher pipelines, and a
laziness check used by the tests and the demo.
"""

import gc
import logging
import os
import sys
import time
import tracemalloc
from typing import Any, Callable, List, Optional

from .lazy import Match
from .models import PerformanceReport, PerformanceSummary

LOG_LEVEL_ENV = "LAZYMATCH_LOG_LEVEL"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s'

logger = logging.getLogger(__name__)

# Global performance tracking
_performance_reports: List[PerformanceReport] = []


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logging; level falls back to $LAZYMATCH_LOG_LEVEL, then INFO"""
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    numeric = logging.getLevelName(level_name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    return logging.getLogger("lazymatch")


def measure_performance(operation_name: str, func: Callable[..., Any], *args, **kwargs) -> PerformanceReport:
    """Measure a call with timing and memory tracking; failures are recorded then re-raised"""
    if not operation_name:
        raise ValueError("operation_name must not be empty")

    tracemalloc.start()
    gc.collect()
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
    except Exception as e:
        report = _record(operation_name, start_time, success=False, error=str(e))
        logger.error(f"{operation_name} failed after {report.execution_time_ms:.2f}ms: {e}")
        raise
    else:
        report = _record(
            operation_name,
            start_time,
            success=True,
            result_size=len(result) if hasattr(result, "__len__") else None,
        )
        logger.debug(f"{operation_name} took {report.execution_time_ms:.2f}ms")
    finally:
        tracemalloc.stop()

    return report


def _record(operation_name, start_time, success, result_size=None, error=None):
    execution_time_ms = (time.perf_counter() - start_time) * 1000
    peak = tracemalloc.get_traced_memory()[1]

    report = PerformanceReport(
        operation=operation_name,
        execution_time_ms=execution_time_ms,
        memory_usage_mb=peak / 1024 / 1024,
        success=success,
        result_size=result_size,
        error=error,
    )
    _performance_reports.append(report)
    return report


def get_performance_summary() -> PerformanceSummary:
    """Get summary of all performance metrics"""
    count = len(_performance_reports)
    if count == 0:
        return PerformanceSummary()

    total_time = sum(r.execution_time_ms for r in _performance_reports)
    total_memory = sum(r.memory_usage_mb for r in _performance_reports)
    return PerformanceSummary(
        total_operations=count,
        failed_operations=sum(1 for r in _performance_reports if not r.success),
        total_time_ms=total_time,
        total_memory_mb=total_memory,
        avg_time_ms=total_time / count,
        avg_memory_mb=total_memory / count,
    )


def get_performance_reports() -> List[PerformanceReport]:
    return list(_performance_reports)


def clear_performance_metrics():
    """Clear all performance metrics"""
    _performance_reports.clear()


def validate_lazy_evaluation(matcher: Any) -> bool:
    """True if matcher is a lazy matcher that has not pulled anything from its source yet"""
    if not isinstance(matcher, Match):
        return False
    return matcher.stats().consumed == 0
