"""Structured logging helpers: per-thread log context and call tracing."""

import functools
import logging
import threading
from typing import Any, Callable, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()


def _current_context() -> Dict[str, Any]:
    if not hasattr(_thread_local, "context"):
        _thread_local.context = {}
    return _thread_local.context


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields currently attached to log records."""
    return dict(_current_context())


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are kept in thread-local storage and copied onto every record by
    the filter installed in configure_logging(). Nested contexts merge, and
    leaving a context restores the previous fields.

    Example:
        with LogContext(source_file="horas_extras.csv", record_count=12):
            logger.info("Calculating overtime report")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self) -> "LogContext":
        context = _current_context()
        self.previous_context = context.copy()
        context.update(self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _thread_local.context = self.previous_context or {}


class _ContextFilter(logging.Filter):
    """Logging filter that copies context fields onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _current_context().items():
            setattr(record, key, value)
        return True


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Decorator that logs entry, exit and exceptions of a function.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Whether to include function arguments in logs
        level: Log level to use (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Decorated function

    Example:
        @log_function_call
        def calculate_overtime_batch(records):
            ...

        @log_function_call(include_args=True, level="INFO")
        def build_compound_projection(initial_amount, monthly_contribution, ...):
            ...
    """
    log_level = getattr(logging, level.upper())

    def decorator(f: Callable) -> Callable:
        logger = logging.getLogger(f.__module__)

        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            if include_args:
                signature = ", ".join(
                    [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
                )
                logger.log(log_level, "Entering %s with args: %s", f.__name__, signature)
            else:
                logger.log(log_level, "Entering %s", f.__name__)

            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    "Exception in %s: %s: %s",
                    f.__name__,
                    type(e).__name__,
                    e,
                    exc_info=True,
                )
                raise

            logger.log(log_level, "Exiting %s", f.__name__)
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
