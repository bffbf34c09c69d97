import logging
import os
import sys
from typing import Any, Literal

import structlog

LogFormat = Literal["json", "plain", "auto"]


def _should_use_json_format() -> bool:
    """Determine if JSON format should be used based on environment."""
    # Check if running in CI
    ci_vars = ["CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "JENKINS_URL"]
    if any(os.environ.get(var) for var in ci_vars):
        return True

    # Check if stderr is redirected (not a TTY)
    return bool(not sys.stderr.isatty())


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level!r}")
    return resolved


def setup_logging(format_type: LogFormat = "auto", level: str | int = "warning") -> None:
    """
    Setup structured logging with format and level control.

    Logs go to stderr so that CLI output on stdout stays machine-readable.

    Args:
        format_type: "json" for JSON output, "plain" for human-readable,
                "auto" to auto-detect based on TTY/CI.
        level: minimum level name ("debug", "info", ...) or numeric level.
    """
    use_json = format_type == "json" or (format_type == "auto" and _should_use_json_format())
    _configure(json_output=use_json, level=_resolve_level(level))


def configure_default_logging() -> None:
    """Library default until setup_logging() runs: warnings and above, on stderr."""
    _configure(json_output=False, level=logging.WARNING)


def _configure(json_output: bool, level: int) -> None:
    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


# Never print to stdout or below WARNING unless the application asks for it
if not structlog.is_configured():
    configure_default_logging()

log = structlog.get_logger("textsplice")
