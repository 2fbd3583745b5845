from __future__ import annotations

import os
import sys
import time
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from loguru import Logger

from loguru import logger

DEFAULT_LOG_DIR = Path(
    os.environ.get(
        "PYHDIUTIL_LOG_DIR",
        Path.home() / "Library" / "Logs" / "pyhdiutil",
    )
)


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    log_dir: Path | None = None,
    file_logging: bool = True,
) -> Logger:
    """
    Setup logging sinks for command-line use.

    Logging Tiers:
    - CRITICAL/ERROR: hdiutil could not be run or exited non-zero
    - SUCCESS/INFO: Images created, attached, detached, converted
    - DEBUG: Full argument vectors and captured output
    - TRACE: Option encoding details

    Log Files:
    - operations.log: INFO+ events (7 day retention)
    - debug.log: DEBUG+ events when --debug is enabled (3 day retention)
    - structured.jsonl: Structured JSON logs for analysis (7 day retention)

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging (very verbose)
        log_dir: Custom log directory (defaults to ~/Library/Logs/pyhdiutil)
        file_logging: Write log files in addition to stderr

    The package logs nothing until this is called.
    """
    logger.enable("pyhdiutil")
    logger.remove()
    logger.configure(extra={"job_id": "-", "tags": [], "source": "APP"})

    if trace:
        console_level = "TRACE"
    elif debug:
        console_level = "DEBUG"
    else:
        console_level = "INFO"

    # SINK 1: Console (stderr)
    logger.add(
        sys.stderr,
        level=console_level,
        backtrace=False,
        diagnose=False,
        colorize=True,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[source]: <10}</cyan> | "
            "<blue>{extra[job_id]: <18}</blue> | "
            "{message}"
        ),
    )

    if not file_logging:
        return logger

    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    # SINK 2: Operations Log (INFO+)
    logger.add(
        log_dir / "operations.log",
        level="INFO",
        rotation="5 MB",
        retention="7 days",
        compression="zip",
        backtrace=False,
        diagnose=False,
        format=(
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{extra[source]: <10} | "
            "{extra[job_id]: <18} | "
            "{message}"
        ),
    )

    # SINK 3: Debug Log (DEBUG+ when debug=True)
    if debug or trace:
        logger.add(
            log_dir / "debug.log",
            level="TRACE" if trace else "DEBUG",
            rotation="10 MB",
            retention="3 days",
            compression="zip",
            backtrace=True,
            diagnose=False,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{extra[source]: <10} | "
                "{extra[job_id]: <18} | "
                "{extra[tags]} | "
                "{message}"
            ),
        )

    # SINK 4: Structured JSON Log (INFO+)
    logger.add(
        log_dir / "structured.jsonl",
        level="INFO",
        rotation="10 MB",
        retention="7 days",
        compression="zip",
        serialize=True,
        format="{message}",
    )

    return logger


def get_logger(
    *,
    job_id: str | None = None,
    tags: Iterable[str] | None = None,
    source: str | None = None,
) -> Logger:
    """
    Get a logger with bound context.

    Args:
        job_id: Job identifier for tracking operations
        tags: Tags for filtering (e.g., ["hdiutil", "attach"])
        source: Source component (e.g., "hdiutil", "devices")

    Returns:
        Logger with bound context
    """
    extras: dict[str, object] = {}
    if job_id is not None:
        extras["job_id"] = job_id
    if tags is not None:
        extras["tags"] = list(tags)
    if source is not None:
        extras["source"] = source
    return logger.bind(**extras)


@contextmanager
def operation_context(operation: str, **details):
    """
    Context manager tracking one hdiutil invocation with timing.

    Logs start at DEBUG, completion at SUCCESS and failure at ERROR, then
    re-raises the failure.

    Args:
        operation: Verb name (e.g., "attach", "create")
        **details: Operation-specific details to log

    Yields:
        Logger bound with job_id and operation context

    Example:
        with operation_context("attach", image="test.dmg") as log:
            log.debug("Running hdiutil")
    """
    job_id = f"{operation}-{uuid.uuid4().hex[:8]}"

    with logger.contextualize(job_id=job_id, operation=operation, **details):
        start_time = time.time()
        log = logger.bind(source="hdiutil", job_id=job_id, tags=["hdiutil", operation])

        log.debug(f"{operation.capitalize()} started")

        try:
            yield log
            duration = time.time() - start_time
            log.bind(duration_seconds=round(duration, 2)).success(
                f"{operation.capitalize()} completed"
            )
        except Exception as e:
            duration = time.time() - start_time
            # bind() keeps braces in the message literal
            log.bind(
                error_type=type(e).__name__,
                duration_seconds=round(duration, 2),
            ).error(f"{operation.capitalize()} failed: {e}")
            raise


class LoggerFactory:
    """
    Factory for creating domain-specific loggers with automatic context.
    """

    @staticmethod
    def for_hdiutil(job_id: str | None = None) -> Logger:
        """Logger for command composition and execution."""
        if job_id is None:
            job_id = "-"
        return logger.bind(job_id=job_id, source="hdiutil", tags=["hdiutil"])

    @staticmethod
    def for_devices() -> Logger:
        """Logger for device node extraction."""
        return logger.bind(source="devices", tags=["devices"])

    @staticmethod
    def for_system() -> Logger:
        """Logger for startup and configuration."""
        return logger.bind(source="system", tags=["system"])


class EventLogger:
    """
    Structured event logger for image lifecycle events.
    """

    @staticmethod
    def log_image_attached(log: Logger, image: str, device_node: str, **extra) -> None:
        log.bind(
            event_type="image_attached",
            image=image,
            device_node=device_node,
            **extra,
        ).info(f"Attached {image} at {device_node or '(no device node)'}")

    @staticmethod
    def log_image_detached(log: Logger, device_node: str, **extra) -> None:
        log.bind(
            event_type="image_detached",
            device_node=device_node,
            **extra,
        ).info(f"Detached {device_node}")

    @staticmethod
    def log_image_written(log: Logger, verb: str, image: str, **extra) -> None:
        """Log an image produced by create, convert or makehybrid."""
        log.bind(
            event_type="image_written",
            verb=verb,
            image=image,
            **extra,
        ).info(f"{verb.capitalize()} wrote {image}")
