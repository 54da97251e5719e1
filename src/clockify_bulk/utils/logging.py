"""Logging setup for clockify-bulk.

Everything goes to a single log file in the cache directory; the console
is reserved for rich output.
"""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

# Level name padded to fit "WARNING"
# %(relpath)s is filled in by RelativePathFormatter
LOG_FORMAT = "[%(levelname)7s] %(asctime)s (%(relpath)s:%(lineno)d) --- %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at DEBUG
QUIET_LOGGERS = ("urllib3",)


class RelativePathFormatter(logging.Formatter):
    """Formatter exposing the source file relative to a base directory."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        base_path: str | None = None,
    ) -> None:
        super().__init__(fmt, datefmt)
        self.base_path = base_path or str(Path.cwd())

    def format(self, record: logging.LogRecord) -> str:
        record.relpath = self._relative(record)
        return super().format(record)

    def _relative(self, record: logging.LogRecord) -> str:
        if not record.pathname:
            return record.filename or "unknown"
        try:
            return os.path.relpath(record.pathname, self.base_path)
        except ValueError:
            # Different drive on Windows
            return record.pathname


def setup_logging(
    log_file: Path,
    level: int = logging.DEBUG,
    extra_handlers: Sequence[logging.Handler] | None = None,
) -> None:
    """Route all log records to the log file.

    Handlers installed by a previous call are replaced, so calling
    this twice does not duplicate lines.

    Args:
        log_file: Path to log file (truncated on each run)
        level: Root log level (default: DEBUG)
        extra_handlers: Additional handlers sharing the same format
    """
    formatter = RelativePathFormatter(LOG_FORMAT, LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.FileHandler(log_file, mode="w")]
    handlers.extend(extra_handlers or ())

    root_logger = logging.getLogger()
    for old in [h for h in root_logger.handlers if _is_ours(h)]:
        root_logger.removeHandler(old)
        old.close()

    root_logger.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # Request lines would include workspace ids
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))


def _is_ours(handler: logging.Handler) -> bool:
    return isinstance(handler.formatter, RelativePathFormatter)
