"""Unified logging for modprep with console and file output."""
import logging
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

# Log file configuration
LOG_DIR = Path.home() / ".cache" / "modprep"
LOG_FILE = LOG_DIR / "modprep.log"

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Set up file logging for modprep runs.

    Args:
        log_file: Path to log file (defaults to ~/.cache/modprep/modprep.log)
        verbose: Enable debug-level logging

    Returns:
        Path of the log file in use

    Note:
        Creates log directory if it doesn't exist.
        Falls back to the temp directory if the default is not writable.
    """
    global _file_logging_configured

    target_log_file = Path(log_file) if log_file else LOG_FILE

    if _file_logging_configured:
        return target_log_file

    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target_log_file = Path(tempfile.gettempdir()) / "modprep.log"

    root_logger = logging.getLogger("modprep")
    file_handler = logging.FileHandler(target_log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    _file_logging_configured = True

    root_logger.info(f"modprep logging initialized: {target_log_file}")
    return target_log_file


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    logger = logging.getLogger(name)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        # Console only shows warnings; the run log is printed by the CLI
        handler.setLevel(logging.WARNING)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)

    return logger


class RunLog:
    """Timestamped, operator-facing log of a single run.

    Every entry is also forwarded to the module logger so it ends up in the
    log file when file logging is enabled. ``sink`` receives each formatted
    line as it is added, which lets the CLI stream output while a run is in
    progress.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        sink: Optional[Callable[[str], None]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.logger = logger or get_logger("modprep.run")
        self.sink = sink
        self.clock = clock
        self.lines: List[str] = []

    def __call__(self, message: str = "") -> str:
        line = f"[{self.clock():%H:%M:%S}] {message}"
        self.lines.append(line)
        if message:
            self.logger.info(message)
        if self.sink is not None:
            self.sink(line)
        return line

    def blank(self) -> str:
        return self("")
