# qubitsim/log.py
import logging
from typing import Optional

from .config import LOG_COLOR, LOG_LEVEL

GREY = "\x1b[90m"
RESET = "\x1b[0m"

SEVERITY_COLORS = {
    logging.DEBUG: "\x1b[92m",    # green
    logging.INFO: "\x1b[96m",     # cyan
    logging.WARNING: "\x1b[93m",  # yellow
    logging.ERROR: "\x1b[91m",    # red
}

SEVERITY_NAMES = {
    logging.DEBUG: "Debug",
    logging.INFO: "Info",
    logging.WARNING: "Warning",
    logging.ERROR: "Error",
}


class ColorFormatter(logging.Formatter):
    """
    Renders a record as

        [Severity] file.py:42
        message

    with the severity colored by level and the source location in grey.
    """

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = min(max(record.levelno, logging.DEBUG), logging.ERROR)
        # snap custom levels onto the four known severities
        level = max(k for k in SEVERITY_NAMES if k <= level)
        name = SEVERITY_NAMES[level]
        location = f"{record.filename}:{record.lineno}"
        message = record.getMessage()

        if self.use_color:
            header = f"{SEVERITY_COLORS[level]}[{name}] {GREY}{location}{RESET}"
        else:
            header = f"[{name}] {location}"

        if not message:
            return header
        return f"{header}\n{message}"


def get_logger(name: str = "qubitsim", level: Optional[str] = None,
               use_color: Optional[bool] = None) -> logging.Logger:
    """
    Return the named logger. The console handler lives on the top-level
    package logger (``qubitsim``) and is attached the first time any
    module asks for a logger; child loggers propagate to it.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR); defaults to config
        use_color: Emit ANSI colors; defaults to config

    Returns:
        Logger instance
    """
    if level is None:
        level = LOG_LEVEL
    if use_color is None:
        use_color = LOG_COLOR

    base = logging.getLogger(name.split(".")[0])
    if not base.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ColorFormatter(use_color=use_color))
        base.addHandler(handler)
    base.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logging.getLogger(name)


__all__ = ["ColorFormatter", "get_logger"]
