"""
Logging setup for flappy_duel.

Call sites attach round context as ``extra={"data": {...}}``; the console
prints it as key=value pairs and the log file keeps it as JSON fields.
"""

import json
import logging
import sys
from typing import Optional

ROOT_LOGGER = "flappy_duel"


def _context(record: logging.LogRecord) -> dict:
    return getattr(record, "data", None) or {}


class ConsoleFormatter(logging.Formatter):
    def __init__(self):
        super().__init__("%(asctime)s %(levelname)-7s %(name)s: %(message)s", datefmt="%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            line += "  " + " ".join(f"{key}={value}" for key, value in context.items())
        return line


class JsonLinesFormatter(logging.Formatter):
    """One JSON object per record, with the round context merged in."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": round(record.created, 3),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        entry.update(_context(record))
        return json.dumps(entry, default=str)


def setup_logging(level: str = "info", log_file: Optional[str] = None) -> None:
    """Configure the flappy_duel logger; unknown level names fall back to INFO."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(ConsoleFormatter())
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(JsonLinesFormatter())
        root.addHandler(fh)
