"""
filetools.base.logging

Typed logging for filetools.

Features:
 - Custom FiletoolsLogger subclass with Rich detection flag
 - Library-safe default (NullHandler) until the application opts in
 - Unified setup for Rich + standard logging
 - Optional per-run file logging
 - Config-driven defaults (logging level, Rich toggle, log directory)
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, cast

from rich.logging import RichHandler
from rich.text import Text

BASE_LOGGER_NAME = "filetools"

# ----------------------------------------------------------------------
# LEVEL STYLE METADATA
# ----------------------------------------------------------------------

ANSI_RESET = "\033[0m"

LEVEL_STYLES: Dict[int, Dict[str, str]] = {
    logging.DEBUG: {"emoji": "🐛", "ansi": "\033[36m", "rich": "bright_cyan"},
    logging.INFO: {"emoji": "ℹ️", "ansi": "\033[32m", "rich": "green"},
    logging.WARNING: {"emoji": "⚠️", "ansi": "\033[33m", "rich": "yellow"},
    logging.ERROR: {"emoji": "❌", "ansi": "\033[31m", "rich": "red"},
    logging.CRITICAL: {"emoji": "💥", "ansi": "\033[95m", "rich": "bold magenta"},
}
DEFAULT_STYLE = LEVEL_STYLES[logging.INFO]


def _style_for(record: logging.LogRecord) -> Dict[str, str]:
    return LEVEL_STYLES.get(record.levelno, DEFAULT_STYLE)


# ----------------------------------------------------------------------
# FORMATTERS
# ----------------------------------------------------------------------

class ColorEmojiFormatter(logging.Formatter):
    """Console formatter that injects colored level names and emojis."""

    def format(self, record: logging.LogRecord) -> str:
        style = _style_for(record)
        display = f"{style['emoji']} {record.levelname}"
        record.level_display = f"{style['ansi']}{display}{ANSI_RESET}"  # type: ignore[attr-defined]
        try:
            return super().format(record)
        finally:
            del record.level_display  # type: ignore[attr-defined]


class EmojiFormatter(logging.Formatter):
    """File formatter that prefixes log lines with the level emoji."""

    def format(self, record: logging.LogRecord) -> str:
        record.level_emoji = _style_for(record)["emoji"]  # type: ignore[attr-defined]
        return super().format(record)


class FiletoolsRichHandler(RichHandler):
    """Rich console handler with emoji-enhanced level column."""

    def get_level_text(self, record: logging.LogRecord) -> Text:  # type: ignore[override]
        style = _style_for(record)
        text = Text()
        text.append(f"{style['emoji']} ", style=style["rich"])
        text.append(record.levelname, style=style["rich"])
        return text


# ----------------------------------------------------------------------
# LOGGER CLASS
# ----------------------------------------------------------------------

class FiletoolsLogger(logging.Logger):
    """Custom logger with Rich support flag and optional log file."""

    rich_enabled: bool = False
    log_file: Optional[Path] = None


# ----------------------------------------------------------------------
# CONFIG-DRIVEN DEFAULTS
# ----------------------------------------------------------------------

def _load_default_logging_settings() -> Dict[str, Any]:
    from filetools.shared.loader import get_settings

    settings = get_settings().logging
    return {
        "level": settings.level,
        "use_rich": settings.use_rich,
        "log_dir": settings.log_dir,
        "file_prefix": settings.file_prefix,
    }


def _normalize_level(value: str | int | None) -> str:
    if isinstance(value, int):
        label = logging.getLevelName(value)
        if isinstance(label, str) and not label.startswith("Level "):
            return label
        raise ValueError(f"Unknown logging level: {value}")
    candidate = (value or "INFO").strip().upper()
    if candidate not in logging._nameToLevel:  # type: ignore[attr-defined]
        raise ValueError(f"Unknown logging level: {value}")
    return candidate


# ----------------------------------------------------------------------
# BASE LOGGER SETUP
# ----------------------------------------------------------------------

def setup_logging(
    level: str | int | None = None,
    use_rich: Optional[bool] = None,
    log_dir: Optional[Path | str] = None,
    file_prefix: Optional[str] = None,
) -> FiletoolsLogger:
    """
    Configure and return the ``filetools`` logger for an application.

    Args:
        level: Desired logging level. Defaults to the configured level (INFO).
        use_rich: Force-enable or disable the Rich handler. None honors config (Rich on).
        log_dir: Directory for per-run log files. None honors config; no file
            handler is attached when neither is set.
        file_prefix: Prefix for generated log filenames.
    """
    defaults = _load_default_logging_settings()
    resolved_level = _normalize_level(level if level is not None else defaults["level"])
    resolved_use_rich = use_rich if use_rich is not None else defaults["use_rich"]
    if resolved_use_rich is None:
        resolved_use_rich = True
    resolved_log_dir = log_dir or defaults["log_dir"]
    resolved_file_prefix = file_prefix or defaults["file_prefix"] or BASE_LOGGER_NAME

    logging.setLoggerClass(FiletoolsLogger)
    logger = cast(FiletoolsLogger, logging.getLogger(BASE_LOGGER_NAME))
    logger.setLevel(resolved_level)

    # Tear down any previous handlers so we can rebuild with new settings.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # ------------------------------------------------------------------
    # Console Handler (Rich or ANSI)
    # ------------------------------------------------------------------
    console_handler: logging.Handler
    if resolved_use_rich:
        console_handler = FiletoolsRichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=True,
            show_level=True,
            show_path=False,
            log_time_format="[%X]",
        )
        logger.rich_enabled = True
    else:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(
            ColorEmojiFormatter(
                fmt="%(asctime)s %(level_display)s %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.rich_enabled = False
    console_handler.setLevel(logging.NOTSET)
    logger.addHandler(console_handler)

    # ------------------------------------------------------------------
    # File Handler
    # ------------------------------------------------------------------
    logger.log_file = None
    if resolved_log_dir:
        log_dir_path = Path(resolved_log_dir).expanduser()
        log_dir_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_file_path = log_dir_path / f"{resolved_file_prefix}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            EmojiFormatter(
                fmt="%(asctime)s %(level_emoji)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        file_handler.setLevel(logging.NOTSET)
        logger.addHandler(file_handler)
        logger.log_file = log_file_path

    # ------------------------------------------------------------------
    # Finalize
    # ------------------------------------------------------------------
    logger.propagate = False
    logger._initialized = True  # type: ignore[attr-defined]
    logger.debug(
        "Logger initialized at level %s (Rich=%s)",
        resolved_level,
        "ON" if logger.rich_enabled else "OFF",
    )
    if logger.log_file is not None:
        logger.info("📄 Log file created at: %s", logger.log_file.resolve())

    return logger


# ----------------------------------------------------------------------
# UTILITY ACCESSOR
# ----------------------------------------------------------------------

def get_logger(name: str = BASE_LOGGER_NAME) -> FiletoolsLogger:
    """Retrieve a namespaced filetools logger (configured later via setup_logging)."""

    logging.setLoggerClass(FiletoolsLogger)
    base = cast(FiletoolsLogger, logging.getLogger(BASE_LOGGER_NAME))

    if not getattr(base, "_initialized", False) and not base.handlers:
        base.addHandler(logging.NullHandler())

    if not name or name == BASE_LOGGER_NAME:
        return base
    if name.startswith(BASE_LOGGER_NAME + "."):
        return cast(FiletoolsLogger, logging.getLogger(name))

    return cast(FiletoolsLogger, base.getChild(name))
