"""Logging infrastructure for Recipe Image Service.

Provides centralized logging with configurable format (text/JSON) and level.
Configured via environment variables:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
- LOG_TYPE: text, json (default: text)

Cascade code logs through recipe_logger() so every line of one resolution
carries the recipe name it belongs to.
"""

import json
import logging
import os
import sys
from typing import Any, Optional


# Extra record attributes copied into structured output when present
CONTEXT_FIELDS = ("recipe_name", "cuisine", "provider")


class JSONFormatter(logging.Formatter):
    """Formatter that outputs structured JSON."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format.

        Returns:
            JSON string with timestamp, level, logger name, message, resolution
            context fields and optional traceback.
        """
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class RichTextFormatter(logging.Formatter):
    """Formatter that outputs colored text with a level tag and resolution context."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "\033[32m",       # Green
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as colored text.

        Args:
            record: Log record to format.

        Returns:
            Formatted string with color codes, and a [recipe/provider] tag when
            the record carries resolution context.
        """
        level = record.levelname
        color = self.COLORS.get(level, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")

        context = "/".join(
            str(getattr(record, field)) for field in ("recipe_name", "provider") if getattr(record, field, None)
        )
        tag = f"[{context}] " if context else ""

        message = f"{color}{timestamp} {level:<8} {record.name:<16} {tag}{record.getMessage()}{reset}"

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Create and configure logger instance.

    Args:
        name: Logger name, typically module name.
        level: Optional level name overriding LOG_LEVEL.

    Returns:
        Configured logger instance.
    """
    logger_instance = logging.getLogger(name)

    # Return existing logger if already configured
    if logger_instance.handlers:
        return logger_instance

    log_level_str = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_type = os.getenv("LOG_TYPE", "text").lower()

    log_level = getattr(logging, log_level_str, logging.INFO)
    logger_instance.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(JSONFormatter() if log_type == "json" else RichTextFormatter())
    logger_instance.addHandler(handler)

    return logger_instance


def recipe_logger(recipe_name: str, cuisine: str = "", provider: str = "") -> logging.LoggerAdapter:
    """Return an adapter that stamps resolution context onto every record.

    Args:
        recipe_name: Recipe being resolved.
        cuisine: Optional cuisine of the recipe.
        provider: Optional provider stage name.

    Returns:
        LoggerAdapter wrapping the module-level logger.
    """
    return logging.LoggerAdapter(
        logger,
        {"recipe_name": recipe_name, "cuisine": cuisine, "provider": provider},
    )


# Create module-level logger instance
logger = get_logger("recipe_images")

# Suppress verbose connection logs from the HTTP client
logging.getLogger("aiohttp.client").setLevel(logging.WARNING)
logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
