"""
Logging configuration for the statement analyzer.
Statement text is only logged at DEBUG level, and then only in redacted form.
"""
import logging
import os
import sys
from typing import Optional

# Characters of a description kept when it is logged
REDACT_VISIBLE_CHARS = 4


def redact_description(text: Optional[str], visible: int = REDACT_VISIBLE_CHARS) -> str:
    """
    Shorten statement text for logs.
    
    Keeps the first few characters and the length, e.g.
    "NETFLIX.COM SUBSCRIPTION" -> "NETF… (24 chars)".
    
    Args:
        text: Description or raw statement line
        visible: Leading characters to keep
    
    Returns:
        Redacted text
    """
    if not text:
        return "<empty>"
    if len(text) <= visible:
        return "*" * len(text)
    return f"{text[:visible]}… ({len(text)} chars)"


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure and return a logger instance.
    
    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env LOG_LEVEL or INFO.
    
    Returns:
        Configured logger instance
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)
    
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    
    # Avoid duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(handler)
    
    return logger
