"""Logging configuration for applications embedding the evaluator."""
import logging
import sys
import os
from typing import Optional

def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for an embedding application.

    The library itself never calls this; it only emits records through
    module-level loggers.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). If None,
               the level comes from EvaluatorConfig.from_env().
        log_file: Optional path to log file. If None, logs to stdout.
    """
    if level is None:
        from exprlang.system.models import EvaluatorConfig
        level = EvaluatorConfig.from_env().log_level

    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    config = {
        'level': numeric_level,
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    if log_file:
        # Ensure directory exists
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        config['filename'] = log_file
    else:
        config['stream'] = sys.stdout

    logging.basicConfig(**config)

    logging.info("Logging initialized at %s level", level.upper())

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
