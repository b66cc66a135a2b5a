"""Logging utilities for the filter DSL."""

import logging
import sys

from filter_dsl.config import settings

# Create and configure package logger
logger = logging.getLogger("filter_dsl")

logger.setLevel(settings.logging_level)

# Create formatter with process and thread IDs for writer identification
formatter = logging.Formatter("%(asctime)s - PID:%(process)d - Thread:%(thread)d - %(name)s - %(levelname)s - %(message)s")

# Create and configure stdout handler
if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

# Prevent propagation to root logger to avoid duplicate logs
logger.propagate = False
