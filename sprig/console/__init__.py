"""Rich, structured console output for sprig.

Diagnostics go to stderr; stdout is left to the report itself.

Usage:
    from sprig.console import logger

    logger.info("Reading request...")
    logger.warning("No functions given")
    logger.error("Unrecognized output format 'yaml'")

    logger.header("top", "./app.wasm")
    logger.key_value({"number": "unbounded", "format": "text"})
"""
from sprig.console.logger import Logger, get_logger

# Module-level singleton for convenient import
logger = get_logger()

__all__ = ["Logger", "get_logger", "logger"]
