"""
Centralized logging configuration for multi-environment support.

Environment Behavior:
    - Local Development: Logs written to files in logs/ directory
    - Render Production: Logs written to stdout for visibility in Render console

Simple Usage:
    from logging_config import setup_logging
    setup_logging('secret_message')
    logging.info("This will go to the right place automatically")

Utility Functions:
    from logging_config import log_document_summary
    log_document_summary("fetch", "https://example.com", html, logger)
"""

import logging
import os
import sys


def setup_logging(script_name: str, level=logging.INFO):
    """
    Configure logging based on execution environment.

    Args:
        script_name (str): Name of the script (used for log filename in local mode)
        level (int): Logging level (default: logging.INFO)

    Environment Detection:
        - RENDER='true': Logs to stdout (for Render console)
        - Otherwise: Logs to logs/{script_name}_log.txt

    Example:
        setup_logging('secret_message')
        logging.info("Decoding document...")  # Goes to right destination automatically
    """
    is_render = os.getenv('RENDER') == 'true'

    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    date_format = '%Y-%m-%d %H:%M:%S'

    if is_render:
        logging.basicConfig(
            level=level,
            format=log_format,
            datefmt=date_format,
            handlers=[logging.StreamHandler(sys.stdout)],
            force=True  # Override any existing configuration
        )
        logging.info(f"Logging configured for Render (stdout) - {script_name}")
    else:
        log_dir = 'logs'
        os.makedirs(log_dir, exist_ok=True)

        log_file = f"{log_dir}/{script_name}_log.txt"

        logging.basicConfig(
            filename=log_file,
            filemode='a',
            level=level,
            format=log_format,
            datefmt=date_format,
            force=True  # Override any existing configuration
        )
        logging.info(f"Logging configured for local development (file: {log_file})")


def resolve_level(level_name, default=logging.INFO) -> int:
    """
    Translate a level name from config (e.g. 'DEBUG') into a logging constant.

    Unknown names fall back to the default rather than failing the run.
    """
    if isinstance(level_name, int):
        return level_name
    if not level_name:
        return default
    level = logging.getLevelName(str(level_name).strip().upper())
    return level if isinstance(level, int) else default


def log_document_summary(function_name: str, url: str, document_text: str, logger: logging.Logger = None) -> None:
    """
    Log a brief summary of a fetched document (length plus the first 100 characters).

    Args:
        function_name: Name of the calling function (for debugging)
        url: The URL the document came from
        document_text: The full document body
        logger: Logger instance to use. If None, uses this module's logger.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if not document_text:
        logger.warning(f"{function_name}: Empty document from {url}")
        return

    text_len = len(document_text)
    preview = document_text[:100].replace('\n', ' ').replace('\r', ' ')
    logger.info(f"{function_name}: Fetched {text_len:,} chars from {url}: {preview}")
