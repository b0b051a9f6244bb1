import logging.config
import os
import sys

from dotenv import load_dotenv
from rich.console import Console

LOG_FILE_NAME = "xpath-mcp.log"


def setup_logging():
    """
    Configures logging for the servers and the CLI.

    Reads configuration from environment variables:
    - LOG_DIR: Directory for log files (default: "logs"). Set it to an empty
      string to log to stderr only.
    - LOG_LEVEL: Logging level (default: "INFO")
      Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL (case-insensitive)

    Console output always goes to stderr; stdout carries the MCP protocol.
    """
    load_dotenv()
    log_dir = os.getenv("LOG_DIR", "logs")

    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    log_level = log_level_map.get(log_level_str, logging.INFO)

    if log_level_str not in log_level_map:
        print(
            f"Warning: Invalid LOG_LEVEL '{os.getenv('LOG_LEVEL')}'. "
            f"Valid values: {', '.join(log_level_map.keys())}. Using INFO.",
            file=sys.stderr,
        )
        log_level_str = "INFO"

    handlers = {
        "rich": {
            "class": "rich.logging.RichHandler",
            "rich_tracebacks": True,
            "formatter": "default",
            "console": Console(file=sys.stderr),
            "level": log_level,
        },
    }

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": os.path.join(log_dir, LOG_FILE_NAME),
            "maxBytes": 1024 * 1024 * 5,  # 5 MB
            "backupCount": 5,
            "formatter": "detailed",
            "level": log_level,
        }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(message)s",
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
        },
        "handlers": handlers,
        "root": {
            "level": log_level,
            "handlers": list(handlers),
        },
    }

    logging.config.dictConfig(logging_config)
    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured successfully. Level: {log_level_str}")
