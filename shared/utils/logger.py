"""
Logging utilities for Guide Validator

Configures stdlib logging and structlog once per process.
"""

import os
import logging
import logging.config
from typing import Optional, Dict, Any

import structlog
import yaml

# Default logging configuration
DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(message)s'
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'plain',
            'stream': 'ext://sys.stdout'
        }
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console']
    },
    'loggers': {
        'uvicorn.access': {
            'level': 'WARNING',
            'propagate': True
        }
    }
}


def _load_config_file(config_path: str) -> Optional[Dict[str, Any]]:
    """Load a YAML dictConfig file, returning None when unusable"""
    if not os.path.exists(config_path):
        return None
    try:
        with open(config_path, 'r') as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logging.getLogger(__name__).warning(
            "Failed to load logging config from %s: %s", config_path, e
        )
        return None


def configure_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    config_path: Optional[str] = None
) -> None:
    """
    Setup stdlib logging and structlog

    Args:
        log_level: Root log level name
        log_format: 'json' for machine-readable output, anything else renders for humans
        config_path: Optional YAML dictConfig file overriding the defaults
    """
    config = None
    if config_path:
        config = _load_config_file(config_path)

    if not config:
        config = {
            **DEFAULT_LOGGING_CONFIG,
            'root': {**DEFAULT_LOGGING_CONFIG['root'], 'level': log_level.upper()},
        }

    logging.config.dictConfig(config)

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
