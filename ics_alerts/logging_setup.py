"""Logging for the alert handler and its helpers.

Inside Lambda the runtime has already attached a handler to the root logger,
so only the configured level is applied. Locally the INI file named by
``log_config`` is loaded, with :func:`logging.basicConfig` as the fallback.
"""
from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Optional

from ics_alerts import config_module


def _log_config_path(cfg) -> Optional[Path]:
    if not cfg.log_config:
        return None
    path = Path(cfg.log_config)
    if not path.is_absolute():
        path = (cfg.repo_root or Path.cwd()) / path
    return path if path.exists() else None


def setup_logging() -> None:
    """Configure the root logger from ``ics_alerts.config``."""
    cfg = config_module.config
    root_logger = logging.getLogger()

    if root_logger.handlers:
        root_logger.setLevel(cfg.log_level)
        return

    config_path = _log_config_path(cfg)
    if config_path is not None:
        logging.config.fileConfig(config_path, disable_existing_loggers=False)
    else:
        logging.basicConfig(level=cfg.log_level)
    root_logger.setLevel(cfg.log_level)
