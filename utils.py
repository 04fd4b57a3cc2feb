# utils.py
"""
Utility functions for the particle field.

This module provides helpers that are used by the entry point but do not
belong to the animation itself: logging setup, configuration loading and
construction of the seeded random source.
"""
import logging
import logging.handlers
import json
import os
from typing import Dict, Any, Optional

import numpy as np

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary that may contain a "logging" key with "level",
#       "format", and "log_file" sub-keys. Missing keys use defaults.
#   - Outputs: None
#   - Side Effects: Configures the root Python logger. Creates the log
#     directory if it doesn't exist. Sets up a console handler and a
#     rotating file handler (no file handler when "log_file" is empty).
#
# load_config(path: str) -> Dict[str, Any]:
#   - Outputs: the parsed JSON document.
#   - Raises: FileNotFoundError, json.JSONDecodeError (logged, then re-raised).
#
# make_rng(seed: Optional[int]) -> np.random.Generator:
#   - Outputs: a Generator seeded with `seed`, or from OS entropy when None.

DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEFAULT_LOG_FILE = 'logs/particle_field.log'


def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the logging system from a configuration dictionary.

    Sets up logging to the console and, unless disabled, to a rotating file.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', DEFAULT_LOG_FORMAT)
    log_file_path = log_config.get('log_file', DEFAULT_LOG_FILE)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        # Rotates when the log reaches 1MB, keeps 5 backup logs.
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=1024*1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level set to {log_level}.")
    logging.debug(f"Log file path: {log_file_path or '(disabled)'}")


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
        logging.info("Configuration loaded successfully.")
        return config
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Creates the random source used to lay out the field."""
    # Rule 12: All randomness is controlled by a single master seed.
    if seed is None:
        logging.info("No seed configured. Field layout will differ between runs.")
    else:
        logging.info(f"Using random seed {seed}.")
    return np.random.default_rng(seed)
