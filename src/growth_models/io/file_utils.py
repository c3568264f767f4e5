# growth_models/io/file_utils.py
"""
File I/O utilities for loading and saving configuration data.

This module provides safe JSON file operations with proper error handling
and logging for parameter and grid configuration files.

Example:
    >>> from growth_models.io.file_utils import load_json_file, save_json_file
    >>> data = load_json_file("config.json")
    >>> save_json_file(data, "backup/config.json")
"""

import json
import os
import logging
from typing import Dict, Any

from growth_models.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_json_file(filename: str) -> Dict[str, Any]:
    """
    Safely load a JSON file with comprehensive error handling.

    Args:
        filename: Path to the JSON file.

    Returns:
        Parsed JSON data as a dictionary.

    Raises:
        ConfigurationError: If the file is missing, unreadable, or does not
            hold a JSON object.
    """
    if not os.path.exists(filename):
        logger.error(f"File '{filename}' not found.")
        raise ConfigurationError(f"File '{filename}' not found.")

    try:
        with open(filename, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {filename}: {e}")
        raise ConfigurationError(f"Invalid JSON in {filename}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading {filename}: {e}")
        raise ConfigurationError(f"Error reading {filename}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Expected a JSON object in {filename}, got {type(data).__name__}."
        )
    return data


def save_json_file(data: Dict[str, Any], filename: str) -> None:
    """
    Save data to a JSON file with directory creation.

    Args:
        data: Dictionary to serialize to JSON.
        filename: Target file path.

    Raises:
        IOError: If write operation fails.
    """
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    try:
        with open(filename, 'w') as f:
            json.dump(data, f, indent=4)
        logger.info(f"Saved data to {filename}")
    except IOError as e:
        logger.error(f"Failed to save to {filename}: {e}")
        raise
