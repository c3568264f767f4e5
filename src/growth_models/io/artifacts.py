# growth_models/io/artifacts.py
"""
Utilities for saving and loading numerical artifacts.

This module handles persistence of VFI solutions using NumPy's
``.npz`` format.  Scalars (iteration count, convergence flag, parameter
metadata) come back as 0-d arrays.

Example:
    >>> from growth_models.io.artifacts import save_vfi_results, load_vfi_results
    >>> save_vfi_results(solution, "results/growth.npz")
    >>> restored = load_vfi_results("results/growth.npz")
"""

import logging
import os
from typing import Any, Dict

import numpy as np

logger = logging.getLogger(__name__)


def save_vfi_results(results: Dict[str, Any], filename: str) -> None:
    """
    Save VFI results to a NumPy archive.

    Args:
        results: Solution dictionary (V, K, policy arrays, metadata).
        filename: Target file path (should end with .npz).
    """
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filename, "wb") as f:
        np.savez(f, **results)
    logger.info(f"Saved VFI results to {filename}")


def load_vfi_results(filename: str) -> Dict[str, np.ndarray]:
    """
    Load VFI results from a NumPy archive.

    Args:
        filename: Path to the .npz file.

    Returns:
        Dictionary containing loaded arrays.
    """
    with np.load(filename) as data:
        return {key: data[key] for key in data.files}
