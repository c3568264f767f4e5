# growth_models/config/economic_params.py
"""
Economic parameter definitions and loading utilities.

This module defines the structural parameters of the deterministic
neoclassical growth model.  Parameters are immutable after initialization
to prevent accidental modification while a model is being solved.

Example:
    >>> from growth_models.config.economic_params import load_economic_params
    >>> params = load_economic_params("config/params.json")
    >>> print(f"Discount factor: {params.discount_factor}")
"""

from dataclasses import dataclass, fields
import logging

from growth_models.core.errors import ConfigurationError
from growth_models.io.file_utils import load_json_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EconomicParams:
    """
    Immutable container for the structural parameters of the growth model.

    Attributes:
        discount_factor: Time preference parameter (beta), must be in (0, 1).
        depreciation_rate: Capital depreciation rate (delta), in [0, 1].
        risk_aversion: CRRA coefficient (sigma), non-negative; 1 is log utility.
        technology_level: Total factor productivity (A), positive.
        capital_share: Output elasticity of capital (alpha), in (0, 1).

    Raises:
        ConfigurationError: If any parameter lies outside its valid range.
    """

    discount_factor: float = 0.96
    depreciation_rate: float = 0.1
    risk_aversion: float = 1.0
    technology_level: float = 1.0
    capital_share: float = 0.33

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        self._validate_discount_factor()
        self._validate_technology()

    def _validate_discount_factor(self) -> None:
        """Ensure discount factor is economically meaningful."""
        if not (0 < self.discount_factor < 1):
            raise ConfigurationError(
                f"Discount factor must be in (0, 1), got {self.discount_factor}"
            )

    def _validate_technology(self) -> None:
        if not (0 <= self.depreciation_rate <= 1):
            raise ConfigurationError(
                f"Depreciation rate must be in [0, 1], got {self.depreciation_rate}"
            )
        if self.risk_aversion < 0:
            raise ConfigurationError(
                f"Risk aversion must be non-negative, got {self.risk_aversion}"
            )
        if self.technology_level <= 0:
            raise ConfigurationError(
                f"Technology level must be positive, got {self.technology_level}"
            )
        if not (0 < self.capital_share < 1):
            raise ConfigurationError(
                f"Capital share must be in (0, 1), got {self.capital_share}"
            )


def load_economic_params(filename: str) -> EconomicParams:
    """
    Load economic parameters from a JSON file.

    Unknown keys are ignored with a warning; missing keys take the
    dataclass defaults.

    Args:
        filename: Path to the JSON configuration file.

    Returns:
        Populated EconomicParams instance.

    Raises:
        ConfigurationError: If the file cannot be read or a value is invalid.
    """
    data = load_json_file(filename)
    valid_keys = {f.name for f in fields(EconomicParams)}
    unknown = sorted(set(data) - valid_keys)
    if unknown:
        logger.warning(f"Ignoring unknown parameters in {filename}: {unknown}")
    return EconomicParams(**{k: v for k, v in data.items() if k in valid_keys})
