"""
Configuration

Includes:
- schema: GridConfig snapshot
- loader: YAML loading and layout hashing
- validator: config validation
"""

from tilegrid.config.schema import GridConfig
from tilegrid.config.loader import compute_layout_hash, load_config, parse_config
from tilegrid.config.validator import ConfigValidator, ConfigValidationError, ValidationResult

__all__ = [
    "GridConfig",
    "compute_layout_hash",
    "load_config",
    "parse_config",
    "ConfigValidator",
    "ConfigValidationError",
    "ValidationResult",
]
