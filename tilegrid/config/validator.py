"""
Config validator

Checks:
- grid geometry invariants (cols, row height)
- layout invariants (ids, positions, sizes, overlaps)
- per-item size bounds
- items that need correct_bounds (warning only)
"""

import logging
import math
from dataclasses import dataclass
from typing import List

from tilegrid.config.schema import GridConfig
from tilegrid.errors import InvalidGridConfigError, LayoutValidationError
from tilegrid.layout_engine.occupancy import validate_layout

logger = logging.getLogger(__name__)


class ConfigValidationError(InvalidGridConfigError):
    """Config validation error"""

    def __init__(self, violations: List[str]):
        self.violations = violations
        super().__init__(f"Config validation failed: {violations}")


@dataclass
class ValidationResult:
    """Validation result"""
    is_valid: bool
    violations: List[str]
    warnings: List[str]


class ConfigValidator:
    """
    Grid config validator

    Two levels:
    1. invariants (violations, the config is rejected)
    2. suspicious but usable configs (warnings)
    """

    # above this, O(n^2) move resolution gets noticeable per frame
    MAX_RECOMMENDED_ITEMS = 500

    def validate(self, config: GridConfig) -> ValidationResult:
        """
        Run all checks

        Args:
            config: config instance

        Returns:
            ValidationResult
        """
        violations = []
        warnings = []

        violations.extend(self._check_geometry(config))
        violations.extend(self._check_layout(config))
        violations.extend(self._check_size_bounds(config))

        warnings.extend(self._check_bounds(config))

        return ValidationResult(
            is_valid=len(violations) == 0,
            violations=violations,
            warnings=warnings,
        )

    def validate_or_raise(self, config: GridConfig) -> None:
        """
        Validate, raising on violations

        Raises:
            ConfigValidationError: config is invalid
        """
        result = self.validate(config)

        if not result.is_valid:
            raise ConfigValidationError(result.violations)

        for warning in result.warnings:
            logger.warning("Grid config: %s", warning)

    def _check_geometry(self, config: GridConfig) -> List[str]:
        violations = []

        if not isinstance(config.cols, int) or config.cols < 1:
            violations.append(f"Invariant violated: cols ({config.cols!r}) >= 1")

        rh = config.row_height
        if not isinstance(rh, (int, float)) or not math.isfinite(rh) or rh <= 0:
            violations.append(f"Invariant violated: row_height ({rh!r}) > 0")

        return violations

    def _check_layout(self, config: GridConfig) -> List[str]:
        """Structural layout invariants (column overflow is only a warning)"""
        try:
            validate_layout(config.layout)
        except LayoutValidationError as e:
            return [f"Invariant violated: {v}" for v in e.violations]
        return []

    def _check_size_bounds(self, config: GridConfig) -> List[str]:
        violations = []

        for item in config.layout:
            if item.min_w < 1 or item.min_h < 1:
                violations.append(f"{item.id}: min size below 1 ({item.min_w}x{item.min_h})")
            if item.max_w is not None and item.max_w < item.min_w:
                violations.append(f"{item.id}: max_w ({item.max_w}) < min_w ({item.min_w})")
            if item.max_h is not None and item.max_h < item.min_h:
                violations.append(f"{item.id}: max_h ({item.max_h}) < min_h ({item.min_h})")

        return violations

    def _check_bounds(self, config: GridConfig) -> List[str]:
        warnings = []

        for item in config.layout:
            if item.x + item.w > config.cols:
                warnings.append(
                    f"{item.id} overflows {config.cols} columns (x={item.x}, w={item.w}), "
                    "correct_bounds will move it"
                )

        if len(config.layout) > self.MAX_RECOMMENDED_ITEMS:
            warnings.append(
                f"layout has {len(config.layout)} items (> {self.MAX_RECOMMENDED_ITEMS}), "
                "gesture frames may be slow"
            )

        return warnings
