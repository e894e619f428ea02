"""Shared constants for wavetile.

Centralizes values used across multiple modules to ensure consistency.
"""

from pathlib import Path

# Random draws are non-negative ints in [0, MAX_RANDOM]
MAX_RANDOM = 2**31 - 1

# Command-line defaults (overridable through WAVETILE_* environment variables)
DEFAULT_WIDTH = 16
DEFAULT_HEIGHT = 12
DEFAULT_SEED = 42
DEFAULT_STEP_INTERVAL = 0.05  # Seconds between auto-steps in watch mode

# Catalog shipped with the package
DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "config" / "sand_walls.yaml"
