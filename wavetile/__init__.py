"""wavetile - Socket-constrained tile grid generation."""

__version__ = "0.1.0"
