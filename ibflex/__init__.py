"""Schema version and statement type detection for Interactive Brokers FLEX XML."""

__version__ = "0.1.6"
__all__ = ["version"]