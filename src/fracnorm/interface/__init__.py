"""Interface subpackage.

This package keeps __init__ lightweight to avoid import cycles.
Use explicit imports from `fracnorm.interface.api` or `fracnorm.interface.cli`.
"""

__all__ = ["api", "cli"]
