"""
Sonoma Labs CLI - agent management tools

The package centres on a layered configuration store that merges the
per-user config file, a discovered project config, and SONOMA_* environment
variables into one tree with write-through persistence.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
