"""Core (non-CLI) building blocks for Sonoma."""
