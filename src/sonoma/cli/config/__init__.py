"""Configuration management commands (get, set, list, reset, network)."""
