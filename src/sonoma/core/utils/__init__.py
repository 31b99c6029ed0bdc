"""Shared utilities (I/O, location resolution, prompts)."""
