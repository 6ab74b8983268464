"""Configuration module: exports Settings."""

from groupie_tracker.config.settings import Settings

__all__ = ["Settings"]
