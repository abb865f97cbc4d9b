"""Configuration loading."""

from ghprojects.core.config.loader import detect_repository, load_config, parse_repository

__all__ = ["detect_repository", "load_config", "parse_repository"]
