#!/usr/bin/env python3
"""
Configuration management for the Tavara matching web application.
"""

import os
from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads the file named by TAVARA_CONFIG, or config.yaml at the project
    root, and applies environment variable overrides. Result is cached
    for performance.

    Returns:
        AppConfig: The application configuration.
    """
    config_path = os.environ.get("TAVARA_CONFIG") or str(get_project_root() / 'config.yaml')
    return load_config(config_path)


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent
