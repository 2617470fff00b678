"""
Main module - Main/Composition Root Layer

This module serves as the entry point for the checks, orchestrating
the initialization and configuration of all other layers.

Its primary responsibilities include:
- Loading settings from the environment and command line
- Configuring dependencies and services (Composition Root)
- Exposing the click commands used as console scripts
"""

from .config import AppSettings, apply_overrides, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "apply_overrides",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
