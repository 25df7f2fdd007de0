"""
Storage Layer.

This package handles the configuration file. Reports are written by the
libraries themselves.
"""

from .config_manager import ConfigManager

__all__ = ["ConfigManager"]
