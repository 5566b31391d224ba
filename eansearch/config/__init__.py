"""
Configuration management for the EAN-Search client.
"""

from eansearch.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
