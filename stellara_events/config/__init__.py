"""Stellara Events -- Configuration package."""

from stellara_events.config.settings import StellaraSettings, get_settings

__all__ = ["StellaraSettings", "get_settings"]
