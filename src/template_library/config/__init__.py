"""Configuration for the template library assembler."""

from template_library.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
