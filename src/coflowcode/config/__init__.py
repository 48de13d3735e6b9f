"""
Configuration module.

Per-item grading configuration and the application settings used by the
command-line tools.
"""

from .loader import ConfigLoader
from .models import GradingConfig, Settings

__all__ = ["ConfigLoader", "GradingConfig", "Settings"]
