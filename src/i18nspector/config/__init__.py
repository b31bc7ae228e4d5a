"""
Configuration module for i18nspector
"""

from .settings import InspectorSettings, parse_list, parse_toggle
from .load_config import load_settings

__all__ = ['InspectorSettings', 'parse_list', 'parse_toggle', 'load_settings']
