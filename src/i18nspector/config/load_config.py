"""
Configuration loading utilities
"""

import logging
from typing import Any, Dict, Optional
from .settings import InspectorSettings

logger = logging.getLogger(__name__)


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> InspectorSettings:
    """Load settings from the environment, then apply command-line overrides"""
    try:
        settings = InspectorSettings.from_env(**(overrides or {}))
        logger.debug("Configuration loaded successfully")
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        raise

    return settings
