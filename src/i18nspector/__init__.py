"""
i18nspector - localization reference checker
"""

__version__ = "0.3.1"
