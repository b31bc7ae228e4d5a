"""
Data models for i18nspector
"""

from .resource import Resource, Problem, Translation, base_key, get_or_create_resource
from .report import (
    BaseLanguage, ResourceFile, ParseContext, SourceCodeAnalysis, SourceCodeResult,
    UntranslatedResource, InspectionReport
)

__all__ = [
    'Resource', 'Problem', 'Translation', 'base_key', 'get_or_create_resource',
    'BaseLanguage', 'ResourceFile', 'ParseContext', 'SourceCodeAnalysis', 'SourceCodeResult',
    'UntranslatedResource', 'InspectionReport'
]
