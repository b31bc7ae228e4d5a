"""
Services for i18nspector
"""

from .language_service import LanguageService
from .resource_service import ResourceService
from .source_code_service import SourceCodeService
from .inspection_service import InspectionService

__all__ = ['LanguageService', 'ResourceService', 'SourceCodeService', 'InspectionService']
