"""
Pytest configuration and fixtures
"""

import pytest
from pathlib import Path
from typing import Callable, Dict, Union

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from i18nspector.config.settings import InspectorSettings
from i18nspector.models import ParseContext, Resource

ENV_VARIABLES = (
    'I18NSPECTOR_BASE_LANGUAGE', 'I18NSPECTOR_RESOURCE_EXTENSIONS', 'I18NSPECTOR_SOURCE_CODE_EXTENSIONS',
    'I18NSPECTOR_RESOURCE_PATHS', 'I18NSPECTOR_SOURCE_CODE_PATHS', 'I18NSPECTOR_CHECK_ORPHANED_STRINGS',
    'I18NSPECTOR_CHECK_UNTRANSLATED_STRINGS', 'I18NSPECTOR_VERBOSE'
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep a developer's I18NSPECTOR_* variables out of the tests."""
    for name in ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_files(tmp_path: Path) -> Callable[[Dict[str, Union[str, bytes]]], Path]:
    """Create files below tmp_path from a {relative path: content} mapping."""
    def write(files: Dict[str, Union[str, bytes]]) -> Path:
        for relative_path, content in files.items():
            path = tmp_path / relative_path
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return tmp_path
    return write


@pytest.fixture
def make_settings() -> Callable[..., InspectorSettings]:
    """Create test settings."""
    def make(**values) -> InspectorSettings:
        return InspectorSettings(**values)
    return make


@pytest.fixture
def resources() -> Dict[str, Resource]:
    """Empty shared resource map."""
    return {}


@pytest.fixture
def context_for(resources: Dict[str, Resource]) -> Callable[[str, str], ParseContext]:
    def make(file_path: str, language_tag: str) -> ParseContext:
        return ParseContext(file_path=file_path, language_tag=language_tag, resources=resources)
    return make


@pytest.fixture
def defined(resources: Dict[str, Resource]) -> Callable[..., Dict[str, Resource]]:
    """Define keys in the base language, as if parsed from en.json."""
    def define(*keys: str) -> Dict[str, Resource]:
        for line, key in enumerate(keys, start=1):
            resource = resources.setdefault(key, Resource(key))
            resource.define('en', f"en.json:{line}", key.upper())
        return resources
    return define
