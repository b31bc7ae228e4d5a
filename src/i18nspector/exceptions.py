"""
Exceptions raised when a run cannot complete
"""

from typing import List


class InspectionError(Exception):
    """Base class for failures that abort a run"""


class BaseLanguageNotFoundError(InspectionError):
    """No directory or resource file is named after the base language"""

    def __init__(self, resource_path: str, language_tag: str, extensions: List[str]):
        super().__init__(
            f"No directory or {', '.join(extensions)} file named after base language tag "
            f"'{language_tag}' was found in {resource_path}."
        )
        self.resource_path = resource_path
        self.language_tag = language_tag


class NoSourceCodeFilesError(InspectionError):
    """A source code path holds no file referencing any string"""

    def __init__(self, source_code_path: str, extensions: List[str]):
        super().__init__(
            f"No {', '.join(extensions)} source code files with string references "
            f"were found in {source_code_path}."
        )
        self.source_code_path = source_code_path


class ResourceParseError(InspectionError):
    """Resource file is too malformed to parse"""

    def __init__(self, file_path: str, line: int, message: str):
        super().__init__(f"{message} at {file_path}:{line}")
        self.file_path = file_path
        self.line = line


class UnreadablePathError(InspectionError):
    """A configured path, or something below it, cannot be listed or read"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
