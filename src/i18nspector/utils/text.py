"""
Text formatting utilities
"""


def pluralize(count: int, noun: str) -> str:
    return noun if count == 1 else f"{noun}s"


def format_count(count: int, noun: str) -> str:
    """`1 string`, `2 strings`"""
    return f"{count} {pluralize(count, noun)}"


def format_location(file_path: str, line: int) -> str:
    return f"{file_path}:{line}"
