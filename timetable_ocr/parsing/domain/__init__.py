"""Domain слой домена Parsing: исключения."""

from .exceptions import (
    ParsingError,
    PatternMismatchError,
    TemplateConfigurationError,
    ParsingFileSystemError,
    ParsingFileWriteError,
)

__all__ = [
    "ParsingError",
    "PatternMismatchError",
    "TemplateConfigurationError",
    "ParsingFileSystemError",
    "ParsingFileWriteError",
]
