from .file_manager import ParsingFileManager

__all__ = ["ParsingFileManager"]
