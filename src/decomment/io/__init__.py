"""File system collaborators: traversal and text storage."""
from .storage import TextFileStorage, formatted_copy_path
from .walker import DirectoryWalker

__all__ = ["DirectoryWalker", "TextFileStorage", "formatted_copy_path"]
