from .database_loader import DatabaseLoader
from .file_loader import FileLoader

__all__ = ["DatabaseLoader", "FileLoader"]
