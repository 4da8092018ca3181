"""Repository layer for data access."""

from .filesystem import FilesystemRepository
from .memory import MemoryRepository
from .protocol import StorageProtocol

__all__ = [
    "FilesystemRepository",
    "MemoryRepository",
    "StorageProtocol",
]
