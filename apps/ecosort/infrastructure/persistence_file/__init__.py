"""File Persistence Infrastructure."""

from ecosort.infrastructure.persistence_file.state_storage_file import FileStateStorage

__all__ = ["FileStateStorage"]
