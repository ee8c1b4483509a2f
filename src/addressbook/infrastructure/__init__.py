"""Infrastructure layer: concrete implementations of application ports, and settings."""

from addressbook.infrastructure.memory_storage import InMemoryStorage
from addressbook.infrastructure.settings import Settings, load_env_file
from addressbook.infrastructure.storage import DEFAULT_STORAGE_FILEPATH, YamlStorageFile

__all__ = [
    "DEFAULT_STORAGE_FILEPATH",
    "InMemoryStorage",
    "Settings",
    "YamlStorageFile",
    "load_env_file",
]
