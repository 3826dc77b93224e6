"""
LocalStore — a single-file key-value store with optional AES encryption.
"""

from .config.settings import Settings, CodecSettings, LocalStorageConfiguration
from .core import (
    LocalStorage, ErrorMessages, LocalStorageError, ConfigError,
    ValidationError, ReadOnlyError, NotFoundError, DeserializationError,
    CryptoError,
)

__version__ = Settings.APP_VERSION

__all__ = [
    "LocalStorage", "LocalStorageConfiguration", "CodecSettings", "Settings",
    "ErrorMessages", "LocalStorageError", "ConfigError", "ValidationError",
    "ReadOnlyError", "NotFoundError", "DeserializationError", "CryptoError",
    "__version__",
]
