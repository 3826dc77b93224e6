from .local_storage import LocalStorage
from .store         import Store
from .codec         import JsonCodec
from .errors        import (
    ErrorMessages, LocalStorageError, ConfigError, ValidationError,
    ReadOnlyError, NotFoundError, DeserializationError, CryptoError,
)

__all__ = [
    "LocalStorage", "Store", "JsonCodec", "ErrorMessages",
    "LocalStorageError", "ConfigError", "ValidationError", "ReadOnlyError",
    "NotFoundError", "DeserializationError", "CryptoError",
]
