from .file_helpers import (
    get_local_store_file_path, atomic_write_text, read_text, delete_file,
)
from .log_setup    import configure_logging

__all__ = ["get_local_store_file_path", "atomic_write_text", "read_text",
           "delete_file", "configure_logging"]
