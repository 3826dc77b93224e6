"""
Backing-file location and whole-file replacement.
"""

import os
import tempfile

from ..config.settings import Settings


def get_local_store_file_path(filename: str,
                              directory: str | None = None) -> str:
    """Join *filename* onto *directory*, or onto the working directory."""
    return os.path.join(directory or os.getcwd(), filename)


def atomic_write_text(path: str, text: str,
                      encoding: str = Settings.FILE_ENCODING):
    """
    Replace the contents of *path* with *text* in one step.

    Readers see either the previous file or the new one, never a
    half-written mix.
    """
    directory, name = os.path.split(os.path.abspath(path))
    fd, tmp = tempfile.mkstemp(prefix=f"{name}.", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


def read_text(path: str,
              encoding: str = Settings.FILE_ENCODING) -> str | None:
    """Return the file's contents, or None when it does not exist."""
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def delete_file(path: str) -> bool:
    if not os.path.exists(path):
        return False
    os.remove(path)
    return True
