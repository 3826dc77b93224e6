import uuid

import pytest

from localstore import LocalStorageConfiguration


@pytest.fixture
def unique_config(tmp_path):
    """Build a configuration pointing at a fresh file under tmp_path."""

    def _make(**overrides) -> LocalStorageConfiguration:
        options = {
            "filename":  uuid.uuid4().hex,
            "directory": str(tmp_path),
        }
        options.update(overrides)
        return LocalStorageConfiguration(**options)

    return _make


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path
