"""
In-memory key → serialized-value mapping.
"""


class Store:
    """Plain data container; no I/O and no locking."""

    def __init__(self, entries: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(entries or {})

    @classmethod
    def from_dict(cls, entries: dict[str, str]) -> "Store":
        return cls(entries)

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str):
        # replace, never merge
        self._data.pop(key, None)
        self._data[key] = value

    def remove(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def contains(self, key: str) -> bool:
        return key in self._data

    def clear(self):
        self._data.clear()

    def count(self) -> int:
        return len(self._data)

    def keys(self) -> list[str]:
        return sorted(self._data)

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: str) -> bool:
        return key in self._data
