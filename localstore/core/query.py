from typing import Any, Callable, Iterable


def filter_collection(collection: Iterable[Any],
                      predicate: Callable[[Any], bool] | None = None) -> list:
    """Return the items of *collection* matching *predicate* (all when None)."""
    if predicate is None:
        return list(collection)
    return [item for item in collection if predicate(item)]
