"""
JSON codec for stored values and for the backing-file document.

Values go through pydantic so a caller can ask for a concrete type on
the way out (``int``, ``datetime``, ``list[Car]`` …) and get a clear
failure when the stored text does not fit it.
"""

import json
import math
from functools import lru_cache
from typing import Any

import pydantic
from pydantic import TypeAdapter

from ..config.settings import CodecSettings
from .errors import DeserializationError, ValidationError


@lru_cache(maxsize=128)
def _cached_adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def _adapter(type_: Any) -> TypeAdapter:
    try:
        return _cached_adapter(type_)
    except TypeError:             # unhashable type descriptor
        return TypeAdapter(type_)


def _has_non_finite(data: Any) -> bool:
    if isinstance(data, float):
        return not math.isfinite(data)
    if isinstance(data, dict):
        return any(_has_non_finite(v) for v in data.values())
    if isinstance(data, (list, tuple, set, frozenset)):
        return any(_has_non_finite(v) for v in data)
    return False


class JsonCodec:
    """Serialize instances to JSON text and parse them back."""

    def __init__(self, settings: CodecSettings | None = None):
        self.settings = settings or CodecSettings()

    # ── values ───────────────────────────────────────────────────
    def encode(self, value: Any) -> str:
        adapter = _adapter(Any)
        try:
            # JSON has no literal for inf or nan
            if _has_non_finite(adapter.dump_python(value)):
                raise ValidationError(
                    "Non-finite floats (inf, nan) cannot be stored"
                )
            return adapter.dump_json(value).decode("utf-8")
        except ValueError as exc:      # PydanticSerializationError
            raise ValidationError(
                f"Cannot serialize value of type {type(value).__name__}"
            ) from exc

    def decode(self, text: str, type_: Any = Any) -> Any:
        try:
            return _adapter(type_).validate_json(
                text, strict=self.settings.strict
            )
        except (pydantic.ValidationError, ValueError) as exc:
            raise DeserializationError(
                f"Cannot decode stored value as {_type_name(type_)}"
            ) from exc

    def decode_untyped(self, text: str) -> Any:
        try:
            return json.loads(text)
        except ValueError as exc:
            raise DeserializationError("Stored value is not valid JSON") from exc

    # ── whole-store document ─────────────────────────────────────
    def encode_document(self, entries: dict[str, str]) -> str:
        return json.dumps(
            entries,
            indent=self.settings.indent,
            ensure_ascii=self.settings.ensure_ascii,
        )

    def decode_document(self, text: str) -> dict[str, str]:
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise DeserializationError(
                "Backing file is not valid JSON"
            ) from exc

        if not isinstance(data, dict) or not all(
            isinstance(v, str) for v in data.values()
        ):
            raise DeserializationError(
                "Backing file must hold a JSON object of string values"
            )
        return data


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", None) or repr(type_)
