from .settings import Settings, CodecSettings, LocalStorageConfiguration

__all__ = ["Settings", "CodecSettings", "LocalStorageConfiguration"]
