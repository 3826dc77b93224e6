from dataclasses import dataclass, field


class Settings:
    """Centralised library defaults."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "LocalStore"
    APP_VERSION = "1.0.0"

    # ── backing file ─────────────────────────────────────────────
    DEFAULT_FILENAME = ".localstorage"
    DEFAULT_SALT     = ".localstorage"
    FILE_ENCODING    = "utf-8"

    # ── crypto defaults ──────────────────────────────────────────
    KDF_ITERATIONS = 1_000_000
    AES_KEY_SIZE   = 32          # 256 bits
    AES_BLOCK_SIZE = 16          # 128 bits, also the IV size

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class CodecSettings:
    """Options for conversion to/from JSON."""

    indent: int | None = None
    strict: bool       = False
    ensure_ascii: bool = False


@dataclass(frozen=True)
class LocalStorageConfiguration:
    """
    Behavioural switches for one LocalStorage instance.

    auto_unpersist     load previously persisted state on construction
    auto_persist       persist the latest state on close()
    enable_encryption  encrypt every stored value (requires a password)
    encryption_salt    salt fed to key derivation when encrypting
    filename           name of the backing file
    read_only_mode     reject store() and persist()
    directory          folder holding the backing file (cwd when None)
    """

    auto_unpersist: bool    = True
    auto_persist: bool      = True
    enable_encryption: bool = False
    encryption_salt: str    = Settings.DEFAULT_SALT
    filename: str           = Settings.DEFAULT_FILENAME
    read_only_mode: bool    = False
    serializer_settings: CodecSettings = field(default_factory=CodecSettings)
    directory: str | None   = None
