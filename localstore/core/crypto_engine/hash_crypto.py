"""
Password-based key derivation.
"""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ...config.settings import Settings


class HashCrypto:
    """Static helpers for PBKDF2 key derivation."""

    _ALGORITHMS = {
        "sha256": hashes.SHA256,
        "sha512": hashes.SHA512,
    }

    # ── KDFs ─────────────────────────────────────────────────────
    @staticmethod
    def pbkdf2(password: bytes, salt: bytes,
               iterations: int = Settings.KDF_ITERATIONS,
               key_length: int = 48,
               algorithm: str = "sha512") -> bytes:
        """Return *key_length* bytes derived from *password* and *salt*."""
        if algorithm not in HashCrypto._ALGORITHMS:
            raise ValueError(f"Unsupported PBKDF2 hash: {algorithm}")
        kdf = PBKDF2HMAC(
            algorithm=HashCrypto._ALGORITHMS[algorithm](),
            length=key_length,
            salt=salt,
            iterations=iterations,
        )
        return kdf.derive(password)

    @staticmethod
    def derive_key_and_iv(password: str, salt: str,
                          key_size: int = Settings.AES_KEY_SIZE,
                          iv_size: int = Settings.AES_BLOCK_SIZE,
                          iterations: int = Settings.KDF_ITERATIONS
                          ) -> tuple[bytes, bytes]:
        """
        Return *(key, iv)* from one PBKDF2-HMAC-SHA512 stream.

        The key takes the first *key_size* bytes and the IV the next
        *iv_size* bytes, so the same (password, salt) always yields
        the same pair.
        """
        material = HashCrypto.pbkdf2(
            password.encode("utf-8"), salt.encode("utf-8"),
            iterations=iterations, key_length=key_size + iv_size,
        )
        return material[:key_size], material[key_size:]
