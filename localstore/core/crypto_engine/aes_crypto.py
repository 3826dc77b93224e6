"""
AES-256-CBC encryption of text payloads with password-derived keys.

The IV is derived together with the key, not drawn at random, so a
given (password, salt, plaintext) always produces the same ciphertext
and there is no integrity tag. Stored files depend on this format.
"""

import base64
import binascii
import logging

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding as sym_padding

from ...config.settings import Settings
from ..errors import CryptoError
from .hash_crypto import HashCrypto
from .symmetric_base import SymmetricCipher

logger = logging.getLogger("LocalStore.Cipher")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  AES-CBC + PKCS7 — 128 / 192 / 256 bit keys
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AESCBCCipher(SymmetricCipher):
    """
    AES in CBC mode with a caller-supplied IV.

    Output format:  [ciphertext padded]
    """
    IV_SIZE    = 16
    BLOCK_BITS = 128

    def __init__(self, key: bytes, iv: bytes):
        if len(key) not in (16, 24, 32):
            raise ValueError(
                f"AES key must be 16, 24, or 32 bytes, got {len(key)}"
            )
        if len(iv) != self.IV_SIZE:
            raise ValueError(
                f"AES-CBC IV must be {self.IV_SIZE} bytes, got {len(iv)}"
            )
        self._key = key
        self._iv  = iv

    def encrypt(self, plaintext: bytes) -> bytes:
        padder = sym_padding.PKCS7(self.BLOCK_BITS).padder()
        padded = padder.update(plaintext) + padder.finalize()
        enc    = Cipher(
            algorithms.AES(self._key), modes.CBC(self._iv)
        ).encryptor()
        return enc.update(padded) + enc.finalize()

    def decrypt(self, data: bytes) -> bytes:
        dec    = Cipher(
            algorithms.AES(self._key), modes.CBC(self._iv)
        ).decryptor()
        padded = dec.update(data) + dec.finalize()
        unpad  = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
        return unpad.update(padded) + unpad.finalize()

    @property
    def cipher_name(self) -> str:
        return f"AES-{len(self._key) * 8}-CBC"

    @property
    def key_size(self) -> int:
        return len(self._key)

    @property
    def iv_size(self) -> int:
        return self.IV_SIZE


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Password-based text encryption
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PasswordCipher:
    """
    Encrypt and decrypt text with a key derived from (password, salt).

    Derivation is expensive, so the resulting AES cipher is built once
    on first use and kept in memory for the lifetime of this object.
    Nothing derived here is ever written to disk.
    """

    def __init__(self, password: str, salt: str,
                 iterations: int = Settings.KDF_ITERATIONS):
        if not password:
            raise CryptoError("A non-empty password is required")
        if not salt:
            raise CryptoError("A non-empty salt is required")
        self._password   = password
        self._salt       = salt
        self._iterations = iterations
        self._cipher: AESCBCCipher | None = None

    def _get_cipher(self) -> AESCBCCipher:
        if self._cipher is None:
            try:
                key, iv = HashCrypto.derive_key_and_iv(
                    self._password, self._salt,
                    key_size=Settings.AES_KEY_SIZE,
                    iv_size=Settings.AES_BLOCK_SIZE,
                    iterations=self._iterations,
                )
            except ValueError as exc:
                raise CryptoError(f"Key derivation failed: {exc}") from exc
            self._cipher = AESCBCCipher(key, iv)
            logger.debug(
                "Created cipher: %s (key=%d bits, iterations=%d)",
                self._cipher.cipher_name, self._cipher.key_size_bits,
                self._iterations,
            )
        return self._cipher

    def encrypt(self, plaintext: str) -> str:
        ct = self._get_cipher().encrypt(plaintext.encode("utf-8"))
        return base64.b64encode(ct).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        try:
            raw = base64.b64decode(ciphertext, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CryptoError("Ciphertext is not valid base64") from exc

        if not raw or len(raw) % Settings.AES_BLOCK_SIZE:
            raise CryptoError(
                f"Ciphertext length {len(raw)} is not a multiple of "
                f"the {Settings.AES_BLOCK_SIZE}-byte block size"
            )

        try:
            pt = self._get_cipher().decrypt(raw)
        except ValueError as exc:
            raise CryptoError(
                "Decryption failed — wrong password or salt?"
            ) from exc

        try:
            return pt.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CryptoError(
                "Decrypted payload is not valid UTF-8 text"
            ) from exc


# ── module-level helpers ─────────────────────────────────────────

def encrypt(password: str, salt: str, plaintext: str,
            iterations: int = Settings.KDF_ITERATIONS) -> str:
    """Encrypt *plaintext* and return it as standard base64 text."""
    return PasswordCipher(password, salt, iterations).encrypt(plaintext)


def decrypt(password: str, salt: str, ciphertext: str,
            iterations: int = Settings.KDF_ITERATIONS) -> str:
    """Reverse encrypt(); raises CryptoError on malformed input."""
    return PasswordCipher(password, salt, iterations).decrypt(ciphertext)
