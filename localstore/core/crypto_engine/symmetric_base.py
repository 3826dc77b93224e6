"""
Abstract base class for the symmetric ciphers used by LocalStore.

A cipher is built from already-derived key material, so the storage
layer only deals with bytes in and bytes out.
"""

from abc import ABC, abstractmethod


class SymmetricCipher(ABC):
    """
    Unified interface for symmetric encryption.

    encrypt() returns the raw ciphertext; the IV is part of the key
    material handed to the constructor and is never prepended.
    """

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt plaintext → raw ciphertext."""

    @abstractmethod
    def decrypt(self, data: bytes) -> bytes:
        """Decrypt ciphertext produced by encrypt() → plaintext."""

    @property
    @abstractmethod
    def cipher_name(self) -> str:
        """Human-readable name, e.g. 'AES-256-CBC'."""

    @property
    @abstractmethod
    def key_size(self) -> int:
        """Encryption key size in bytes."""

    @property
    @abstractmethod
    def iv_size(self) -> int:
        """IV size in bytes."""

    @property
    def key_size_bits(self) -> int:
        return self.key_size * 8
