"""
LocalStore Crypto Engine — key derivation and value encryption.
"""

from .hash_crypto    import HashCrypto
from .symmetric_base import SymmetricCipher
from .aes_crypto     import AESCBCCipher, PasswordCipher, encrypt, decrypt

__all__ = [
    "HashCrypto", "SymmetricCipher",
    "AESCBCCipher", "PasswordCipher",
    "encrypt", "decrypt",
]
