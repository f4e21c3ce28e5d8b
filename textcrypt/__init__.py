# textcrypt/__init__.py
"""
textcrypt - uniform text encrypt/decrypt over AES-128-CBC, Base64, ROT13,
XOR and Caesar.

Quick start:
    from textcrypt import TextCipher

    cipher = TextCipher("aes128", "thisisasecretkey")
    token = cipher.encrypt("secureData")
    assert cipher.decrypt(token) == "secureData"
"""
from textcrypt.EncryptionAlgorithm import AlgorithmAdapter, AlgorithmTag, EncryptionAlgorithm
from textcrypt.TextCipher import CipherResult, TextCipher
from textcrypt.config import CipherConfig
from textcrypt.errors import (
    CipherError,
    DecryptionFailureError,
    EmptyKeyError,
    InvalidFormatError,
    InvalidHexEncodingError,
    InvalidKeyLengthError,
    InvalidTextError,
    UnknownAlgorithmError,
)
from textcrypt.util.key_providers import (
    EnvKeyProvider,
    KeyNotFoundError,
    KeyProvider,
    KeyProviderError,
    KeyValidationError,
    LocalKeyProvider,
)

__all__ = [
    "AlgorithmAdapter",
    "AlgorithmTag",
    "CipherConfig",
    "CipherError",
    "CipherResult",
    "DecryptionFailureError",
    "EmptyKeyError",
    "EncryptionAlgorithm",
    "EnvKeyProvider",
    "InvalidFormatError",
    "InvalidHexEncodingError",
    "InvalidKeyLengthError",
    "InvalidTextError",
    "KeyNotFoundError",
    "KeyProvider",
    "KeyProviderError",
    "KeyValidationError",
    "LocalKeyProvider",
    "TextCipher",
    "UnknownAlgorithmError",
]
