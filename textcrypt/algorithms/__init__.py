# textcrypt/algorithms/__init__.py
"""
Encryption algorithm implementations.

``build_algorithm`` is the single factory that turns an AlgorithmTag and raw
key bytes into a concrete implementation.
"""
from typing import Callable, Dict, Type

from textcrypt.EncryptionAlgorithm import AlgorithmTag, EncryptionAlgorithm
from textcrypt.algorithms.Aes128CbcAlgorithm import Aes128CbcAlgorithm, create_aes128cbc
from textcrypt.algorithms.Base64Algorithm import Base64Algorithm, create_base64
from textcrypt.algorithms.CaesarAlgorithm import (
    DEFAULT_SHIFT,
    CaesarAlgorithm,
    create_caesar,
    parse_shift,
)
from textcrypt.algorithms.Rot13Algorithm import Rot13Algorithm, create_rot13, rot13
from textcrypt.algorithms.XorAlgorithm import XorAlgorithm, create_xor

_FACTORIES: Dict[AlgorithmTag, Callable[[bytes], EncryptionAlgorithm]] = {
    AlgorithmTag.AES128: create_aes128cbc,
    AlgorithmTag.BASE64: lambda key: create_base64(),
    AlgorithmTag.ROT13: lambda key: create_rot13(),
    AlgorithmTag.XOR: create_xor,
    AlgorithmTag.CAESAR: create_caesar,
}

ALGORITHM_CLASSES: Dict[AlgorithmTag, Type[EncryptionAlgorithm]] = {
    AlgorithmTag.AES128: Aes128CbcAlgorithm,
    AlgorithmTag.BASE64: Base64Algorithm,
    AlgorithmTag.ROT13: Rot13Algorithm,
    AlgorithmTag.XOR: XorAlgorithm,
    AlgorithmTag.CAESAR: CaesarAlgorithm,
}

_missing = (set(AlgorithmTag) - set(_FACTORIES)) | (set(AlgorithmTag) - set(ALGORITHM_CLASSES))
if _missing:
    raise RuntimeError(f"No factory registered for: {sorted(t.value for t in _missing)}")


def build_algorithm(tag: AlgorithmTag, key: bytes = b"") -> EncryptionAlgorithm:
    """
    Build the implementation for ``tag``, validating ``key`` as it requires.

    Raises:
        InvalidKeyLengthError: AES key is not 16 bytes
        EmptyKeyError: XOR key is empty
    """
    return _FACTORIES[tag](key)


__all__ = [
    "ALGORITHM_CLASSES",
    "Aes128CbcAlgorithm",
    "Base64Algorithm",
    "CaesarAlgorithm",
    "DEFAULT_SHIFT",
    "Rot13Algorithm",
    "XorAlgorithm",
    "build_algorithm",
    "create_aes128cbc",
    "create_base64",
    "create_caesar",
    "create_rot13",
    "create_xor",
    "parse_shift",
    "rot13",
]
