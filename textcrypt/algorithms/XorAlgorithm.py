# textcrypt/algorithms/XorAlgorithm.py
from itertools import cycle

from textcrypt.adapters import HexAdapter
from textcrypt.EncryptionAlgorithm import AlgorithmTag, EncryptionAlgorithm
from textcrypt.errors import EmptyKeyError


class XorAlgorithm(EncryptionAlgorithm):
    """
    Repeating-key XOR.

    Byte ``i`` of the output is ``data[i] ^ key[i % len(key)]``, which makes
    the transform its own inverse.
    """

    TAG = AlgorithmTag.XOR
    requires_key = True

    def __init__(self, key: bytes) -> None:
        if not key:
            raise EmptyKeyError("XOR key must not be empty")
        self._key = bytes(key)

    @classmethod
    def adapter(cls) -> HexAdapter:
        return HexAdapter()

    def _xor(self, data: bytes) -> bytes:
        return bytes(b ^ k for b, k in zip(data, cycle(self._key)))

    def encrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        return self._xor(data)

    def decrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        return self._xor(data)


def create_xor(key: bytes) -> XorAlgorithm:
    """
    Quick factory for a repeating-key XOR cipher.

    Raises:
        EmptyKeyError: If the key is empty
    """
    return XorAlgorithm(key)
