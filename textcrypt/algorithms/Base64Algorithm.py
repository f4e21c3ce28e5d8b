# textcrypt/algorithms/Base64Algorithm.py
"""Base64 encoding exposed through the EncryptionAlgorithm interface."""
import base64
import binascii

from textcrypt.adapters import RawTextAdapter
from textcrypt.EncryptionAlgorithm import AlgorithmTag, EncryptionAlgorithm


class Base64Algorithm(EncryptionAlgorithm):
    """Standard, padded Base64. No key."""

    TAG = AlgorithmTag.BASE64

    @classmethod
    def adapter(cls) -> RawTextAdapter:
        return RawTextAdapter()

    def encrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        return base64.b64encode(data)

    def decrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        """Decode ``data``; malformed input yields ``b""``."""
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error:
            return b""


def create_base64() -> Base64Algorithm:
    return Base64Algorithm()
