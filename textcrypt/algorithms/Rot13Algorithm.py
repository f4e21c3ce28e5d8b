# textcrypt/algorithms/Rot13Algorithm.py
from textcrypt.adapters import RawTextAdapter
from textcrypt.EncryptionAlgorithm import AlgorithmTag, EncryptionAlgorithm


def rot13(data: bytes) -> bytes:
    """Rotate ASCII letters by 13; every other byte passes through."""
    out = bytearray(data)
    for i, b in enumerate(out):
        if 0x41 <= b <= 0x4D or 0x61 <= b <= 0x6D:  # A-M, a-m
            out[i] = b + 13
        elif 0x4E <= b <= 0x5A or 0x6E <= b <= 0x7A:  # N-Z, n-z
            out[i] = b - 13
    return bytes(out)


class Rot13Algorithm(EncryptionAlgorithm):
    """
    ROT13 substitution cipher.

    ROT13 is its own inverse: encrypt and decrypt are the same operation.
    """

    TAG = AlgorithmTag.ROT13

    @classmethod
    def adapter(cls) -> RawTextAdapter:
        return RawTextAdapter()

    def encrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        return rot13(data)

    def decrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        return rot13(data)


def create_rot13() -> Rot13Algorithm:
    return Rot13Algorithm()
