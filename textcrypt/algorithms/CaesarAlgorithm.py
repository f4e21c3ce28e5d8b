# textcrypt/algorithms/CaesarAlgorithm.py
"""
Caesar (alphabetic shift) cipher.

Case is preserved; digits, punctuation, whitespace and non-ASCII bytes are
left untouched.
"""
from typing import Union

from textcrypt.adapters import RawTextAdapter
from textcrypt.EncryptionAlgorithm import AlgorithmTag, EncryptionAlgorithm

DEFAULT_SHIFT = 3
ALPHABET_SIZE = 26


def _shift_bytes(data: bytes, shift: int) -> bytes:
    out = bytearray(data)
    for i, b in enumerate(out):
        if 0x41 <= b <= 0x5A:
            out[i] = (b - 0x41 + shift) % ALPHABET_SIZE + 0x41
        elif 0x61 <= b <= 0x7A:
            out[i] = (b - 0x61 + shift) % ALPHABET_SIZE + 0x61
    return bytes(out)


def parse_shift(key: Union[str, bytes]) -> int:
    """
    Parse a shift from key text, falling back to ``DEFAULT_SHIFT``.

    Unparsable input is not an error.
    """
    if isinstance(key, bytes):
        try:
            key = key.decode("utf-8")
        except UnicodeDecodeError:
            return DEFAULT_SHIFT
    try:
        return int(key.strip())
    except ValueError:
        return DEFAULT_SHIFT


class CaesarAlgorithm(EncryptionAlgorithm):
    """Fixed alphabetic shift, normalized into 0-25."""

    TAG = AlgorithmTag.CAESAR
    requires_key = True
    key_optional = True

    def __init__(self, shift: int = DEFAULT_SHIFT) -> None:
        self._shift = shift % ALPHABET_SIZE

    @property
    def shift(self) -> int:
        return self._shift

    @classmethod
    def adapter(cls) -> RawTextAdapter:
        return RawTextAdapter()

    def encrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        return _shift_bytes(data, self._shift)

    def decrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        return _shift_bytes(data, (ALPHABET_SIZE - self._shift) % ALPHABET_SIZE)


def create_caesar(key: Union[str, bytes, int] = DEFAULT_SHIFT) -> CaesarAlgorithm:
    """Build a Caesar cipher from an integer shift or key text."""
    if isinstance(key, int):
        return CaesarAlgorithm(key)
    return CaesarAlgorithm(parse_shift(key))
