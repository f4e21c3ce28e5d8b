# textcrypt/adapters.py
"""
Text format adapters.

Binary-output ciphers are serialized as lowercase hex; byte-preserving
ciphers pass their output through as text.
"""
import binascii
from typing import Tuple

from textcrypt.EncryptionAlgorithm import AlgorithmAdapter
from textcrypt.errors import InvalidFormatError, InvalidHexEncodingError


def _from_hex(value: str, what: str) -> bytes:
    try:
        return binascii.unhexlify(value)
    except ValueError as e:
        raise InvalidHexEncodingError(f"Invalid hex encoding in {what}") from e


class RawTextAdapter(AlgorithmAdapter):
    """Output bytes are already valid text (Base64, ROT13, Caesar)."""

    def extract_encrypt_output(self, data: bytes, iv: bytes) -> str:
        return data.decode("utf-8")

    def prepare_decrypt_input(self, text: str) -> Tuple[bytes, bytes]:
        try:
            return text.encode("utf-8"), b""
        except UnicodeEncodeError as e:
            raise InvalidFormatError("Invalid format: input is not encodable as UTF-8") from e


class HexAdapter(AlgorithmAdapter):
    """Output may hold arbitrary bytes, so it travels as hex (XOR)."""

    def extract_encrypt_output(self, data: bytes, iv: bytes) -> str:
        return data.hex()

    def prepare_decrypt_input(self, text: str) -> Tuple[bytes, bytes]:
        return _from_hex(text, "payload"), b""


class IvHexAdapter(AlgorithmAdapter):
    """
    ``<hex iv>:<hex ciphertext>`` for block ciphers that need a fresh IV.
    """

    SEPARATOR = ":"

    def __init__(self, iv_size: int = 16) -> None:
        self.IV_SIZE = iv_size

    def extract_encrypt_output(self, data: bytes, iv: bytes) -> str:
        return f"{iv.hex()}{self.SEPARATOR}{data.hex()}"

    def prepare_decrypt_input(self, text: str) -> Tuple[bytes, bytes]:
        parts = text.split(self.SEPARATOR)
        if len(parts) != 2:
            raise InvalidFormatError("Invalid format: expected IV:encrypted_data")

        iv = _from_hex(parts[0], "IV")
        data = _from_hex(parts[1], "encrypted data")
        if len(iv) != self.IV_SIZE:
            raise InvalidFormatError(
                f"Invalid format: expected {self.IV_SIZE}-byte IV, got {len(iv)} bytes"
            )
        return data, iv
