# textcrypt/EncryptionAlgorithm.py
from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple

from textcrypt.errors import DecryptionFailureError, InvalidTextError, UnknownAlgorithmError


class AlgorithmTag(str, Enum):
    """
    Closed set of supported algorithms.

    The value is the human-readable name accepted by ``AlgorithmTag.parse``.
    """

    AES128 = "aes128"
    BASE64 = "base64"
    ROT13 = "rot13"
    XOR = "xor"
    CAESAR = "caesar"

    @classmethod
    def parse(cls, name: str) -> "AlgorithmTag":
        """Map a name such as ``"AES-128"`` or ``"caesar"`` to a tag."""
        normalized = name.strip().lower().replace("-", "").replace("_", "")
        for tag in cls:
            if tag.value == normalized:
                return tag
        raise UnknownAlgorithmError(
            f"Unknown algorithm '{name}'. "
            f"Expected one of: {', '.join(t.value for t in cls)}"
        )


class EncryptionAlgorithm(ABC):
    """
    Base class for all encryption algorithms.

    Subclasses implement ``encrypt`` and ``decrypt`` as pure byte transforms
    and set ``TAG``. The ``iv`` argument is only meaningful to block ciphers;
    everything else ignores it.
    """

    TAG: AlgorithmTag
    requires_key: bool = False
    key_optional: bool = False

    @abstractmethod
    def encrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        """Encrypt ``data`` and return the ciphertext bytes."""
        ...

    @abstractmethod
    def decrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        """Decrypt ``data`` and return the plaintext bytes."""
        ...

    def identity(self) -> AlgorithmTag:
        return self.TAG

    @classmethod
    def adapter(cls) -> "AlgorithmAdapter":
        """Return the text format adapter for this algorithm."""
        raise NotImplementedError(f"{cls.__name__} does not define a text format")

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.identity().value}>"


class AlgorithmAdapter(ABC):
    """
    Defines how to convert between text and an algorithm's raw bytes.

    Each algorithm names a companion adapter through ``adapter()``. Encrypt
    output is serialized together with the IV (if any); decrypt input is
    split back into payload and IV.
    """

    IV_SIZE: int = 0

    def prepare_encrypt_input(self, text: str) -> bytes:
        """Convert plaintext to the bytes fed to ``encrypt``."""
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidTextError("Plaintext is not encodable as UTF-8") from e

    @abstractmethod
    def extract_encrypt_output(self, data: bytes, iv: bytes) -> str:
        """Serialize ciphertext bytes (and IV) into text."""

    @abstractmethod
    def prepare_decrypt_input(self, text: str) -> Tuple[bytes, bytes]:
        """Parse serialized text into ``(ciphertext, iv)``."""

    def extract_decrypt_output(self, data: bytes) -> str:
        """Validate decrypted bytes as UTF-8 text."""
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionFailureError("Decryption failed: invalid UTF-8") from e
