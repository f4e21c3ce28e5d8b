# textcrypt/TextCipher.py
"""
Text facade over the five algorithms.

A TextCipher owns exactly one algorithm, chosen at construction, and turns
text into the algorithm's serialized form and back:

    cipher = TextCipher("aes128", "thisisasecretkey")
    token = cipher.encrypt("secureData")   # "<hex iv>:<hex ciphertext>"
    cipher.decrypt(token)                  # "secureData"
"""
import os
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union

from textcrypt.EncryptionAlgorithm import AlgorithmTag, EncryptionAlgorithm
from textcrypt.algorithms import build_algorithm
from textcrypt.config import CipherConfig
from textcrypt.errors import CipherError, DecryptionFailureError
from textcrypt.util.key_providers import KeyProvider, resolve_key
from textcrypt.util.logger import get_logger

logger = get_logger(__name__)

KeyMaterial = Union[str, bytes, KeyProvider, None]


@dataclass
class CipherResult:
    """Result wrapper from the non-raising facade operations."""

    output: str
    metrics: Dict[str, Any] = field(default_factory=dict)
    success: bool = True
    error: Optional[str] = None
    error_kind: Optional[str] = None

    def __str__(self) -> str:
        return self.output

    def __repr__(self) -> str:
        if not self.success:
            return f"<CipherResult: failed {self.error_kind}>"
        elapsed = self.metrics.get("elapsed_ms", "?")
        return f"<CipherResult: {len(self.output)} chars, {elapsed}ms>"


class TextCipher:
    """
    Facade that owns one EncryptionAlgorithm and its text format.

    Instances hold no mutable state, so one instance can be shared between
    threads; the only per-call randomness is the AES IV from ``os.urandom``.
    """

    def __init__(self, algorithm: Union[AlgorithmTag, str], key: KeyMaterial = "") -> None:
        """
        Args:
            algorithm: AlgorithmTag or a name accepted by ``AlgorithmTag.parse``
            key: Key text, raw bytes, or a KeyProvider. Ignored by Base64 and
                ROT13; Caesar reads it as an integer shift (default 3).

        Raises:
            UnknownAlgorithmError: If ``algorithm`` names no algorithm
            InvalidKeyLengthError: If an AES key is not 16 bytes
            EmptyKeyError: If an XOR key is empty
        """
        tag = algorithm if isinstance(algorithm, AlgorithmTag) else AlgorithmTag.parse(algorithm)
        self._algorithm: EncryptionAlgorithm = build_algorithm(tag, resolve_key(key))
        self._adapter = type(self._algorithm).adapter()
        logger.debug("Initialized TextCipher with %s", tag.value)

    @classmethod
    def from_config(cls, config: CipherConfig) -> "TextCipher":
        return cls(config.algorithm, config.key_provider)

    @property
    def algorithm(self) -> AlgorithmTag:
        return self._algorithm.identity()

    def encrypt(self, plaintext: str) -> str:
        """Encrypt ``plaintext`` into the algorithm's serialized text form."""
        data = self._adapter.prepare_encrypt_input(plaintext)
        iv = os.urandom(self._adapter.IV_SIZE)
        ciphertext = self._algorithm.encrypt(data, iv)
        return self._adapter.extract_encrypt_output(ciphertext, iv)

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt serialized ``ciphertext`` back to text.

        Raises:
            InvalidFormatError: Input does not split into the expected parts
            InvalidHexEncodingError: IV or payload is not valid hex
            DecryptionFailureError: Wrong key, corrupted data, or non-UTF-8 result
        """
        data, iv = self._adapter.prepare_decrypt_input(ciphertext)
        plaintext = self._algorithm.decrypt(data, iv)

        # Transforms report failure as an empty result from non-empty input
        if not plaintext and (data or iv):
            raise DecryptionFailureError(
                f"Decryption failed: {self.algorithm.value} could not decode input"
            )
        return self._adapter.extract_decrypt_output(plaintext)

    def try_encrypt(self, plaintext: str) -> CipherResult:
        """Like ``encrypt`` but returns a CipherResult instead of raising."""
        return self._run("encrypt", self.encrypt, plaintext)

    def try_decrypt(self, ciphertext: str) -> CipherResult:
        """Like ``decrypt`` but returns a CipherResult instead of raising."""
        return self._run("decrypt", self.decrypt, ciphertext)

    def _run(self, operation: str, fn: Callable[[str], str], text: str) -> CipherResult:
        start = time.perf_counter()
        metrics: Dict[str, Any] = {
            "algorithm": self.algorithm.value,
            "operation": operation,
            "input_chars": len(text),
        }
        try:
            output = fn(text)
        except CipherError as e:
            metrics["elapsed_ms"] = round((time.perf_counter() - start) * 1000, 3)
            logger.debug("%s %s failed: %s", self.algorithm.value, operation, e.kind)
            return CipherResult(
                output="",
                metrics=metrics,
                success=False,
                error=str(e),
                error_kind=e.kind,
            )

        metrics["output_chars"] = len(output)
        metrics["elapsed_ms"] = round((time.perf_counter() - start) * 1000, 3)
        return CipherResult(output=output, metrics=metrics)

    def __repr__(self) -> str:
        return f"<TextCipher: {self.algorithm.value}>"
