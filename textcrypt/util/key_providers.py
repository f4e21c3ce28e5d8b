# textcrypt/util/key_providers.py
"""
Key Provider architecture for decoupling key sources from the cipher facade.

Usage:
    cipher = TextCipher(AlgorithmTag.AES128, EnvKeyProvider("TEXTCRYPT_KEY"))

A provider is resolved once, when the facade is constructed; the resulting
bytes are validated by the selected algorithm.
"""
import base64
import binascii
import os
from abc import ABC, abstractmethod
from typing import Optional, Union


class KeyProviderError(Exception):
    """Base exception for key provider errors."""


class KeyNotFoundError(KeyProviderError):
    """Raised when a key cannot be retrieved."""


class KeyValidationError(KeyProviderError):
    """Raised when a key fails validation."""


class KeyProvider(ABC):
    """
    Abstract base for key providers.

    Implement this protocol to create custom key retrieval strategies.
    """

    @abstractmethod
    def get_key(self, key_id: Optional[str] = None) -> bytes:
        """
        Retrieve key material.

        Args:
            key_id: Optional identifier for the key

        Returns:
            Raw key bytes

        Raises:
            KeyNotFoundError: If key cannot be retrieved
            KeyProviderError: For other provider-specific errors
        """
        ...


class LocalKeyProvider(KeyProvider):
    """
    Simple in-memory key provider.

    Text keys are UTF-8 encoded.
    """

    def __init__(self, key: Union[str, bytes]):
        self._key = key.encode("utf-8") if isinstance(key, str) else bytes(key)

    def get_key(self, key_id: Optional[str] = None) -> bytes:
        return self._key


class EnvKeyProvider(KeyProvider):
    """
    Retrieve key from environment variable.

    Best for: Container deployments, CI/CD pipelines.
    """

    def __init__(
        self,
        env_var: str,
        encoding: str = "utf-8",
        base64_encoded: bool = False,
    ):
        self._env_var = env_var
        self._encoding = encoding
        self._base64_encoded = base64_encoded

    def get_key(self, key_id: Optional[str] = None) -> bytes:
        value = os.environ.get(self._env_var)
        if value is None:
            raise KeyNotFoundError(f"Environment variable {self._env_var} not set")

        if not self._base64_encoded:
            return value.encode(self._encoding)

        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise KeyValidationError(
                f"Environment variable {self._env_var} is not valid base64"
            ) from e


def resolve_key(key: Union[str, bytes, KeyProvider, None]) -> bytes:
    """Turn a raw key or a provider into key bytes."""
    if key is None:
        return b""
    if isinstance(key, KeyProvider):
        return key.get_key()
    return LocalKeyProvider(key).get_key()
