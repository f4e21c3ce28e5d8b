# textcrypt/config.py
"""
Configuration for building a TextCipher.

``CipherConfig.from_env`` reads ``<PREFIX>_ALGORITHM`` (default ``aes128``)
and takes the key from ``<PREFIX>_KEY``. Caesar uses its default shift
when the key variable is unset. The key variable is read lazily by
an EnvKeyProvider, so an algorithm that ignores keys never touches it.
"""
import os
from dataclasses import dataclass
from typing import Optional

from textcrypt.EncryptionAlgorithm import AlgorithmTag
from textcrypt.algorithms import ALGORITHM_CLASSES
from textcrypt.util.key_providers import EnvKeyProvider, KeyProvider

DEFAULT_PREFIX = "TEXTCRYPT"
DEFAULT_ALGORITHM = AlgorithmTag.AES128


@dataclass(frozen=True)
class CipherConfig:
    """Algorithm selection plus the source of its key material."""

    algorithm: AlgorithmTag = DEFAULT_ALGORITHM
    key_provider: Optional[KeyProvider] = None

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        base64_key: bool = False,
    ) -> "CipherConfig":
        """
        Build a config from environment variables.

        Args:
            prefix: Variable name prefix
            base64_key: Whether the key variable holds base64-encoded bytes

        Raises:
            UnknownAlgorithmError: If the algorithm variable names no algorithm
        """
        name = os.environ.get(f"{prefix}_ALGORITHM", DEFAULT_ALGORITHM.value)
        algorithm = AlgorithmTag.parse(name)

        key_provider: Optional[KeyProvider] = None
        algo_class = ALGORITHM_CLASSES[algorithm]
        key_var = f"{prefix}_KEY"
        if algo_class.requires_key and (key_var in os.environ or not algo_class.key_optional):
            key_provider = EnvKeyProvider(key_var, base64_encoded=base64_key)
        return cls(algorithm=algorithm, key_provider=key_provider)

