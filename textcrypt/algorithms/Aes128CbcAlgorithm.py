# textcrypt/algorithms/Aes128CbcAlgorithm.py
"""
AES-128-CBC Algorithm Implementation.

CBC mode with PKCS7 padding. There is no authentication tag: a wrong key is
detected only when the padding or the UTF-8 check downstream fails.

Usage:
    algo = create_aes128cbc(b"thisisasecretkey")
    iv = os.urandom(Aes128CbcAlgorithm.IV_SIZE)
    ciphertext = algo.encrypt(b"secret", iv)
    algo.decrypt(ciphertext, iv)  # b"secret"
"""
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from textcrypt.adapters import IvHexAdapter
from textcrypt.EncryptionAlgorithm import AlgorithmTag, EncryptionAlgorithm
from textcrypt.errors import InvalidKeyLengthError


class Aes128CbcAlgorithm(EncryptionAlgorithm):
    """
    AES-128 in CBC mode with PKCS7 padding.

    The key is fixed at construction; the IV is supplied per call.
    """

    TAG = AlgorithmTag.AES128
    requires_key = True

    KEY_SIZE: int = 16    # 128 bits
    IV_SIZE: int = 16     # one AES block
    BLOCK_BITS: int = 128

    def __init__(self, key: bytes) -> None:
        if len(key) != self.KEY_SIZE:
            raise InvalidKeyLengthError(
                f"Expected {self.KEY_SIZE}-byte key, got {len(key)} bytes"
            )
        self._key = bytes(key)

    @classmethod
    def adapter(cls) -> IvHexAdapter:
        return IvHexAdapter(cls.IV_SIZE)

    def _cipher(self, iv: bytes) -> Cipher:
        return Cipher(algorithms.AES(self._key), modes.CBC(iv))

    def encrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        padder = padding.PKCS7(self.BLOCK_BITS).padder()
        padded = padder.update(data) + padder.finalize()

        encryptor = self._cipher(iv).encryptor()
        return encryptor.update(padded) + encryptor.finalize()

    def decrypt(self, data: bytes, iv: bytes = b"") -> bytes:
        """
        Decrypt and unpad ``data``.

        Returns ``b""`` if the IV, block length or padding is invalid; the
        caller treats an empty result as a decryption failure.
        """
        try:
            decryptor = self._cipher(iv).decryptor()
            padded = decryptor.update(data) + decryptor.finalize()

            unpadder = padding.PKCS7(self.BLOCK_BITS).unpadder()
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError:
            return b""


def create_aes128cbc(key: bytes) -> Aes128CbcAlgorithm:
    """
    Quick factory for creating AES-128-CBC with a local key.

    Args:
        key: 16-byte encryption key

    Raises:
        InvalidKeyLengthError: If the key is not 16 bytes
    """
    return Aes128CbcAlgorithm(key)
