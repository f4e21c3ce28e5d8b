# textcrypt/errors.py
"""
Exception hierarchy for cipher construction and per-call failures.

Every error raised by an encrypt/decrypt call is a ``CipherError``, so a
caller can recover from all of them with a single ``except`` clause.
"""


class CipherError(Exception):
    """Base exception for cipher errors."""

    kind: str = "CipherError"


class InvalidFormatError(CipherError):
    """Raised when serialized ciphertext does not split into the expected parts."""

    kind = "InvalidFormat"


class InvalidHexEncodingError(CipherError):
    """Raised when an IV or payload is not valid hex."""

    kind = "InvalidHexEncoding"


class InvalidKeyLengthError(CipherError):
    """Raised when key material has the wrong length for the algorithm."""

    kind = "InvalidKeyLength"


class EmptyKeyError(InvalidKeyLengthError):
    """Raised when an algorithm that needs key material gets none."""

    kind = "EmptyKey"


class DecryptionFailureError(CipherError):
    """Raised when ciphertext cannot be turned back into valid text."""

    kind = "DecryptionFailure"


class UnknownAlgorithmError(CipherError):
    """Raised when an algorithm name does not match any AlgorithmTag."""

    kind = "UnknownAlgorithm"


class InvalidTextError(CipherError):
    """Raised when plaintext cannot be encoded as UTF-8."""

    kind = "InvalidText"
